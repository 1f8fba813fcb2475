"""
Business services for the intake endpoints.

- forms.py: lenient form-field coercion shared by both endpoints
- booking.py: booking pricing, scheduling and calendar event construction
- inquiry.py: inquiry record construction and photo decoding
- notification.py: SES staff notification for new inquiries
"""

__all__: list[str] = []
