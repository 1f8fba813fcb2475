from datetime import datetime

from pydantic import BaseModel, model_validator


class CalendarEvent(BaseModel):
    summary: str
    description: str = ""
    start: datetime
    end: datetime
    attendee_email: str | None = None

    @model_validator(mode="after")
    def end_after_start(self) -> "CalendarEvent":
        if self.end <= self.start:
            raise ValueError("end must be after start")
        return self
