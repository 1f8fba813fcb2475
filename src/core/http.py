"""API Gateway proxy event helpers: request parsing and JSON responses."""

import base64
import json
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any
from uuid import UUID


def request_method(event: dict[str, Any]) -> str:
    """HTTP method from a REST API (v1) or HTTP API (v2) proxy event."""
    method = event.get("httpMethod") or event.get("requestContext", {}).get("http", {}).get("method") or ""
    return str(method).upper()


def parse_json_body(event: dict[str, Any]) -> Any:
    """Decode the request body as JSON.

    Raises ValueError (json.JSONDecodeError included) when the body is
    absent or malformed.
    """
    body = event.get("body")
    if body is None:
        raise ValueError("Request body is empty")
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    return json.loads(body)


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, UUID):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def preflight_response(cors_headers: dict[str, str]) -> dict[str, Any]:
    return {"statusCode": 200, "headers": dict(cors_headers), "body": "ok"}


def json_response(status: int, payload: dict[str, Any], cors_headers: dict[str, str]) -> dict[str, Any]:
    return {
        "statusCode": status,
        "headers": {**cors_headers, "Content-Type": "application/json"},
        "body": json.dumps(payload, default=_json_default),
    }
