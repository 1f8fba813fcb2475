"""Shared test fixtures for the intake endpoints."""

import json
import os
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

INTAKE_ENV_VARS = [
    "AWS_REGION",
    "ENVIRONMENT",
    "LOG_LEVEL",
    "DATABASE_PASSWORD",
    "DATABASE_SECRET_ARN",
    "BOOKINGS_TABLE",
    "INQUIRIES_TABLE",
    "PHOTO_BUCKET",
    "S3_ENDPOINT",
    "PHOTO_PUBLIC_BASE_URL",
    "GOOGLE_SERVICE_ACCOUNT_EMAIL",
    "GOOGLE_PRIVATE_KEY",
    "GOOGLE_PRIVATE_KEY_SECRET_ARN",
    "GOOGLE_CALENDAR_ID",
    "NOTIFICATION_EMAIL_FROM",
    "NOTIFICATION_EMAIL_TO",
]


@pytest.fixture
def intake_env(monkeypatch):
    """Unset intake configuration so every test starts from the defaults."""
    from core.config import _reset_config

    for name in INTAKE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    _reset_config()
    yield monkeypatch
    _reset_config()


@pytest.fixture
def lambda_context():
    return SimpleNamespace(aws_request_id="req-test-0001", function_name="intake-test")


def _make_event(body=None, method="POST", raw_body=None):
    """API Gateway REST proxy event carrying ``body`` as JSON."""
    return {
        "httpMethod": method,
        "headers": {"content-type": "application/json"},
        "body": raw_body if raw_body is not None else (json.dumps(body) if body is not None else None),
        "isBase64Encoded": False,
    }


# PostgreSQL fixtures
@pytest.fixture
def pg_connection():
    """Provide a PostgreSQL connection for integration tests."""
    import psycopg
    from core.config import get_config

    config = get_config()
    conn = psycopg.connect(
        config.database_url or os.environ.get("DATABASE_URL", ""),
        password=config.database_password or None,
    )
    yield conn

    # Rollback any uncommitted changes
    conn.rollback()
    conn.close()


@pytest.fixture
def make_event():
    return _make_event
