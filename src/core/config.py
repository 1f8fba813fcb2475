from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

_cached_secrets: dict[str, str] = {}


def _resolve_secret(env_name: str, arn_env_name: str) -> str:
    """Resolve a secret from its env var, or Secrets Manager by ARN, with caching."""
    if env_name in _cached_secrets:
        return _cached_secrets[env_name]

    # Local dev: use env var directly
    direct = environ.get(env_name, "")
    if direct:
        _cached_secrets[env_name] = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get(arn_env_name, "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager")
    _cached_secrets[env_name] = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_secrets[env_name]


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    environment: str
    log_level: str = "INFO"
    database_url: str = ""
    database_password: str = ""
    bookings_table: str
    inquiries_table: str
    photo_bucket: str
    s3_endpoint: str | None = None
    photo_public_base_url: str = ""
    google_service_account_email: str = ""
    google_private_key: str = ""
    google_calendar_id: str = "primary"
    notification_email_from: str = ""
    notification_email_to: str = ""

    @property
    def calendar_configured(self) -> bool:
        return bool(self.google_service_account_email and self.google_private_key)

    @property
    def notifications_configured(self) -> bool:
        return bool(self.notification_email_from and self.notification_email_to)


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config. For testing only."""
    global _cached_config
    _cached_config = None
    _cached_secrets.clear()


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        environment=environ.get("ENVIRONMENT", "local"),
        log_level=environ.get("LOG_LEVEL", "INFO"),
        database_url=environ.get("DATABASE_URL", ""),
        database_password=_resolve_secret("DATABASE_PASSWORD", "DATABASE_SECRET_ARN"),
        bookings_table=environ.get("BOOKINGS_TABLE", "bookings"),
        inquiries_table=environ.get("INQUIRIES_TABLE", "customer_inquiries"),
        photo_bucket=environ.get("PHOTO_BUCKET", "dog-photos"),
        s3_endpoint=environ.get("S3_ENDPOINT"),
        photo_public_base_url=environ.get("PHOTO_PUBLIC_BASE_URL", ""),
        google_service_account_email=environ.get("GOOGLE_SERVICE_ACCOUNT_EMAIL", ""),
        google_private_key=_resolve_secret("GOOGLE_PRIVATE_KEY", "GOOGLE_PRIVATE_KEY_SECRET_ARN"),
        google_calendar_id=environ.get("GOOGLE_CALENDAR_ID", "primary"),
        notification_email_from=environ.get("NOTIFICATION_EMAIL_FROM", ""),
        notification_email_to=environ.get("NOTIFICATION_EMAIL_TO", ""),
    )
    return _cached_config
