"""
Utilities to centralize configuration handling across the resort services.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

STORE_BACKENDS = {"dynamodb", "memory"}


@dataclass
class AppConfig:
    """Simple container for application level settings."""

    app_name: str
    # Document/object store
    store_backend: str
    aws_region: str
    aws_access_key_id: str
    aws_secret_access_key: str
    dynamodb_endpoint_url: str
    table_prefix: str
    s3_bucket: str
    upload_url_expires_seconds: int
    store_max_attempts: int
    store_timeout_seconds: int
    # App settings
    resort_timezone: str
    log_level: str
    debug_mode: bool
    auto_provision_tables: bool
    port: int
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @property
    def timezone(self):
        """Timezone used for calendar-aligned report windows, None for host local."""
        if not self.resort_timezone:
            return None
        return ZoneInfo(self.resort_timezone)

    def table_name(self, collection: str) -> str:
        return f"{self.table_prefix}{collection}"


def _read_env(name: str, default: str | None = None) -> str:
    """
    Internal helper to fetch environment variables with support for defaults.
    """
    value = os.getenv(name)
    if value is None:
        if default is None:
            raise RuntimeError(f"Missing required environment variable '{name}'")
        value = default
    return value


def read_bool(name: str, default: str = "false") -> bool:
    value = _read_env(name, default)
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_list(name: str, default: str) -> list[str]:
    raw = _read_env(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def validate_required_env_vars() -> None:
    """
    Validate that the environment describes a usable configuration.

    Checks the values that would otherwise only fail on the first request
    (backend name, numeric settings, timezone name).

    Raises:
        RuntimeError: If any variable has an invalid value
    """
    errors = []

    backend = os.getenv("STORE_BACKEND", "dynamodb").strip().lower()
    if backend not in STORE_BACKENDS:
        errors.append(
            f"STORE_BACKEND must be one of {', '.join(sorted(STORE_BACKENDS))}, got: {backend}"
        )

    for name in (
        "UPLOAD_URL_EXPIRES_SECONDS",
        "STORE_MAX_ATTEMPTS",
        "STORE_TIMEOUT_SECONDS",
        "PORT",
    ):
        raw = os.getenv(name, "")
        if not raw:
            continue
        try:
            if int(raw) < 1:
                errors.append(f"{name} must be a positive integer, got: {raw}")
        except ValueError:
            errors.append(f"{name} must be a valid integer, got: {raw}")

    tz_name = os.getenv("RESORT_TIMEZONE", "")
    if tz_name:
        try:
            ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"RESORT_TIMEZONE is not a known timezone: {tz_name}")

    if errors:
        error_msg = "\nConfiguration Errors - invalid environment variables:\n"
        for error in errors:
            error_msg += f"  - {error}\n"
        raise RuntimeError(error_msg)


def load_config(app_name: str) -> AppConfig:
    """
    Produce an AppConfig instance populated from environment variables.

    Each service passes its desired `app_name` to keep logs easy to
    differentiate while still reusing the same config loader.
    """
    return AppConfig(
        app_name=app_name,
        store_backend=_read_env("STORE_BACKEND", "dynamodb").strip().lower(),
        aws_region=_read_env("AWS_REGION", "ap-south-1"),
        aws_access_key_id=_read_env("AWS_ACCESS_KEY_ID", ""),
        aws_secret_access_key=_read_env("AWS_SECRET_ACCESS_KEY", ""),
        dynamodb_endpoint_url=_read_env("DYNAMODB_ENDPOINT_URL", ""),
        table_prefix=_read_env("TABLE_PREFIX", "JamJam"),
        s3_bucket=_read_env("S3_BUCKET", "jamjam-resort-images"),
        upload_url_expires_seconds=int(_read_env("UPLOAD_URL_EXPIRES_SECONDS", "3600")),
        store_max_attempts=int(_read_env("STORE_MAX_ATTEMPTS", "3")),
        store_timeout_seconds=int(_read_env("STORE_TIMEOUT_SECONDS", "10")),
        resort_timezone=_read_env("RESORT_TIMEZONE", ""),
        log_level=_read_env("LOG_LEVEL", "INFO"),
        debug_mode=read_bool("DEBUG_MODE", "false"),
        auto_provision_tables=read_bool("AUTO_PROVISION_TABLES", "false"),
        port=int(_read_env("PORT", "3000")),
        cors_origins=_read_list("CORS_ORIGINS", "*"),
    )
