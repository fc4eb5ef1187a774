"""Application configuration loaded from the environment"""
import os
import logging
import pytz
from typing import Optional
from pydantic import BaseModel

logger = logging.getLogger(__name__)

REQUIRED_VARIABLES = ["SMTP_HOST", "SMTP_PASSWORD"]


class StartupConfigurationError(RuntimeError):
    """Raised when a required setting is missing or unusable at startup"""
    def __init__(self, variables: list, reason: str = "Missing required environment variables"):
        self.variables = variables
        super().__init__(f"{reason}: {', '.join(variables)}")


class Settings(BaseModel):
    """Runtime settings for the feedback service"""
    smtp_host: str
    smtp_port: int = 587
    smtp_user: Optional[str] = "apikey"
    smtp_password: str
    smtp_use_tls: bool = True
    smtp_from_email: str = "noreply@nusudental.com"
    recipient_email: str = "nusu.dental.feedback@gmail.com"
    clinic_timezone: str = "Asia/Riyadh"
    log_level: str = "INFO"


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "y"}


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise StartupConfigurationError(["SMTP_PORT"], "Invalid port") from None
    if not 0 < port < 65536:
        raise StartupConfigurationError(["SMTP_PORT"], "Invalid port")
    return port


def _check_timezone(name: str) -> str:
    try:
        pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        raise StartupConfigurationError(["CLINIC_TIMEZONE"], f"Unknown timezone '{name}'") from None
    return name


def load_settings() -> Settings:
    """
    Build settings from environment variables.

    Raises:
        StartupConfigurationError: if the outbound email credentials are absent,
            or SMTP_PORT / CLINIC_TIMEZONE cannot be used
    """
    missing = [name for name in REQUIRED_VARIABLES if not os.getenv(name)]
    if missing:
        logger.error(f"Refusing to start, missing configuration: {missing}")
        raise StartupConfigurationError(missing)

    try:
        smtp_port = _parse_port(os.getenv("SMTP_PORT", "587"))
        clinic_timezone = _check_timezone(os.getenv("CLINIC_TIMEZONE", "Asia/Riyadh"))
    except StartupConfigurationError as e:
        logger.error(f"Refusing to start: {e}")
        raise

    return Settings(
        smtp_host=os.getenv("SMTP_HOST"),
        smtp_port=smtp_port,
        smtp_user=os.getenv("SMTP_USER", "apikey"),
        smtp_password=os.getenv("SMTP_PASSWORD"),
        smtp_use_tls=_env_flag("SMTP_USE_TLS"),
        smtp_from_email=os.getenv("SMTP_FROM_EMAIL", "noreply@nusudental.com"),
        recipient_email=os.getenv("FEEDBACK_RECIPIENT_EMAIL", "nusu.dental.feedback@gmail.com"),
        clinic_timezone=clinic_timezone,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
