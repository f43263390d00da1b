from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator, model_validator
from typing import Annotated, Any, ClassVar
import json
from pathlib import Path
import os


class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Good Day Services Quotes API"

    # Database URL
    # Use an absolute path so running the app from different directories
    # (e.g., repo root or backend/) always resolves the same DB file.
    BASE_DIR: ClassVar[Path] = Path(__file__).resolve().parents[2]
    SQLALCHEMY_DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'quotes.db'}"

    # CORS origins (comma-separated or JSON list in the environment)
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["http://localhost:3000", "http://localhost:5173"]
    CORS_ALLOW_ALL: bool = False

    # Logging / tracing
    LOG_LEVEL: str = "INFO"
    ENABLE_TRACING: bool = False
    ENABLE_CONSOLE_TRACING: bool = True

    # SMTP email settings
    SMTP_HOST: str = ""
    SMTP_PORT: int = 25
    SMTP_USERNAME: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_FROM: str = "quotes@gooddayservices.com"

    # Email Dev Mode: log rendered messages instead of delivering them
    EMAIL_DEV_MODE: bool = True

    # Twilio SMS (optional; messages are logged when unset)
    TWILIO_ACCOUNT_SID: str = ""
    TWILIO_AUTH_TOKEN: str = ""
    TWILIO_FROM_NUMBER: str = ""

    # Internal inbox that receives a copy of every new quote request
    QUOTE_NOTIFY_EMAIL: str = ""

    # Shared secret for admin-only routes; admin routes are closed when empty
    ADMIN_API_TOKEN: str = ""

    # Company block printed at the bottom of quote messages
    COMPANY_NAME: str = "Good Day Services"
    COMPANY_LOCATION: str = "Murfreesboro, TN"
    COMPANY_PHONE: str = "615-390-9779"
    COMPANY_EMAIL: str = "GoodDayServicesHQ@gmail.com"
    QUOTE_VALID_DAYS: int = 30

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=True,
    )

    @field_validator("CORS_ORIGINS", mode="before")
    def split_origins(cls, v: Any) -> list[str]:
        """Parse comma-separated or JSON list of origins from environment."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator(
        "ADMIN_API_TOKEN",
        "QUOTE_NOTIFY_EMAIL",
        "SMTP_HOST",
        "TWILIO_ACCOUNT_SID",
        "TWILIO_AUTH_TOKEN",
        "TWILIO_FROM_NUMBER",
        mode="before",
    )
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def allow_all_if_requested(cls, values: "Settings") -> "Settings":
        if values.CORS_ALLOW_ALL:
            values.CORS_ORIGINS = ["*"]
        return values

    @property
    def smtp_configured(self) -> bool:
        return bool(self.SMTP_HOST)

    @property
    def sms_configured(self) -> bool:
        return bool(self.TWILIO_ACCOUNT_SID and self.TWILIO_AUTH_TOKEN and self.TWILIO_FROM_NUMBER)


def load_settings() -> "Settings":
    return Settings(_env_file=os.getenv("ENV_FILE", str(Path(__file__).resolve().parents[3] / ".env")))


settings = load_settings()
