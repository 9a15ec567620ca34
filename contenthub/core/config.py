import json
import logging
import os
from typing import Any, List, Optional, Union

from google.api_core.exceptions import NotFound
from google.cloud import secretmanager
from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

logger = logging.getLogger(__name__)

SECRET_IDS = [
    "DATABASE_URL", "SECRET_KEY", "POSTGRES_SERVER", "POSTGRES_USER",
    "POSTGRES_PASSWORD", "POSTGRES_DB", "SMTP_USERNAME", "SMTP_PASSWORD",
    "SENDER_EMAIL", "CONTACT_EMAIL", "ADMIN_EMAILS",
]


def get_secrets() -> Optional[dict[str, str]]:
    project_id = os.getenv("GOOGLE_CLOUD_PROJECT")
    if not project_id:
        return None

    client = secretmanager.SecretManagerServiceClient()
    secrets = {}
    for secret_id in SECRET_IDS:
        try:
            name = f"projects/{project_id}/secrets/{secret_id}/versions/latest"
            response = client.access_secret_version(request={"name": name})
            secrets[secret_id] = response.payload.data.decode("UTF-8")
        except NotFound:
            logger.warning(f"Secret {secret_id} not found in GCP Secret Manager.")
        except Exception as e:
            logger.error(f"Error retrieving secret {secret_id}: {e}")
    return secrets


class Settings(BaseSettings):
    PROJECT_NAME: str = "ContentHub"
    ENVIRONMENT: str = Field(default="development")
    GOOGLE_CLOUD_PROJECT: Optional[str] = None

    BACKEND_CORS_ORIGINS: Union[List[str], str] = [
        "http://localhost",
        "http://localhost:5000",
        "http://localhost:8080",
    ]

    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "contenthub"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "contenthub"
    POSTGRES_PORT: int = Field(default=5432)
    DATABASE_URL: Optional[str] = "sqlite:///./contenthub.db"

    SECRET_KEY: SecretStr = Field(default=SecretStr("change-me-in-production"))
    SESSION_COOKIE: str = "contenthub_session"
    DEV_LOGIN_ENABLED: bool = True
    ADMIN_EMAILS: Union[List[str], str] = []

    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024
    MAX_FILES_PER_REQUEST: int = 10
    ALLOWED_UPLOAD_TYPES: List[str] = [
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "text/plain",
    ]

    SMTP_SERVER: str = Field(default="smtp.gmail.com")
    SMTP_PORT: int = Field(default=587)
    SMTP_USERNAME: str = Field(default="")
    SMTP_PASSWORD: SecretStr = Field(default=SecretStr(""))
    SMTP_USE_TLS: bool = True
    SENDER_EMAIL: str = Field(default="noreply@contenthub.com")
    CONTACT_EMAIL: str = Field(default="support@contenthub.com")

    DEFAULT_CATEGORY_NAME: str = "Other"
    DEFAULT_CATEGORY_DESCRIPTION: str = "Miscellaneous topics and general posts"
    DEFAULT_CATEGORY_COLOR: str = "gray"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: Any) -> Any:
        if isinstance(v, str) and v:
            return v
        return URL.create(
            "postgresql",
            username=info.data.get("POSTGRES_USER"),
            password=info.data.get("POSTGRES_PASSWORD"),
            host=info.data.get("POSTGRES_SERVER"),
            port=int(info.data.get("POSTGRES_PORT", 5432)),
            database=info.data.get("POSTGRES_DB") or None,
        ).render_as_string(hide_password=False)

    @field_validator("BACKEND_CORS_ORIGINS", "ADMIN_EMAILS", mode="before")
    @classmethod
    def assemble_list(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [i.strip() for i in v.split(",") if i.strip()]
        return v

    @computed_field
    @property
    def admin_emails(self) -> List[str]:
        return [email.strip().lower() for email in self.ADMIN_EMAILS]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

    @classmethod
    def from_gcp_secrets(cls) -> "Settings":
        secrets = get_secrets()
        if secrets:
            return cls(**secrets)
        return cls()


def get_settings() -> Settings:
    env = os.getenv("ENVIRONMENT", "development")
    if env == "production":
        return Settings.from_gcp_secrets()
    return Settings()


settings = get_settings()

logger.info("Settings loaded:")
for field, value in settings.model_dump().items():
    if isinstance(value, SecretStr) or field in ("DATABASE_URL", "POSTGRES_PASSWORD"):
        logger.info(f"{field}: [REDACTED]")
    else:
        logger.info(f"{field}: {value}")
