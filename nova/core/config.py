from dotenv import load_dotenv
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings
from typing import ClassVar, List

# Load environment variables from .env file
load_dotenv(".env")


class Settings(BaseSettings):
    """Class to store all the settings of the NOVA application."""

    # ------------------------------
    # Application
    # ------------------------------
    APP_NAME: str = Field(default="NOVA API")
    APP_VERSION: str = Field(default="1.0.0")
    ENVIRONMENT: str = Field(default="development")
    LOG_LEVEL: str = Field(default="INFO")

    # ------------------------------
    # Database
    # ------------------------------
    DATABASE_URL: str = Field(default="sqlite+aiosqlite:///./contacts.db")
    SQL_ECHO: bool = Field(default=False)

    # ------------------------------
    # Server
    # ------------------------------
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8080)
    CORS_ALLOW_ORIGIN: str = Field(default="*")

    # ------------------------------
    # Features
    # ------------------------------
    SERVE_PAGES: bool = Field(default=True)
    # The contact listing has no authentication in front of it.
    EXPOSE_CONTACT_LISTING: bool = Field(default=True)

    # ------------------------------
    # Database models
    # ------------------------------
    DB_MODELS: ClassVar[List[str]] = [
        "nova.models.contact",
    ]

    # ------------------------------
    # Computed Fields
    # ------------------------------
    @computed_field
    @property
    def IS_PRODUCTION(self) -> bool:
        """Computed field for the production environment flag."""
        return self.ENVIRONMENT == "production"

    class Config:
        """Configuration for the settings class."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate the settings
settings = Settings()
