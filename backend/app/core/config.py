"""Application configuration from environment variables."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


def _clean_str(value: str | None) -> str | None:
    if value is None:
        return None
    # Replace non-breaking spaces with normal spaces
    return value.replace("\u00a0", " ").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Dynamic Pricing API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database Settings
    DATABASE_URL: str | None = None
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "travel_agency"
    POSTGRES_HOST: str = "postgres"
    POSTGRES_PORT: int = 5432

    @field_validator("DATABASE_URL", "LOG_LEVEL", mode="before")
    @classmethod
    def clean_strings(cls, v):
        return _clean_str(v)

    @property
    def database_url(self) -> str:
        """Explicit DATABASE_URL, or one constructed from the POSTGRES_* parts."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
