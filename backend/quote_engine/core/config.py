from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator
from typing import Annotated, Any, ClassVar
import json
from pathlib import Path
import os


class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"

    # Database URL
    # Use an absolute path so running the app from different directories
    # (e.g., repo root or backend/) always resolves the same DB file.
    BASE_DIR: ClassVar[Path] = Path(__file__).resolve().parents[2]
    SQLALCHEMY_DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'quotes.db'}"

    # CORS origins
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["http://localhost:3000"]

    # Currency used by price calculations when the caller does not pick one
    DEFAULT_CURRENCY: str = "KES"

    # Optional JSON file replacing the bundled service/addon catalog.
    # Leave empty to use the built-in pricing tables.
    PRICING_CATALOG_PATH: str = ""

    # Root logger level (DEBUG, INFO, WARNING, ...)
    LOG_LEVEL: str = "INFO"

    # Quote listing pagination
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=os.getenv(
            "ENV_FILE", str(Path(__file__).resolve().parents[3] / ".env")
        ),
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

    @field_validator("DEFAULT_CURRENCY", mode="before")
    def normalize_currency(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("PRICING_CATALOG_PATH", "LOG_LEVEL", mode="before")
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


def load_settings() -> "Settings":
    return Settings(_env_file=os.getenv("ENV_FILE", str(Path(__file__).resolve().parents[3] / ".env")))


settings = load_settings()
