# File: authgate/core/config.py

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy.engine import URL

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parents[1]

DEFAULT_BCRYPT_ROUNDS = 10


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "y"}


def _bcrypt_rounds_from_env():
    return os.getenv("BCRYPT_ROUNDS") or DEFAULT_BCRYPT_ROUNDS


class Settings(BaseModel):
    # Defaults come from the environment as strings; coerce and check them too
    model_config = ConfigDict(validate_default=True)

    PROJECT_NAME: str = "Authgate"
    VERSION: str = "0.1.0"

    # Database (no defaults, mirrors the deployment environment)
    db_driver: str = os.getenv("DB_DRIVER", "postgresql+psycopg")
    db_host: Optional[str] = os.getenv("DB_HOST") or None
    db_port: Optional[int] = os.getenv("DB_PORT") or None
    db_user: Optional[str] = os.getenv("DB_USER") or None
    db_password: Optional[str] = os.getenv("DB_PASSWORD") or None
    db_name: Optional[str] = os.getenv("DB") or None

    # Full URL wins over the DB_* parts when present
    database_url_override: Optional[str] = os.getenv("DATABASE_URL") or None
    auto_create_tables: bool = _env_flag("AUTO_CREATE_TABLES", "true")

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: Optional[int] = os.getenv("PORT") or None
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Password hashing
    # Read when Settings() is built, not at import
    bcrypt_rounds: int = Field(default_factory=_bcrypt_rounds_from_env)

    templates_dir: Path = PACKAGE_DIR / "templates"
    static_dir: Path = PACKAGE_DIR / "static"

    @field_validator("bcrypt_rounds")
    @classmethod
    def check_bcrypt_rounds(cls, v: int) -> int:
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        url = URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
