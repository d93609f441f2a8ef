"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Credentials come from environment variables or .env (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - sqlalchemy_url is the only place the store URL is assembled

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - DB_HOST/DB_USER/DB_PASSWORD/DB_NAME/DB_PORT kept as env names so existing .env files work
    - URL.create over string formatting: passwords with '@' or '/' are escaped
"""

from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database
    db_host: str = "localhost"
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "universitydb"
    db_port: int = 3306
    db_driver: str = "mysql+aiomysql"
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_mysql_url(cls, v: str | None) -> str | None:
        """Hosting providers hand out mysql:// but the async engine needs mysql+aiomysql://."""
        if isinstance(v, str) and v.startswith("mysql://"):
            return v.replace("mysql://", "mysql+aiomysql://", 1)
        return v or None

    database_pool_size: int = 10
    database_max_overflow: int = 5

    # API
    cors_origins: Annotated[list[str], NoDecode] = ["*"]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    static_dir: str = "public"
    host: str = "0.0.0.0"
    port: int = 3000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> str | URL:
        """Explicit DATABASE_URL wins; otherwise built from the DB_* parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
