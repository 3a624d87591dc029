# flowershop/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return _csv_to_list(v)


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "flowershop"
    user: str = "flowershop"
    password: str = "flowershop"
    schema_name: str = Field(
        default="flowershop",
        validation_alias=AliasChoices("DB_SCHEMA", "db_schema", "schema_name"),
    )
    echo: bool = False
    pool_size: int = 5
    max_overflow: int = 10
    pool_pre_ping: bool = True
    pool_recycle: int = 1800
    # 0 disables the per-statement bound
    statement_timeout_ms: int = Field(default=15_000, ge=0)

    # Optional single URL (if set, it takes precedence)
    url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
    )

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        if self.url:
            return self.url
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class MediaConfig(BaseModel):
    """
    Where catalog images live.

    `storage_prefix` is the path the application's own origin serves stored
    files under (server-side rendering). `public_base_url` is the CDN / object
    store worker that browsers fetch from; when it is empty, browser URLs go
    through `proxy_path` on this origin instead.
    """
    placeholder_path: str = "/placeholder-image.jpg"
    storage_prefix: str = "/storage"
    public_base_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("MEDIA_PUBLIC_URL", "public_base_url"),
    )
    proxy_path: str = "/api/r2-upload"

    @field_validator("public_base_url", mode="before")
    @classmethod
    def _blank_is_none(cls, v):
        if v is None:
            return None
        s = str(v).strip()
        return s or None


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "flowershop"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"
    tz: str = "UTC"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()
    media: MediaConfig = MediaConfig()

    # Flat env names used by deploy tooling; they win over the nested DB__ / MEDIA__ keys
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")
    media_public_url_override: Optional[str] = Field(default=None, alias="MEDIA_PUBLIC_URL")

    # -------- Alembic / migrations --------
    alembic_script_location: str = "flowershop/database/alembic"
    alembic_version_table_schema: str = "public"

    # -------- Testcontainers / CI toggles --------
    use_testcontainers: bool = True
    test_db_image: str = "postgres:15-alpine"
    test_db_wait_timeout_sec: int = 30

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Convenience: DB URL & schema =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return self.db.effective_url

    @model_validator(mode="after")
    def _apply_media_override(self):
        if self.media_public_url_override and self.media_public_url_override.strip():
            self.media = self.media.model_copy(
                update={"public_base_url": self.media_public_url_override.strip()}
            )
        return self

    @computed_field  # type: ignore[misc]
    @property
    def db_schema(self) -> str:
        return self.db.schema_name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from flowershop.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
