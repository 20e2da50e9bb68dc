"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - DATABASE_URL and DATABASE_PASSWORD are required: no defaults
    - load_settings() raises ConfigurationError, never a raw pydantic ValidationError

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - No cached global: the composition root calls load_settings() once and passes
      the result down
    - The password is injected into networked URLs only; file-based SQLite ignores it
"""

from pydantic import SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from backlog.core.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database (store endpoint + service credential)
    database_url: str
    database_password: SecretStr

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("database_url")
    @classmethod
    def require_parsable_url(cls, v: str) -> str:
        try:
            make_url(v)
        except ArgumentError as e:
            raise ValueError(f"database_url is not a valid URL: {e}") from e
        return v

    @field_validator("database_password")
    @classmethod
    def require_password(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            raise ValueError("database_password cannot be empty")
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # API
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def store_url(self) -> str:
        """database_url with the service credential applied."""
        url = make_url(self.database_url)
        if url.host:
            url = url.set(password=self.database_password.get_secret_value())
        return url.render_as_string(hide_password=False)


def load_settings(**overrides) -> Settings:
    """Build Settings from the environment. Raises ConfigurationError when invalid."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = ", ".join(
            ".".join(str(loc) for loc in err["loc"]) for err in e.errors()
        )
        raise ConfigurationError(f"missing or invalid settings: {missing}") from e
