"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All connection strings come from environment variables or .env
    - get_settings() is cached (lru_cache): single instance per process
    - organizer_* fields define the default participant whose events get costed

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every field: works out-of-the-box on a local SQLite file
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from eventsproject.core.domain_types import Role
from eventsproject.core.entities import OrganizerIdentity


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./events.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres gives postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_echo: bool = False

    # Cost recompute target
    organizer_last_name: str = "Tounsi"
    organizer_first_name: str = "Ahmed"
    organizer_role: Role = Role.ORGANISATEUR

    @field_validator("organizer_role", mode="before")
    @classmethod
    def lowercase_role(cls, v):
        """Accept ORGANISATEUR as well as organisateur."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def organizer(self) -> OrganizerIdentity:
        return OrganizerIdentity(
            self.organizer_last_name, self.organizer_first_name, self.organizer_role,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
