from __future__ import annotations

import datetime as dt

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class Settings(BaseSettings):
    """Snapshot of the environment variables debmake reads."""

    model_config = SettingsConfigDict(case_sensitive=False, env_ignore_empty=True)

    debemail: str | None = None
    email: str | None = None
    source_date_epoch: int | None = None

    def timestamp(self) -> dt.datetime:
        """Return the changelog timestamp, honouring SOURCE_DATE_EPOCH."""
        if self.source_date_epoch is not None:
            return dt.datetime.fromtimestamp(self.source_date_epoch, tz=dt.timezone.utc)
        return dt.datetime.now().astimezone()


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid environment settings: {exc}") from exc
