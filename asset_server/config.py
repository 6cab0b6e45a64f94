"""Server configuration via pydantic-settings."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project directory (where this file lives: asset_server/config.py)
_PROJECT_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Listener
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # Static Asset Root – the built SPA, produced by an external build step
    STATIC_DIR: str = str(_PROJECT_DIR / "public")

    # Served for every route nothing else matched
    ENTRY_DOCUMENT: str = "index.html"

    LOG_LEVEL: str = "info"

    @property
    def static_root(self) -> Path:
        return Path(self.STATIC_DIR)

    @property
    def entry_path(self) -> Path:
        return self.static_root / self.ENTRY_DOCUMENT


def build_settings(**overrides) -> Settings:
    """Build settings, fixing a relative STATIC_DIR to be absolute."""
    s = Settings(
        _env_file=str(_PROJECT_DIR / ".env"),
        _env_file_encoding="utf-8",
        **overrides,
    )
    if not os.path.isabs(s.STATIC_DIR):
        s = s.model_copy(update={"STATIC_DIR": str(_PROJECT_DIR / s.STATIC_DIR)})
    return s
