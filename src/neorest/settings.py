from __future__ import annotations

from pydantic import Field

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except Exception as e:  # pragma: no cover
    raise RuntimeError(
        "pydantic-settings is required. Install with: pip install pydantic-settings"
    ) from e


class NeorestSettings(BaseSettings):
    """Client configuration.

    Environment variables are prefixed with NEOREST_.
    """

    model_config = SettingsConfigDict(env_prefix="NEOREST_", extra="ignore")

    # --- Core ---
    log_level: str = Field(default="INFO", description="Python logging level")

    # --- Server ---
    url: str = Field(default="http://localhost:7474/db/data/", description="Service root URL")
    username: str | None = Field(default=None)
    password: str | None = Field(default=None)

    # --- Transport ---
    connect_timeout_s: float = Field(default=10.0)
    read_timeout_s: float = Field(default=60.0)
    connect_retries: int = Field(default=5, description="Attempts for service-root discovery")


settings = NeorestSettings()
