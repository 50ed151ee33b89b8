from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecsSettings(BaseSettings):
    """Configuration for the recommendations client.

    Environment variables are prefixed with S2_RECS_.
    """

    model_config = SettingsConfigDict(env_prefix="S2_RECS_", extra="ignore")

    # --- Core ---
    log_level: str = Field(default="INFO", description="Python logging level")
    base_url: str = Field(default="https://api.semanticscholar.org/recommendations/v1")

    # --- HTTP transport ---
    connect_timeout: float = 10.0
    read_timeout: float = 60.0
    write_timeout: float = 20.0
    pool_timeout: float = 10.0

    # --- Demo ---
    demo_seed_id: str = Field(default="f9c602cc436a9ea2f9e7db48c77d924e09ce3c32")
    demo_negative_id: str = Field(default="271fb7332c613b7e36bf483a9cba2dcc768c96ea")


settings = RecsSettings()
