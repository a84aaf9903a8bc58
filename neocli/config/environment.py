"""Process environment read by the config loader (pydantic-settings)."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from neocli.config.constants import NETWORK_ENV_VAR


class EnvironmentSettings(BaseSettings):
    """
    Environment variables that steer configuration resolution.

    NEO_NETWORK selects a config profile: ``config.<network>.json``.
    NEO_LOG_LEVEL sets the console level used by ``setup_logging``.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    network: Optional[str] = Field(default=None, alias=NETWORK_ENV_VAR)
    log_level: str = Field(default="INFO", alias="NEO_LOG_LEVEL")

    @field_validator("network", mode="before")
    @classmethod
    def _blank_is_unset(cls, v):
        # whitespace-only means "no profile"
        if v is None or not str(v).strip():
            return None
        return str(v).strip()
