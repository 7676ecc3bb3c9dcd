"""Library settings via pydantic-settings. Loads from environment and .env file."""

from __future__ import annotations

import logging

from pydantic import model_validator
from pydantic_settings import BaseSettings

from embedcraft.limits import COLOR_MAXIMUM

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """embedcraft configuration.

    All values can be overridden via environment variables or .env file.
    """

    # Logging
    embedcraft_log_level: str = "INFO"

    # Builder defaults
    embedcraft_default_color: int | None = None  # applied by EmbedBuilder.from_settings

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def _check_default_color(self) -> Settings:
        """Reject a default color that no embed could carry."""
        color = self.embedcraft_default_color
        if color is not None and not 0 <= color <= COLOR_MAXIMUM:
            msg = f"EMBEDCRAFT_DEFAULT_COLOR must be within 0..={COLOR_MAXIMUM:#08x}, got {color}"
            raise ValueError(msg)
        return self


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging at the configured level."""
    settings = settings or Settings()
    logging.basicConfig(
        level=getattr(logging, settings.embedcraft_log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
