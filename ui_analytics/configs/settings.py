from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


DEFAULT_TIMESTAMP_FORMAT = "%b %d, %Y at %I:%M %p"


class Settings:
    """
    Central configuration for UI Analytics.

    Values are loaded once from environment variables (with sensible defaults)
    and then exposed via typed properties.
    """

    def __init__(self) -> None:
        # Display formatting
        self._timestamp_format = os.getenv(
            "UI_ANALYTICS_TIMESTAMP_FORMAT", DEFAULT_TIMESTAMP_FORMAT
        )
        self._date_picker_format = (
            os.getenv("UI_ANALYTICS_DATE_PICKER_FORMAT") or self._timestamp_format
        )

        # Logging
        self._log_level = os.getenv("UI_ANALYTICS_LOG_LEVEL", "INFO").upper()

        # HTTP runtime
        self._host = os.getenv("UI_ANALYTICS_HOST", "127.0.0.1")
        self._port_raw = os.getenv("UI_ANALYTICS_PORT", "8000")

    # ------------------------------------------------------------------
    # Display settings
    # ------------------------------------------------------------------

    @property
    def timestamp_format(self) -> str:
        return self._timestamp_format

    @property
    def date_picker_format(self) -> str:
        return self._date_picker_format

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    @property
    def log_level(self) -> str:
        return self._log_level

    # ------------------------------------------------------------------
    # HTTP runtime
    # ------------------------------------------------------------------

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        try:
            return int(self._port_raw)
        except ValueError:
            raise RuntimeError(
                f"UI_ANALYTICS_PORT must be an integer, got {self._port_raw!r}."
            )


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for CLI / server entry points."""
    logging.basicConfig(
        level=(level or settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings()
