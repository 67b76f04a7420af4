from __future__ import annotations

import logging
import sys

from pydantic_settings import BaseSettings, SettingsConfigDict
from pythonjsonlogger.json import JsonFormatter


class Settings(BaseSettings):
    # Server
    PORT: int = 8000
    RELOAD: bool = False
    LOG_LEVEL: str = "INFO"

    # Remote solver service (two-variable solve + graph)
    REMOTE_SOLVER_URL: str = "http://localhost:5000/api"
    REMOTE_SOLVER_TIMEOUT: float = 10.0  # seconds

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    return Settings()


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter that leaves out fields whose value is None."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        for key in [k for k, v in log_record.items() if v is None]:
            del log_record[key]


def setup_logging(log_level: str = "INFO") -> None:
    """Attach a single JSON stdout handler to the package logger.

    Fields passed through ``extra=`` become top-level JSON keys.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        CustomJsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )

    root_logger = logging.getLogger("simplex_api")
    root_logger.setLevel(getattr(logging, str(log_level).upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates when the app is rebuilt
    root_logger.handlers = []
    root_logger.addHandler(handler)
