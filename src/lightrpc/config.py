# lightrpc/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


# ──────────────────────────────────────────────────────────────
# Logging
# ──────────────────────────────────────────────────────────────
def configure_logging(level: str | int = DEFAULT_LOG_LEVEL) -> logging.Logger:
    logger = logging.getLogger("lightrpc")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


# ──────────────────────────────────────────────────────────────
# Settings
# ──────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ClientSettings:
    timeout: float = DEFAULT_TIMEOUT
    log_level: str | int = DEFAULT_LOG_LEVEL
    follow_redirects: bool = False

    @classmethod
    def from_env(cls, **overrides) -> "ClientSettings":
        """
        Build settings from LIGHTRPC_* environment variables (a .env file is
        honoured). Keyword overrides win over the environment.
        """
        load_dotenv()

        values = {
            "timeout": float(os.getenv("LIGHTRPC_TIMEOUT", DEFAULT_TIMEOUT)),
            "log_level": os.getenv("LIGHTRPC_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        }
        values.update(overrides)
        return cls(**values)

    @classmethod
    def coerce(cls, settings: "ClientSettings | dict | None") -> "ClientSettings":
        # normalize settings: accept dataclass or dict or None
        if settings is None:
            return cls()
        if isinstance(settings, ClientSettings):
            return settings
        if isinstance(settings, dict):
            return cls(**settings)
        raise TypeError("settings must be ClientSettings | dict | None")
