from __future__ import annotations

import logging
import os

from pydantic import BaseModel, field_validator

from .logging_utils import get_json_logger

_TRUTHY = {"1", "true", "yes"}


class UpdaterConfig(BaseModel):
    """Runtime options for the daily updater.

    warn_on_unknown: log items that fall back to the default rule at WARNING
        instead of DEBUG.
    log_level: level for the updater's JSON logger.
    """

    warn_on_unknown: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        name = v.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {v}")
        return name


def load_config_from_env() -> UpdaterConfig:
    """Build an UpdaterConfig from GILDED_ROSE_* environment variables.

    Unparseable values fall back to the field defaults.
    """
    logger = get_json_logger("config", static_fields={"op": "load_config_from_env"})

    warn = os.getenv("GILDED_ROSE_WARN_ON_UNKNOWN", "0").strip().lower() in _TRUTHY
    logger.debug("loaded_warn_on_unknown", extra={"value": warn})

    raw_level = os.getenv("GILDED_ROSE_LOG_LEVEL")
    level = UpdaterConfig.model_fields["log_level"].default
    if raw_level is not None:
        name = raw_level.strip().upper()
        if isinstance(logging.getLevelName(name), int):
            level = name
        else:
            logger.debug("invalid_log_level", extra={"value": raw_level})
    logger.debug("loaded_log_level", extra={"value": level})

    return UpdaterConfig(warn_on_unknown=warn, log_level=level)
