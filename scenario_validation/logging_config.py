"""Logging setup for applications embedding the validation engine.

The engine itself only creates module-level loggers; hosts call
``configure_logging`` once at startup to get the standard format.
"""

import logging

from scenario_validation.config import get_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging with the engine's format.
    
    Args:
        level: Optional level name. If not provided, uses Config.log_level
    """
    if level is None:
        level = get_config().log_level
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("scenario_validation").setLevel(level.upper())
