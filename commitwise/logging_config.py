"""Logging configuration for commitwise.

Log output goes to stderr so it never mixes with the suggestion list.
Settings come from arguments or environment variables:
- COMMITWISE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default WARNING)
- COMMITWISE_LOG_FORMAT: simple or detailed (default simple)
"""

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV_VAR = "COMMITWISE_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "COMMITWISE_LOG_FORMAT"

DEFAULT_LOG_LEVEL = "WARNING"

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# SDK loggers that are chatty at INFO
NOISY_LOGGERS = ["httpx", "httpcore", "urllib3", "anthropic", "openai", "google_genai", "groq"]


def resolve_level(level: Optional[str] = None) -> str:
    """Resolve the level name from the argument or the environment.

    Unknown names fall back to the default with a warning on stderr.
    """
    log_level = (level or os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)).upper()
    if log_level not in VALID_LEVELS:
        sys.stderr.write(
            f"Warning: Invalid {LOG_LEVEL_ENV_VAR} '{log_level}', defaulting to {DEFAULT_LOG_LEVEL}\n"
        )
        log_level = DEFAULT_LOG_LEVEL
    return log_level


def configure_logging(level: Optional[str] = None, format_style: Optional[str] = None) -> None:
    """Configure logging for the application.

    Args:
        level: Log level name. Defaults to COMMITWISE_LOG_LEVEL or WARNING.
        format_style: "simple" or "detailed". Defaults to
            COMMITWISE_LOG_FORMAT or simple.
    """
    log_level = resolve_level(level)
    log_format = (format_style or os.getenv(LOG_FORMAT_ENV_VAR, "simple")).lower()
    numeric_level = getattr(logging, log_level)

    if log_format == "detailed":
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter(fmt="%(levelname)s - %(message)s")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
