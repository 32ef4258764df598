"""
Logging configuration for the Interview Trainer API.

Console output for operators, a rotating file for post-mortems, and a helper
that redacts credentials before provider payloads reach a log line.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Any

LOG_FILE_NAME = "interview_trainer.log"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that drown out request logs at INFO
NOISY_LOGGERS = ("uvicorn", "uvicorn.access", "botocore", "boto3", "urllib3", "openai", "httpx")

SENSITIVE_KEYS = (
    "password", "token", "secret", "key",
    "aws_access_key_id", "aws_secret_access_key",
    "retell_api_key", "openai_api_key", "database_url",
)
REDACTED = "***REDACTED***"


def _make_handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(log_level: str = "INFO", log_dir: str = "logs"):
    """
    Configure the root logger.

    Args:
        log_level: Logging level name; unknown names fall back to INFO
        log_dir: Directory for the rotating log file, created if missing
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    root.addHandler(_make_handler(
        logging.StreamHandler(sys.stdout),
        level,
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    ))
    root.addHandler(_make_handler(
        RotatingFileHandler(log_path / LOG_FILE_NAME, maxBytes=10 * 1024 * 1024, backupCount=5),
        level,
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
    ))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def sanitize_log_data(data: Any) -> Any:
    """
    Return a copy of ``data`` with credential-looking values redacted.

    Nested dicts and lists are walked; keys are matched case-insensitively.
    """
    if isinstance(data, dict):
        return {
            key: REDACTED if any(s in str(key).lower() for s in SENSITIVE_KEYS) else sanitize_log_data(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [sanitize_log_data(item) for item in data]
    return data
