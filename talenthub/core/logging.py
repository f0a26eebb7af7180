"""
Centralized logging configuration for the TalentHub frontend.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

from talenthub.config.settings import settings

_LOGGING_CONFIGURED = False


def _configure_root_logging() -> None:
    """Configure root logger once so all module loggers print consistently."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logs_dir = Path(settings.LOGS_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))

    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    simple_formatter = logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    # Console handler (stdout) - simple format
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(simple_formatter)
    root.addHandler(console_handler)

    # File handler - detailed format with rotation
    file_handler = RotatingFileHandler(
        logs_dir / "app.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)
    root.addHandler(file_handler)

    # Error file handler - only errors and critical
    error_file_handler = RotatingFileHandler(
        logs_dir / "error.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(detailed_formatter)
    root.addHandler(error_file_handler)

    _LOGGING_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """
    Create and configure a logger with both file and console handlers.

    Args:
        name: Name of the logger (typically __name__ of the module)

    Returns:
        Configured logger instance
    """
    _configure_root_logging()
    return logging.getLogger(name)


def mask_email(email: str) -> str:
    """Shorten an email for log lines: jane@example.com -> j***@example.com"""
    local, sep, domain = (email or "").partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"
