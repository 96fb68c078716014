"""
API configuration loaded from environment or defaults.
"""

import os
from typing import Optional


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> Optional[str]:
    """Get log file name from env; None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_log_dir() -> str:
    """Get directory for the log file."""
    return os.getenv("LOG_DIR", "logs")


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8080"))
