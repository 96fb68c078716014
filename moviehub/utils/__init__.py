"""
Shared utilities package.

This package contains logging configuration used across the application.
"""

from moviehub.utils.logging_config import setup_logging

__all__ = ['setup_logging']
