"""
MovieHub application package.

This package contains the in-memory movie store, the HTTP API built on
FastAPI, and shared utilities.
"""

__version__ = "1.0.0"
