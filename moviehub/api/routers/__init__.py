"""
API route handlers.
"""

from moviehub.api.routers import movies, system, fallback

__all__ = ["movies", "system", "fallback"]
