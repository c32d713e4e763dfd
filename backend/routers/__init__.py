"""Routers module - FastAPI route handlers"""

from . import config, tour

__all__ = ["config", "tour"]
