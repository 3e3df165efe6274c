"""
HTTP API for the lookup service.
"""

from .routes import router

__all__ = ["router"]
