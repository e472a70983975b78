"""HTTP API for the calculators."""

from .routes import router

__all__ = ["router"]
