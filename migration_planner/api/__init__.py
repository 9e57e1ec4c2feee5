"""FastAPI REST API for the Migration Planner estimation service."""

from .routes import router

__all__ = ["router"]
