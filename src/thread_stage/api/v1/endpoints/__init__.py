# src/thread_stage/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .topics import router as topics_router

__all__ = ["topics_router"]
