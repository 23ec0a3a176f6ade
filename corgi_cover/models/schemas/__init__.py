"""Pydantic schemas for input validation."""

from corgi_cover.models.schemas.application import ApplicationRow

__all__ = ["ApplicationRow"]
