"""Domain models for the application."""

from corgi_cover.models.domain.application import (
    APPLICATION_FIELDS,
    REJECTED_FIELDS,
    Application,
    PolicyIndex,
    Verdict,
)

__all__ = [
    "APPLICATION_FIELDS",
    "REJECTED_FIELDS",
    "Application",
    "PolicyIndex",
    "Verdict",
]
