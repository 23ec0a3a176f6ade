"""Service layer for business logic."""

from corgi_cover.services.export_service import ExportService
from corgi_cover.services.onboarding_service import OnboardingResult, OnboardingService
from corgi_cover.services.partition_service import PartitionService, PartitionSummary

__all__ = [
    "ExportService",
    "OnboardingResult",
    "OnboardingService",
    "PartitionService",
    "PartitionSummary",
]
