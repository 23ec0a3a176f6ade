"""Onboarding service running load, partition and export in sequence."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from corgi_cover.config import OutputPaths, settings
from corgi_cover.core.enums import Tier
from corgi_cover.models.domain.application import Application, PolicyIndex
from corgi_cover.services.csv_parser import ApplicationReader
from corgi_cover.services.export_service import ExportService
from corgi_cover.services.partition_service import PartitionService, PartitionSummary
from corgi_cover.services.rule_engine import RuleEngine

logger = logging.getLogger(__name__)


@dataclass
class OnboardingResult:
    """
    Result of one onboarding run.

    Attributes:
        loaded: Whether the input file was found
        summary: Partition counts (None when nothing was loaded)
        tiers: (application, coverage tier) pairs, in input order
        json_path: Location of the JSON export (None when nothing was accepted)
        note: Why no output was produced, if applicable
    """

    loaded: bool
    summary: Optional[PartitionSummary] = None
    tiers: List[Tuple[Application, Tier]] = field(default_factory=list)
    json_path: Optional[str] = None
    note: Optional[str] = None


class OnboardingService:
    """
    Onboarding service for batches of Corgi Cover applications.

    Ties together the reader, rule engine, partition service and export
    service for a single run with a single writer.
    """

    def __init__(
        self,
        output_paths: Optional[OutputPaths] = None,
        rule_engine: Optional[RuleEngine] = None,
        export_service: Optional[ExportService] = None,
    ):
        self.output_paths = output_paths or settings.output_paths
        self.rule_engine = rule_engine or RuleEngine()
        self.partition_service = PartitionService(self.output_paths, self.rule_engine)
        self.export_service = export_service or ExportService()

    @staticmethod
    def _log_record(application: Application) -> None:
        logger.debug(f"Parsed {application!r}")

    def run(
        self,
        input_path: Union[str, Path],
        policy_index: Optional[PolicyIndex] = None,
    ) -> OnboardingResult:
        """
        Load, screen, partition and export a batch of applications.

        Args:
            input_path: Application CSV to process
            policy_index: Existing policies for policy-aware tiering

        Returns:
            OnboardingResult with counts, tiers and export location

        Raises:
            MalformedRowError: If the input contains a malformed row
        """
        applications = ApplicationReader.load(input_path, on_record=self._log_record)
        if applications is None:
            return OnboardingResult(
                loaded=False, note=f"Input file not found: {input_path}"
            )

        tiers: List[Tuple[Application, Tier]] = []
        for application in applications:
            if policy_index is not None:
                tier = self.rule_engine.register_with_policies(application, policy_index)
            else:
                tier = self.rule_engine.register_tier(application)
            tiers.append((application, tier))

        summary = self.partition_service.partition(applications)
        result = OnboardingResult(loaded=True, summary=summary, tiers=tiers)

        if summary.accepted > 0:
            self.export_service.export_eligible_as_json(
                self.output_paths.accepted_path, self.output_paths.json_path
            )
            result.json_path = self.output_paths.json_path
        else:
            result.note = "No applications accepted; JSON export skipped"
            logger.info(result.note)

        return result
