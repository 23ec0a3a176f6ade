"""Partition service splitting applications into accepted and rejected streams."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from corgi_cover.config import OutputPaths, settings
from corgi_cover.core.enums import PartitionOutcome
from corgi_cover.models.domain.application import (
    APPLICATION_FIELDS,
    REJECTED_FIELDS,
    Application,
    Verdict,
)
from corgi_cover.services.output_stream import OutputStream
from corgi_cover.services.rule_engine import RuleEngine

logger = logging.getLogger(__name__)


@dataclass
class PartitionSummary:
    """
    Counts over a full partition run.

    Attributes:
        accepted: Applications written to the accepted stream
        rejected: Applications written to the rejected stream
        write_failed: Applications that could not be written to either stream
        failed_names: Names of the applications counted in write_failed
    """

    accepted: int = 0
    rejected: int = 0
    write_failed: int = 0
    failed_names: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.accepted + self.rejected + self.write_failed

    def record(self, outcome: PartitionOutcome, application: Application) -> None:
        if outcome == PartitionOutcome.ACCEPTED:
            self.accepted += 1
        elif outcome == PartitionOutcome.REJECTED:
            self.rejected += 1
        else:
            self.write_failed += 1
            self.failed_names.append(application.name)

    def to_dict(self) -> dict:
        return {
            "accepted": self.accepted,
            "rejected": self.rejected,
            "write_failed": self.write_failed,
        }


class PartitionService:
    """
    Partition service for screening applications.

    Each application is screened by the rule engine and appended to the
    accepted stream, or to the rejected stream together with its reason.
    Order within each stream follows input order.
    """

    def __init__(
        self,
        output_paths: Optional[OutputPaths] = None,
        rule_engine: Optional[RuleEngine] = None,
    ):
        """
        Initialize the partition service.

        Args:
            output_paths: Stream locations (defaults to configured paths)
            rule_engine: Rule engine used for screening
        """
        self.output_paths = output_paths or settings.output_paths
        self.rule_engine = rule_engine or RuleEngine()

    def screen(self, application: Application) -> Verdict:
        """Screen a single application."""
        return Verdict(
            application=application,
            reason=self.rule_engine.ineligibility_reason(application),
        )

    def partition(self, applications: Iterable[Application]) -> PartitionSummary:
        """
        Screen applications and append each one to its output stream.

        A write failure is logged and counted in write_failed; the
        remaining applications are still processed.

        Args:
            applications: Applications in input order

        Returns:
            PartitionSummary with accepted, rejected and write_failed counts

        Raises:
            InvalidInputError: If an application violates the rule contract
        """
        accepted_stream = OutputStream(
            self.output_paths.accepted_path, APPLICATION_FIELDS
        )
        rejected_stream = OutputStream(
            self.output_paths.rejected_path, REJECTED_FIELDS
        )
        summary = PartitionSummary()

        for application in applications:
            verdict = self.screen(application)
            stream = accepted_stream if verdict.accepted else rejected_stream

            try:
                stream.append(verdict.to_row())
            except OSError as e:
                logger.error(
                    f"Failed to write application for {application.name} "
                    f"to {stream.path}: {e}"
                )
                summary.record(PartitionOutcome.WRITE_FAILED, application)
                continue

            if verdict.accepted:
                summary.record(PartitionOutcome.ACCEPTED, application)
            else:
                logger.debug(f"Rejected {application.name}: {verdict.reason}")
                summary.record(PartitionOutcome.REJECTED, application)

        logger.info(
            f"Partitioned {summary.total} applications: "
            f"{summary.accepted} accepted, {summary.rejected} rejected, "
            f"{summary.write_failed} write failures"
        )
        return summary
