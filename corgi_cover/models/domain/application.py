"""Application domain models for Corgi Cover applicants and verdicts."""

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Union

# Applicant name -> names of policies the applicant already holds
PolicyIndex = Mapping[str, Sequence[str]]

# Header tokens of the accepted and rejected output streams
APPLICATION_FIELDS = ("name", "state", "corgi-count", "policy-count")
REJECTED_FIELDS = APPLICATION_FIELDS + ("reason",)


@dataclass(frozen=True)
class Application:
    """
    A single Corgi Cover application.

    Attributes:
        name: Applicant name
        state: Two-letter jurisdiction code of the applicant's residence
        corgi_count: Number of corgis owned (never negative)
        policy_count: Number of existing policies held (never negative)
    """

    name: str
    state: str
    corgi_count: int
    policy_count: int

    def to_row(self) -> List[Union[str, int]]:
        """Return field values in APPLICATION_FIELDS order."""
        return [self.name, self.state, self.corgi_count, self.policy_count]

    def __repr__(self) -> str:
        return (
            f"<Application(name={self.name!r}, state={self.state!r}, "
            f"corgi_count={self.corgi_count}, policy_count={self.policy_count})>"
        )


@dataclass(frozen=True)
class Verdict:
    """
    Outcome of eligibility screening for one application.

    Attributes:
        application: The screened application, unchanged
        reason: Human-readable rejection reason (None when accepted)
    """

    application: Application
    reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    def to_row(self) -> List[Union[str, int]]:
        """Return the output-stream row for this verdict."""
        row = self.application.to_row()
        if self.reason is not None:
            row.append(self.reason)
        return row
