"""Core enums for type safety across the application."""

from enum import Enum


class Tier(str, Enum):
    """Corgi Cover coverage tiers."""

    PLATINUM = "platinum"
    GOLD = "gold"
    SILVER = "silver"
    NONE = "none"  # no coverage offered

    @property
    def rank(self) -> int:
        """Ordering none < silver < gold < platinum."""
        return _TIER_RANKS[self]


_TIER_RANKS = {
    Tier.NONE: 0,
    Tier.SILVER: 1,
    Tier.GOLD: 2,
    Tier.PLATINUM: 3,
}


class RuleType(str, Enum):
    """Eligibility rule types, in evaluation order."""

    RESIDENCE = "residence"
    CORGI_OWNERSHIP = "corgi_ownership"


class StreamState(str, Enum):
    """Lifecycle of an append-only output stream."""

    NOT_YET_CREATED = "not_yet_created"
    HEADER_WRITTEN = "header_written"


class PartitionOutcome(str, Enum):
    """Terminal state of a single record in a partition run."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WRITE_FAILED = "write_failed"
