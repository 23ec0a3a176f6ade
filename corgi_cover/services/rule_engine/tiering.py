"""Tier selection logic for eligible applicants."""

from typing import Iterable

from corgi_cover.core.enums import Tier

# Corgi counts at which coverage tiers open up
PLATINUM_CORGI_COUNT = 7
GOLD_CORGI_COUNT = 3


class TieringEngine:
    """
    Tiering engine mapping an eligible applicant to a coverage tier.

    Eligibility is decided by the rule engine; these helpers assume the
    applicant already qualifies for some coverage.
    """

    @staticmethod
    def base_tier(corgi_count: int, policy_count: int) -> Tier:
        """
        Select the tier for an eligible applicant.

        Platinum conditions are checked before Gold:
        - PLATINUM: 7+ corgis, or 3+ corgis with at least one existing policy
        - GOLD: 3+ corgis
        - SILVER: everyone else

        Args:
            corgi_count: Number of corgis owned (positive)
            policy_count: Number of existing policies held

        Returns:
            The coverage tier (never Tier.NONE)
        """
        if corgi_count >= PLATINUM_CORGI_COUNT or (
            corgi_count >= GOLD_CORGI_COUNT and policy_count > 0
        ):
            return Tier.PLATINUM
        if corgi_count >= GOLD_CORGI_COUNT:
            return Tier.GOLD
        return Tier.SILVER

    @staticmethod
    def upgrade_for_policies(
        tier: Tier, policies: Iterable[str], marker_policy: str
    ) -> Tier:
        """
        Upgrade holders of the marker policy to Platinum.

        Applicants without coverage stay at Tier.NONE even if they hold
        the marker policy.

        Args:
            tier: Base tier computed from the application
            policies: Names of policies the applicant already holds
            marker_policy: Policy name that qualifies for the upgrade

        Returns:
            Tier.PLATINUM for covered marker holders, else the base tier
        """
        if tier != Tier.NONE and marker_policy in set(policies):
            return Tier.PLATINUM
        return tier
