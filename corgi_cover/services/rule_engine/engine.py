"""Rule engine orchestrator for eligibility and coverage tier decisions."""

import logging
from typing import Iterable, List, Optional

from corgi_cover.config import settings
from corgi_cover.core.enums import Tier
from corgi_cover.core.errors import InvalidInputError
from corgi_cover.models.domain.application import Application, PolicyIndex
from corgi_cover.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)
from corgi_cover.services.rule_engine.evaluators import (
    CorgiOwnershipEvaluator,
    ResidenceEvaluator,
)
from corgi_cover.services.rule_engine.tiering import TieringEngine

logger = logging.getLogger(__name__)


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class RuleEngine:
    """
    Rule engine orchestrator for Corgi Cover eligibility.

    This class:
    - Holds the eligible jurisdiction set it was configured with
    - Runs eligibility evaluators in registration order (residence first)
    - Validates argument contracts before any rule runs
    - Delegates tier selection to the TieringEngine
    """

    def __init__(
        self,
        eligible_states: Optional[Iterable[str]] = None,
        marker_policy: Optional[str] = None,
    ):
        """
        Initialize the rule engine.

        Args:
            eligible_states: Jurisdiction codes that qualify for coverage
                (defaults to the ELIGIBLE_STATES setting)
            marker_policy: Existing policy that upgrades coverage to Platinum
                (defaults to the MARKER_POLICY setting)
        """
        if eligible_states is None:
            self.eligible_states = settings.eligible_states_set
        else:
            self.eligible_states = frozenset(eligible_states)
        self.marker_policy = marker_policy or settings.MARKER_POLICY
        self.tiering = TieringEngine()
        self._evaluators: List[RuleEvaluator] = []
        self._register_default_evaluators()

    def _register_default_evaluators(self):
        """Register the eligibility evaluators in precedence order."""
        self._evaluators.append(ResidenceEvaluator())
        self._evaluators.append(CorgiOwnershipEvaluator())

    def register_evaluator(self, evaluator: RuleEvaluator) -> None:
        """
        Register an additional evaluator, checked after the existing ones.

        Args:
            evaluator: The evaluator instance
        """
        self._evaluators.append(evaluator)

    def _validate(self, state, corgi_count) -> None:
        if not isinstance(state, str) or not _is_count(corgi_count):
            raise InvalidInputError(
                "Invalid inputs",
                details={"state": state, "corgi_count": corgi_count},
            )

    def _build_context(self, state: str, corgi_count: int) -> EvaluationContext:
        self._validate(state, corgi_count)
        return EvaluationContext(
            state=state,
            corgi_count=corgi_count,
            eligible_states=self.eligible_states,
        )

    def evaluate(self, application: Application) -> List[EvaluationResult]:
        """
        Evaluate every eligibility rule against an application.

        Args:
            application: The application to evaluate

        Returns:
            One EvaluationResult per registered evaluator, in order

        Raises:
            InvalidInputError: If state or corgi_count is outside contract
        """
        context = self._build_context(application.state, application.corgi_count)
        return [evaluator.evaluate(context) for evaluator in self._evaluators]

    def is_eligible(self, state: str, corgi_count: int) -> bool:
        """
        Return whether an applicant qualifies for any Corgi Cover tier.

        Examples:
            is_eligible("IL", 1) -> True

        Raises:
            InvalidInputError: If state is not a string or corgi_count is
                not a non-negative integer
        """
        context = self._build_context(state, corgi_count)
        return all(evaluator.evaluate(context).passed for evaluator in self._evaluators)

    def ineligibility_reason(self, application: Application) -> Optional[str]:
        """
        Return the rejection reason for an application, or None if eligible.

        The first failing rule wins, so residence is reported before corgi
        ownership.
        """
        for result in self.evaluate(application):
            if not result.passed:
                return result.reason
        return None

    def tier_for(self, state: str, corgi_count: int, policy_count: int) -> Tier:
        """
        Offer Corgi Cover at a tier based on residence, corgi count and
        existing policy count.

        Returns:
            Tier.NONE if not eligible for any tier

        Raises:
            InvalidInputError: If any argument is outside contract
        """
        if not _is_count(policy_count):
            raise InvalidInputError(
                "Invalid inputs", details={"policy_count": policy_count}
            )
        if not self.is_eligible(state, corgi_count):
            return Tier.NONE
        return self.tiering.base_tier(corgi_count, policy_count)

    def register_tier(self, application: Application) -> Tier:
        """Determine the coverage tier for an application."""
        return self.tier_for(
            application.state, application.corgi_count, application.policy_count
        )

    def register_with_policies(
        self, application: Application, policy_index: PolicyIndex
    ) -> Tier:
        """
        Determine the coverage tier taking existing policies into account.

        Args:
            application: The application to register
            policy_index: Applicant name -> policies already held

        Returns:
            Tier.PLATINUM for covered holders of the marker policy,
            otherwise the tier from register_tier (including Tier.NONE)
        """
        tier = self.register_tier(application)
        policies = policy_index.get(application.name, ())
        upgraded = self.tiering.upgrade_for_policies(tier, policies, self.marker_policy)

        if upgraded != tier:
            logger.debug(
                f"Upgraded {application.name} from {tier.value} to {upgraded.value} "
                f"for holding '{self.marker_policy}'"
            )
        return upgraded
