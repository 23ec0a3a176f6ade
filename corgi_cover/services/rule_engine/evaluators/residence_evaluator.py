"""Residence rule evaluator.

An applicant qualifies only when they live in one of the eligible
jurisdictions. This rule is evaluated before any other, so its reason
wins when several rules fail.
"""

from corgi_cover.core.enums import RuleType
from corgi_cover.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)


class ResidenceEvaluator(RuleEvaluator):
    """Evaluator for the RESIDENCE rule."""

    rule_type = RuleType.RESIDENCE
    rejection_reason = "Residence not eligible."

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        """
        Evaluate whether the applicant's state is eligible.

        State codes are compared exactly as given; "il" is not "IL".

        Args:
            context: EvaluationContext

        Returns:
            EvaluationResult indicating if the state is eligible
        """
        passed = context.state in context.eligible_states

        return self._result(
            passed,
            evidence={
                "actual": context.state,
                "eligible_states": sorted(context.eligible_states),
            },
        )
