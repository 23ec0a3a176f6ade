"""Corgi ownership rule evaluator."""

from corgi_cover.core.enums import RuleType
from corgi_cover.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)


class CorgiOwnershipEvaluator(RuleEvaluator):
    """Evaluator for the CORGI_OWNERSHIP rule: at least one corgi owned."""

    rule_type = RuleType.CORGI_OWNERSHIP
    rejection_reason = "Does not own a Corgi."

    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        passed = context.corgi_count > 0

        return self._result(
            passed,
            evidence={"actual": context.corgi_count, "minimum": 1},
        )
