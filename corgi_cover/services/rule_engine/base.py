"""Rule engine foundation with evaluation context, results, and base evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from corgi_cover.core.enums import RuleType


@dataclass(frozen=True)
class EvaluationContext:
    """
    Evaluation context containing the applicant attributes under evaluation.

    Attributes:
        state: Jurisdiction code of the applicant's residence
        corgi_count: Number of corgis owned
        eligible_states: Jurisdictions that qualify for any coverage
    """

    state: str
    corgi_count: int
    eligible_states: FrozenSet[str]


@dataclass
class EvaluationResult:
    """
    Result of evaluating a single eligibility rule.

    Attributes:
        rule_type: The rule that produced this result
        passed: Whether the rule evaluation passed
        reason: Human-readable rejection reason (None when passed)
        evidence: Structured data showing actual vs. required values
    """

    rule_type: RuleType
    passed: bool
    reason: Optional[str] = None
    evidence: dict = field(default_factory=dict)


class RuleEvaluator(ABC):
    """
    Abstract base class for eligibility rule evaluators (Strategy pattern).

    Each concrete evaluator checks one eligibility condition and reports
    the rejection reason shown to the applicant when it fails.
    """

    rule_type: RuleType
    rejection_reason: str

    @abstractmethod
    def evaluate(self, context: EvaluationContext) -> EvaluationResult:
        """
        Evaluate the rule against the provided context.

        Args:
            context: EvaluationContext with validated applicant attributes

        Returns:
            EvaluationResult with pass/fail, reason, and evidence
        """
        pass

    def _result(self, passed: bool, evidence: dict) -> EvaluationResult:
        return EvaluationResult(
            rule_type=self.rule_type,
            passed=passed,
            reason=None if passed else self.rejection_reason,
            evidence=evidence,
        )
