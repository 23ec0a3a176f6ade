"""Rule evaluators for the eligibility rules."""

from .corgi_evaluator import CorgiOwnershipEvaluator
from .residence_evaluator import ResidenceEvaluator

__all__ = [
    "CorgiOwnershipEvaluator",
    "ResidenceEvaluator",
]
