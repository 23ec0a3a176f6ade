"""Rule engine for Corgi Cover eligibility and coverage tiers."""

from .base import EvaluationContext, EvaluationResult, RuleEvaluator
from .engine import RuleEngine
from .tiering import TieringEngine

__all__ = [
    "EvaluationContext",
    "EvaluationResult",
    "RuleEngine",
    "RuleEvaluator",
    "TieringEngine",
]
