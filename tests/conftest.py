"""
Pytest configuration and shared fixtures for Corgi Cover tests.
"""

from pathlib import Path

import pytest

from corgi_cover.config import OutputPaths
from corgi_cover.models.domain.application import Application
from corgi_cover.services.rule_engine import RuleEngine

RESOURCES = Path(__file__).parent / "resources"


@pytest.fixture
def applications_csv() -> Path:
    """The sample application table shipped with the tests."""
    return RESOURCES / "corgi-cover-applications.csv"


@pytest.fixture
def policies_json() -> Path:
    return RESOURCES / "policies.json"


@pytest.fixture
def test_data():
    """Applications matching the sample table, in file order."""
    return [
        Application(name="Chloe", state="IL", corgi_count=1, policy_count=0),
        Application(name="Ethan", state="IL", corgi_count=4, policy_count=2),
        Application(name="Annabelle", state="WY", corgi_count=19, policy_count=0),
        Application(name="Logan", state="WA", corgi_count=2, policy_count=1),
    ]


@pytest.fixture
def test_policies():
    return {
        "Chloe": ["secure goldfish"],
        "Ethan": ["cool cats cover", "megasafe"],
    }


@pytest.fixture
def rule_engine():
    return RuleEngine(eligible_states={"IL", "WA", "NY", "CO"}, marker_policy="megasafe")


@pytest.fixture
def output_paths(tmp_path) -> OutputPaths:
    """Output streams isolated in a temporary directory."""
    return OutputPaths(
        accepted_path=str(tmp_path / "accepted.csv"),
        rejected_path=str(tmp_path / "rejected.csv"),
        json_path=str(tmp_path / "accepted.json"),
    )
