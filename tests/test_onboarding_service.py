import json
from pathlib import Path

import pytest

from corgi_cover.config import OutputPaths, Settings
from corgi_cover.core.enums import Tier
from corgi_cover.core.errors import MalformedRowError
from corgi_cover.main import main
from corgi_cover.services.export_service import ExportService
from corgi_cover.services.onboarding_service import OnboardingService


@pytest.fixture
def onboarding_service(output_paths, rule_engine):
    return OnboardingService(
        output_paths, rule_engine, ExportService(preserve_legacy_spacing=False)
    )


def test_end_to_end_run(onboarding_service, output_paths, applications_csv):
    result = onboarding_service.run(applications_csv)

    assert result.loaded is True
    assert result.summary.to_dict() == {"accepted": 3, "rejected": 1, "write_failed": 0}
    assert [tier for _, tier in result.tiers] == [
        Tier.SILVER,
        Tier.PLATINUM,
        Tier.NONE,
        Tier.SILVER,
    ]
    assert result.json_path == output_paths.json_path

    exported = json.loads(Path(output_paths.json_path).read_text())
    assert [record["name"] for record in exported] == ["Chloe", "Ethan", "Logan"]
    assert "Annabelle, WY, 19, 0, Residence not eligible." in Path(
        output_paths.rejected_path
    ).read_text()


def test_run_with_policy_index(onboarding_service, applications_csv):
    policies = {"Chloe": ["megasafe"], "Annabelle": ["megasafe"]}

    result = onboarding_service.run(applications_csv, policy_index=policies)

    assert [(a.name, tier) for a, tier in result.tiers] == [
        ("Chloe", Tier.PLATINUM),
        ("Ethan", Tier.PLATINUM),
        ("Annabelle", Tier.NONE),
        ("Logan", Tier.SILVER),
    ]


def test_tiers_keep_every_application_with_a_shared_name(onboarding_service, tmp_path):
    path = tmp_path / "applications.csv"
    path.write_text("name, state, corgi-count, policy-count\nSam, IL, 1, 0\nSam, IL, 7, 0\n")

    result = onboarding_service.run(path)

    assert result.summary.accepted == 2
    assert [(a.corgi_count, tier) for a, tier in result.tiers] == [
        (1, Tier.SILVER),
        (7, Tier.PLATINUM),
    ]


def test_comma_in_name_exports_with_legacy_spacing(output_paths, rule_engine, tmp_path):
    path = tmp_path / "applications.csv"
    path.write_text("name, state, corgi-count, policy-count\nO,Brien, IL, 1, 0\n")
    service = OnboardingService(
        output_paths, rule_engine, ExportService(preserve_legacy_spacing=True)
    )

    result = service.run(path)

    exported = json.loads(Path(output_paths.json_path).read_text())
    assert result.summary.accepted == 1
    assert exported == [
        {"name": "O,Brien", " state": " IL", " corgi-count": " 1", " policy-count": " 0"}
    ]


def test_missing_input_produces_no_output(onboarding_service, output_paths, tmp_path):
    result = onboarding_service.run(tmp_path / "missing.csv")

    assert result.loaded is False
    assert result.summary is None
    assert "missing.csv" in result.note
    assert not Path(output_paths.accepted_path).exists()


def test_nothing_accepted_skips_export(onboarding_service, output_paths, tmp_path):
    path = tmp_path / "applications.csv"
    path.write_text("name, state, corgi-count, policy-count\nAnnabelle, WY, 19, 0\n")

    result = onboarding_service.run(path)

    assert result.summary.accepted == 0
    assert result.json_path is None
    assert result.note is not None
    assert not Path(output_paths.json_path).exists()


def test_malformed_input_writes_nothing(onboarding_service, output_paths, tmp_path):
    path = tmp_path / "applications.csv"
    path.write_text("name, state, corgi-count, policy-count\nChloe, IL, 1, 0\nEthan, IL\n")

    with pytest.raises(MalformedRowError):
        onboarding_service.run(path)
    assert not Path(output_paths.accepted_path).exists()


def test_output_paths_accept_camel_case_options():
    paths = OutputPaths.model_validate(
        {"acceptedPath": "a.csv", "rejectedPath": "r.csv", "jsonPath": "a.json"}
    )
    assert paths == OutputPaths(accepted_path="a.csv", rejected_path="r.csv", json_path="a.json")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ELIGIBLE_STATES", "il, tx,")
    monkeypatch.setenv("ACCEPTED_PATH", "/tmp/ok.csv")

    configured = Settings(_env_file=None)

    assert configured.eligible_states_set == frozenset({"IL", "TX"})
    assert configured.output_paths.accepted_path == "/tmp/ok.csv"


def test_cli_run(output_paths, applications_csv, policies_json, capsys):
    exit_code = main(
        [
            str(applications_csv),
            "--policies", str(policies_json),
            "--accepted", output_paths.accepted_path,
            "--rejected", output_paths.rejected_path,
            "--json", output_paths.json_path,
        ]
    )

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "accepted=3 rejected=1 write_failed=0" in out
    assert "Ethan: platinum" in out
    assert Path(output_paths.json_path).exists()


def test_cli_missing_input(output_paths, tmp_path):
    exit_code = main(
        [
            str(tmp_path / "missing.csv"),
            "--accepted", output_paths.accepted_path,
            "--rejected", output_paths.rejected_path,
            "--json", output_paths.json_path,
        ]
    )
    assert exit_code == 1


def test_cli_missing_policy_index(output_paths, applications_csv, tmp_path):
    exit_code = main(
        [
            str(applications_csv),
            "--policies", str(tmp_path / "policies.json"),
            "--accepted", output_paths.accepted_path,
            "--rejected", output_paths.rejected_path,
            "--json", output_paths.json_path,
        ]
    )
    assert exit_code == 1
    assert not Path(output_paths.accepted_path).exists()


def test_cli_invalid_policy_index(output_paths, applications_csv, tmp_path):
    policies = tmp_path / "policies.json"
    policies.write_text('{"Ethan": "megasafe"}')

    exit_code = main(
        [
            str(applications_csv),
            "--policies", str(policies),
            "--accepted", output_paths.accepted_path,
            "--rejected", output_paths.rejected_path,
            "--json", output_paths.json_path,
        ]
    )
    assert exit_code == 2


def test_cli_reports_every_tier_for_shared_names(output_paths, tmp_path, capsys):
    path = tmp_path / "applications.csv"
    path.write_text("name, state, corgi-count, policy-count\nSam, IL, 1, 0\nSam, IL, 7, 0\n")

    exit_code = main(
        [
            str(path),
            "--accepted", output_paths.accepted_path,
            "--rejected", output_paths.rejected_path,
            "--json", output_paths.json_path,
        ]
    )

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Sam: silver" in out
    assert "Sam: platinum" in out
