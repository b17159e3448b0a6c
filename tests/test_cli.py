"""CLI smoke tests."""
from __future__ import annotations

import json
from pathlib import Path

import click
import pytest
import yaml
from click.testing import CliRunner

from strikeforce.cli import cli
from strikeforce.defaults import ENV_CONFIG_PATH

SCENARIOS_DIR = Path(__file__).resolve().parent.parent / "scenarios"

CONFIG = {
    "commander_tower": "tower",
    "mission_control": "control",
    "vault_hub": "vault",
}


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
    monkeypatch.chdir(tmp_path)
    return CliRunner()


def test_cli_is_group():
    assert isinstance(cli, click.Group)


def test_cli_help_exits_zero(runner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0


def test_cli_expected_subcommands():
    registered = list(cli.commands.keys())
    for cmd in ["constants", "check-config", "replay"]:
        assert cmd in registered, f"Missing subcommand: {cmd}"


def test_constants_json(runner):
    result = runner.invoke(cli, ["constants"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["MAX_SQUAD_SIZE"] == 12
    assert data["MISSION_REWARD"] == 99000
    assert data["VAULT_SHARE_BPS"] == 85


def test_constants_human(runner):
    result = runner.invoke(cli, ["--human", "constants"])
    assert result.exit_code == 0
    assert "PHASE_DURATION_BLOCKS: 312" in result.output


def test_check_config_ok(runner, tmp_path):
    (tmp_path / "strikeforce.yaml").write_text(yaml.safe_dump(CONFIG))
    result = runner.invoke(cli, ["check-config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["status"] == "ok"
    assert data["vault_hub"] == "vault"


def test_check_config_missing(runner):
    result = runner.invoke(cli, ["check-config"])
    assert result.exit_code == 1


def test_replay_bundled_scenario(runner):
    result = runner.invoke(cli, ["replay", str(SCENARIOS_DIR / "full_cycle.yaml")])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["status"] == "passed"
    assert data["ledger"]["total_rewards_disbursed"] == 99000


def test_replay_compact(runner):
    result = runner.invoke(cli, ["--compact", "replay", str(SCENARIOS_DIR / "squad_rotation.yaml")])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("passed (13 steps)")
    assert "squad=2" in result.output


def test_replay_uses_fallback_config(runner, tmp_path):
    (tmp_path / "strikeforce.yaml").write_text(yaml.safe_dump(CONFIG))
    scenario = tmp_path / "plain.yaml"
    scenario.write_text(yaml.safe_dump({"steps": [{"op": "launch", "block": 0, "expect": "ok"}]}))
    result = runner.invoke(cli, ["replay", str(scenario)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["ledger"]["commander_tower"] == "tower"


def test_replay_failed_expectation_exits_one(runner, tmp_path):
    scenario = tmp_path / "bad.yaml"
    scenario.write_text(yaml.safe_dump({
        "config": CONFIG,
        "steps": [{"op": "revoke", "slot": 1, "expect": "ok"}],
    }))
    result = runner.invoke(cli, ["replay", str(scenario)])
    assert result.exit_code == 1


def test_replay_unknown_op_exits_one(runner, tmp_path):
    scenario = tmp_path / "bad.yaml"
    scenario.write_text(yaml.safe_dump({"config": CONFIG, "steps": [{"op": "explode"}]}))
    result = runner.invoke(cli, ["replay", str(scenario)])
    assert result.exit_code == 1


def test_replay_bad_block_type_exits_one(runner, tmp_path):
    scenario = tmp_path / "bad.yaml"
    scenario.write_text(yaml.safe_dump({
        "config": CONFIG,
        "steps": [{"op": "launch", "block": "ten"}],
    }))
    result = runner.invoke(cli, ["replay", str(scenario)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, TypeError)
    assert "BLOCKED" in result.output


def test_constants_compact(runner):
    result = runner.invoke(cli, ["--compact", "constants"])
    assert result.exit_code == 0
    assert "MISSION_REWARD=99000" in result.output.splitlines()


def test_check_config_compact(runner, tmp_path):
    (tmp_path / "strikeforce.yaml").write_text(yaml.safe_dump(CONFIG))
    result = runner.invoke(cli, ["--compact", "check-config"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "ok"
    assert "vault_hub=vault" in lines
