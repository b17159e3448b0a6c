"""Scenario replay — YAML list of ledger operations run against a fresh ledger.

Scenario shape:

    config:                # optional; falls back to the caller's config
      commander_tower: tower-1
      mission_control: control-1
      vault_hub: vault-1
    steps:
      - {op: launch, block: 0}
      - {op: claim, mission: 1, recipient: ace, block: 311, expect: PhaseLocked}
      - {op: claim, mission: 1, recipient: ace, block: 312, expect: ok}

`expect` is either `ok` or a ledger error name. A step whose outcome differs
fails the scenario.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from strikeforce.config import LedgerConfig, parse_config
from strikeforce.ledger import ERRORS
from strikeforce.ops import run_step

log = logging.getLogger(__name__)

EXPECT_OK = "ok"

STEP_ARG_TYPES: dict[str, type] = {
    "block": int,
    "mission": int,
    "slot": int,
    "agent": str,
    "recipient": str,
}


def load_scenario(path: str | Path) -> dict[str, Any]:
    scenario_path = Path(path)
    if not scenario_path.exists():
        raise FileNotFoundError(f"Scenario not found: {scenario_path}")
    with open(scenario_path) as f:
        raw = yaml.safe_load(f)
    _validate(raw, str(scenario_path))
    return raw


def _validate(raw: Any, source: str) -> None:
    if not isinstance(raw, dict):
        raise ValueError(f"{source}: scenario must be a YAML mapping")
    steps = raw.get("steps")
    if not isinstance(steps, list):
        raise ValueError(f"{source}: scenario must have a 'steps' list")
    for i, step in enumerate(steps, start=1):
        if not isinstance(step, dict):
            raise ValueError(f"{source}: step {i} must be a mapping")
        for key, kind in STEP_ARG_TYPES.items():
            if key in step and not _is_kind(step[key], kind):
                raise ValueError(
                    f"{source}: step {i} ({step.get('op')}): '{key}' must be {kind.__name__}, "
                    f"got {step[key]!r}"
                )
        expect = step.get("expect")
        if expect is not None and expect != EXPECT_OK and expect not in ERRORS:
            raise ValueError(
                f"{source}: step {i} expects unknown outcome '{expect}'. "
                f"Valid: {[EXPECT_OK, *sorted(ERRORS)]}"
            )


def _is_kind(value: Any, kind: type) -> bool:
    if kind is int and isinstance(value, bool):
        return False
    return isinstance(value, kind)


def _outcome(result: dict[str, object]) -> str:
    return str(result["code"]) if "error" in result else EXPECT_OK


def replay(scenario: dict[str, Any], config: LedgerConfig | None = None) -> dict[str, object]:
    """Run every step of a scenario and report outcomes."""
    _validate(scenario, "scenario")
    if scenario.get("config") is not None:
        config = parse_config(scenario["config"], source="scenario config")
    if config is None:
        raise ValueError("scenario has no 'config' block and no fallback config was given")

    ledger = config.build_ledger()
    steps: list[dict[str, object]] = []
    failed = 0

    for i, step in enumerate(scenario["steps"], start=1):
        result = run_step(ledger, step)
        outcome = _outcome(result)
        entry: dict[str, object] = {"step": i, "op": step["op"], "outcome": outcome, "result": result}
        expect = step.get("expect")
        if expect is not None:
            entry["expected"] = expect
            if expect != outcome:
                failed += 1
                log.warning("step %d (%s): expected %s, got %s", i, step["op"], expect, outcome)
        steps.append(entry)

    report: dict[str, object] = {
        "status": "failed" if failed else "passed",
        "steps_run": len(steps),
        "expectations_failed": failed,
        "steps": steps,
        "ledger": ledger.snapshot(),
    }
    if failed:
        report["error"] = f"BLOCKED: {failed} step expectation(s) failed"
    return report
