"""CLI output formatting — JSON, human-readable, and compact modes."""
from __future__ import annotations

import json
import sys

import click


def _dump(value: object) -> str:
    return json.dumps(value, indent=2, default=str)


def output(data: dict[str, object], human: bool = False, compact: bool = False) -> None:
    """Render a command result on stdout.

    A result carrying an "error" key is a rejected command: it goes to
    stderr as JSON whatever the mode, and the process exits 1.
    """
    if "error" in data:
        click.echo(_dump(data), err=True)
        sys.exit(1)
    if compact:
        text = _format_compact(data)
    elif human:
        text = "\n".join(
            f"{k}: {_dump(v) if isinstance(v, (list, dict)) else v}" for k, v in data.items()
        )
    else:
        text = _dump(data)
    click.echo(text)


def _format_compact(data: dict[str, object]) -> str:
    """Scenario reports: one line per step plus a ledger summary.

    Anything else: a status line and key=value pairs.
    """
    lines: list[str] = []

    status = data.get("status", "")
    if status:
        run = data.get("steps_run")
        lines.append(f"{status}" + (f" ({run} steps)" if run is not None else ""))

    steps = data.get("steps")
    if isinstance(steps, list) and steps:
        lines.append("")
        for s in steps:
            if not isinstance(s, dict):
                continue
            mark = ""
            if "expected" in s:
                mark = " ✓" if s["expected"] == s["outcome"] else f" ✗ expected {s['expected']}"
            lines.append(f"  {s.get('step', ''):>3} {s.get('op', ''):10s} {s.get('outcome', '')}{mark}")

    ledger = data.get("ledger")
    if isinstance(ledger, dict):
        lines.append("")
        lines.append(
            f"missions={ledger.get('mission_counter')} "
            f"rewards={ledger.get('total_rewards_disbursed')} "
            f"squad={ledger.get('squad_size')} "
            f"paused={ledger.get('paused')}"
        )

    if not isinstance(steps, list) and not isinstance(ledger, dict):
        pairs = [f"{k}={v}" for k, v in data.items() if k != "status" and not isinstance(v, (list, dict))]
        lines.extend(pairs)

    if not lines:
        return _dump(data)

    return "\n".join(lines)
