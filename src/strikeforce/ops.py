"""Ledger operations as dict-in / dict-out calls.

Each function wraps one MissionLedger call. Rejections come back as
{"error": "BLOCKED: ...", "code": <error name>} instead of raising, so the
CLI and the scenario runner can report them without unwinding.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Callable

from strikeforce.ledger import LedgerError, MissionLedger


def _blocked(exc: LedgerError) -> dict[str, object]:
    return {"error": f"BLOCKED: {exc.code}: {exc.message}", "code": exc.code}


def launch(ledger: MissionLedger, block: int) -> dict[str, object]:
    try:
        mission_id = ledger.launch_mission(block)
    except LedgerError as exc:
        return _blocked(exc)
    mission = ledger.get_mission(mission_id)
    return {"status": "launched", "mission_id": mission_id, "mission": asdict(mission) if mission else None}


def advance(ledger: MissionLedger, mission: int, block: int) -> dict[str, object]:
    try:
        phase = ledger.advance_phase(mission, block)
    except LedgerError as exc:
        return _blocked(exc)
    return {"status": "advanced", "mission_id": mission, "phase": phase}


def terminate(ledger: MissionLedger, mission: int) -> dict[str, object]:
    try:
        ledger.terminate_mission(mission)
    except LedgerError as exc:
        return _blocked(exc)
    return {"status": "terminated", "mission_id": mission}


def claim(ledger: MissionLedger, mission: int, recipient: str, block: int) -> dict[str, object]:
    try:
        amount = ledger.claim_mission_reward(mission, recipient, block)
    except LedgerError as exc:
        return _blocked(exc)
    return {
        "status": "claimed",
        "mission_id": mission,
        "recipient": recipient,
        "amount": amount,
        "total_rewards_disbursed": ledger.total_rewards_disbursed,
    }


def assign(ledger: MissionLedger, agent: str, slot: int, block: int) -> dict[str, object]:
    try:
        ledger.assign_squad_slot(agent, slot, block)
    except LedgerError as exc:
        return _blocked(exc)
    return {"status": "assigned", "agent": agent, "slot": slot, "enlisted_at_block": block}


def revoke(ledger: MissionLedger, slot: int) -> dict[str, object]:
    try:
        agent = ledger.revoke_squad_slot(slot)
    except LedgerError as exc:
        return _blocked(exc)
    return {"status": "revoked", "agent": agent, "slot": slot}


def pause(ledger: MissionLedger) -> dict[str, object]:
    ledger.set_paused(True)
    return {"status": "paused", "paused": True}


def unpause(ledger: MissionLedger) -> dict[str, object]:
    ledger.set_paused(False)
    return {"status": "resumed", "paused": False}


# op name → (handler, required step keys in call order)
OPERATIONS: dict[str, tuple[Callable[..., dict[str, object]], tuple[str, ...]]] = {
    "launch": (launch, ("block",)),
    "advance": (advance, ("mission", "block")),
    "terminate": (terminate, ("mission",)),
    "claim": (claim, ("mission", "recipient", "block")),
    "assign": (assign, ("agent", "slot", "block")),
    "revoke": (revoke, ("slot",)),
    "pause": (pause, ()),
    "unpause": (unpause, ()),
}


def run_step(ledger: MissionLedger, step: dict[str, Any]) -> dict[str, object]:
    """Dispatch one scenario step. Malformed steps raise ValueError."""
    op = step.get("op")
    if op not in OPERATIONS:
        raise ValueError(f"unknown op {op!r}. Valid: {sorted(OPERATIONS)}")
    handler, keys = OPERATIONS[op]
    missing = [k for k in keys if k not in step]
    if missing:
        raise ValueError(f"op '{op}' missing required key(s): {', '.join(missing)}")
    return handler(ledger, *(step[k] for k in keys))
