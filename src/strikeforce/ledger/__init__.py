"""Ledger — mission lifecycle and squad slots behind per-entity locks."""

from strikeforce.ledger.core import MissionLedger
from strikeforce.ledger.errors import (
    ERRORS,
    AgentAlreadyEnlisted,
    AgentNotEnlisted,
    InvalidPhaseTransition,
    LedgerError,
    MissionAlreadyTerminated,
    MissionDoesNotExist,
    PausedByCommander,
    PhaseLocked,
    RewardPoolExhausted,
    SlotAlreadyFilled,
    SquadOverCapacity,
    ZeroAddressDisallowed,
)
from strikeforce.ledger.records import Mission, SquadMember

__all__ = [
    "ERRORS",
    "AgentAlreadyEnlisted",
    "AgentNotEnlisted",
    "InvalidPhaseTransition",
    "LedgerError",
    "Mission",
    "MissionAlreadyTerminated",
    "MissionDoesNotExist",
    "MissionLedger",
    "PausedByCommander",
    "PhaseLocked",
    "RewardPoolExhausted",
    "SlotAlreadyFilled",
    "SquadMember",
    "SquadOverCapacity",
    "ZeroAddressDisallowed",
]
