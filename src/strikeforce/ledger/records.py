"""Mission and squad records. Each live record owns the lock that guards it."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Mission:
    mission_id: int
    start_block: int
    phase: int
    terminated: bool
    reward_claimed: int
    cooldown_until: int
    claimed_by: str | None = None


@dataclass(frozen=True)
class SquadMember:
    slot: int
    agent: str
    enlisted_at_block: int
    active: bool


@dataclass
class MissionRecord:
    mission_id: int
    start_block: int
    cooldown_until: int
    phase: int = 1
    terminated: bool = False
    reward_claimed: int = 0
    claimed_by: str | None = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def snapshot(self) -> Mission:
        return Mission(
            mission_id=self.mission_id,
            start_block=self.start_block,
            phase=self.phase,
            terminated=self.terminated,
            reward_claimed=self.reward_claimed,
            cooldown_until=self.cooldown_until,
            claimed_by=self.claimed_by,
        )


@dataclass
class SlotRecord:
    """A squad seat. Vacant when `agent` is None."""

    slot: int
    agent: str | None = None
    enlisted_at_block: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def active(self) -> bool:
        return self.agent is not None

    def snapshot(self) -> SquadMember | None:
        if self.agent is None:
            return None
        return SquadMember(
            slot=self.slot,
            agent=self.agent,
            enlisted_at_block=self.enlisted_at_block,
            active=True,
        )
