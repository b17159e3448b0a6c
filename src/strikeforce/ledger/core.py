"""MissionLedger — in-memory registry of missions and squad slots.

Mission lifecycle:
  launch → advance (phase 1..5) → terminate
  launch → (PHASE_DURATION_BLOCKS later) → claim reward, once

Squad: twelve numbered seats, one agent per seat, one seat per agent.

Every mutating call validates first and writes last, under the lock of the
single entity it touches. There is no ledger-wide lock; id allocation, the
reward total and the agent index each have their own.
"""

from __future__ import annotations

import logging
import threading

from strikeforce.defaults import (
    COOLDOWN_BLOCKS,
    MAX_PHASE_INDEX,
    MAX_SQUAD_SIZE,
    MISSION_REWARD,
    PHASE_DURATION_BLOCKS,
)

from .errors import (
    AgentAlreadyEnlisted,
    AgentNotEnlisted,
    InvalidPhaseTransition,
    MissionAlreadyTerminated,
    MissionDoesNotExist,
    PausedByCommander,
    PhaseLocked,
    RewardPoolExhausted,
    SlotAlreadyFilled,
    SquadOverCapacity,
    ZeroAddressDisallowed,
)
from .records import Mission, MissionRecord, SlotRecord, SquadMember

log = logging.getLogger(__name__)


def _require_identity(label: str, value: str | None) -> str:
    if not value:
        raise ZeroAddressDisallowed(f"{label} must be a non-empty identity", key=label)
    return value


def _is_int(value: object) -> bool:
    # bool is an int subclass and True would alias slot/mission 1.
    return isinstance(value, int) and not isinstance(value, bool)


def _require_block(operation: str, current_block: object) -> None:
    if not _is_int(current_block):
        raise TypeError(f"{operation}: block must be an int, got {type(current_block).__name__}")


class MissionLedger:
    def __init__(self, commander_tower: str, mission_control: str, vault_hub: str) -> None:
        self._commander_tower = _require_identity("commander_tower", commander_tower)
        self._mission_control = _require_identity("mission_control", mission_control)
        self._vault_hub = _require_identity("vault_hub", vault_hub)

        self._missions: dict[int, MissionRecord] = {}
        self._missions_lock = threading.Lock()
        self._mission_counter = 0

        # Seats are fixed, so the slot map itself is never resized.
        self._slots: dict[int, SlotRecord] = {
            n: SlotRecord(slot=n) for n in range(1, MAX_SQUAD_SIZE + 1)
        }
        self._agent_slots: dict[str, int] = {}
        self._agents_lock = threading.Lock()

        self._total_rewards = 0
        self._totals_lock = threading.Lock()

        self._paused = False

    # ------------------------------------------------------------------
    # Identities
    # ------------------------------------------------------------------

    @property
    def commander_tower(self) -> str:
        return self._commander_tower

    @property
    def mission_control(self) -> str:
        return self._mission_control

    @property
    def vault_hub(self) -> str:
        return self._vault_hub

    # ------------------------------------------------------------------
    # Gate
    # ------------------------------------------------------------------

    @property
    def paused(self) -> bool:
        return self._paused

    def set_paused(self, flag: bool) -> None:
        self._paused = bool(flag)
        log.info("ledger %s", "paused" if self._paused else "resumed")

    def _require_live(self, operation: str) -> None:
        if self._paused:
            log.debug("%s rejected: ledger paused", operation)
            raise PausedByCommander(f"{operation} blocked: ledger is paused by commander")

    # ------------------------------------------------------------------
    # Missions
    # ------------------------------------------------------------------

    def _lookup(self, mission_id: int) -> MissionRecord | None:
        if not _is_int(mission_id):
            return None
        with self._missions_lock:
            return self._missions.get(mission_id)

    def _mission(self, mission_id: int) -> MissionRecord:
        record = self._lookup(mission_id)
        if record is None:
            raise MissionDoesNotExist(f"mission {mission_id} does not exist", key=mission_id)
        return record

    def launch_mission(self, current_block: int) -> int:
        """Open a new mission at phase 1 and return its id."""
        self._require_live("launch_mission")
        _require_block("launch_mission", current_block)
        cooldown = current_block + COOLDOWN_BLOCKS
        with self._missions_lock:
            mission_id = self._mission_counter + 1
            record = MissionRecord(mission_id=mission_id, start_block=current_block, cooldown_until=cooldown)
            self._missions[mission_id] = record
            self._mission_counter = mission_id
        log.info("mission %d launched at block %d", mission_id, current_block)
        return mission_id

    def advance_phase(self, mission_id: int, current_block: int) -> int:
        """Move a mission to its next phase gate and return the new phase."""
        self._require_live("advance_phase")
        _require_block("advance_phase", current_block)
        record = self._mission(mission_id)
        with record.lock:
            if record.terminated:
                raise MissionAlreadyTerminated(f"mission {mission_id} is terminated", key=mission_id)
            next_phase = record.phase + 1
            if next_phase > MAX_PHASE_INDEX:
                raise InvalidPhaseTransition(
                    f"mission {mission_id} is at phase {record.phase}; max is {MAX_PHASE_INDEX}",
                    key=mission_id,
                )
            record.phase = next_phase
        log.debug("mission %d advanced to phase %d at block %d", mission_id, next_phase, current_block)
        return next_phase

    def terminate_mission(self, mission_id: int) -> None:
        """Close a mission for good. Not gated by pause."""
        record = self._mission(mission_id)
        with record.lock:
            if record.terminated:
                raise MissionAlreadyTerminated(f"mission {mission_id} is already terminated", key=mission_id)
            record.terminated = True
        log.info("mission %d terminated", mission_id)

    def claim_mission_reward(self, mission_id: int, recipient: str, current_block: int) -> int:
        """Pay the flat mission reward once the phase lock has elapsed.

        Returns the amount paid. The amount does not depend on the phase the
        mission reached.
        """
        self._require_live("claim_mission_reward")
        _require_block("claim_mission_reward", current_block)
        if not isinstance(recipient, str):
            raise TypeError(f"claim_mission_reward: recipient must be a str, got {type(recipient).__name__}")
        record = self._mission(mission_id)
        with record.lock:
            if record.terminated:
                raise MissionAlreadyTerminated(f"mission {mission_id} is terminated", key=mission_id)
            if record.reward_claimed:
                raise RewardPoolExhausted(f"mission {mission_id} reward already claimed", key=mission_id)
            unlock_block = record.start_block + PHASE_DURATION_BLOCKS
            if current_block < unlock_block:
                raise PhaseLocked(
                    f"mission {mission_id} reward locked until block {unlock_block} (now {current_block})",
                    key=mission_id,
                )
            record.reward_claimed = MISSION_REWARD
            record.claimed_by = recipient
            with self._totals_lock:
                self._total_rewards += MISSION_REWARD
        log.info("mission %d reward %d claimed by %s at block %d", mission_id, MISSION_REWARD, recipient, current_block)
        return MISSION_REWARD

    def get_mission(self, mission_id: int) -> Mission | None:
        record = self._lookup(mission_id)
        if record is None:
            return None
        with record.lock:
            return record.snapshot()

    def cooldown_until(self, mission_id: int) -> int:
        return self._mission(mission_id).cooldown_until

    @property
    def mission_counter(self) -> int:
        with self._missions_lock:
            return self._mission_counter

    @property
    def total_rewards_disbursed(self) -> int:
        with self._totals_lock:
            return self._total_rewards

    # ------------------------------------------------------------------
    # Squad
    # ------------------------------------------------------------------

    def _slot(self, slot: int) -> SlotRecord | None:
        if not _is_int(slot):
            return None
        return self._slots.get(slot)

    def assign_squad_slot(self, agent: str, slot: int, current_block: int) -> None:
        self._require_live("assign_squad_slot")
        _require_block("assign_squad_slot", current_block)
        if not agent:
            raise ZeroAddressDisallowed("agent identity must be non-empty", key=agent)
        if not isinstance(agent, str):
            raise TypeError(f"assign_squad_slot: agent must be a str, got {type(agent).__name__}")
        record = self._slot(slot)
        if record is None:
            raise SquadOverCapacity(f"slot {slot} is outside 1..{MAX_SQUAD_SIZE}", key=slot)

        # Lock order: slot, then agent index.
        with record.lock:
            if record.active:
                raise SlotAlreadyFilled(f"slot {slot} is held by {record.agent}", key=slot)
            with self._agents_lock:
                held = self._agent_slots.get(agent)
                if held is not None:
                    raise AgentAlreadyEnlisted(f"{agent} already holds slot {held}", key=agent)
                self._agent_slots[agent] = slot
            record.agent = agent
            record.enlisted_at_block = current_block
        log.debug("slot %d assigned to %s at block %d", slot, agent, current_block)

    def revoke_squad_slot(self, slot: int) -> str:
        """Vacate a slot and return the agent that held it.

        Not gated by pause, so a paused ledger can still stand agents down.
        """
        record = self._slot(slot)
        if record is None:
            raise AgentNotEnlisted(f"slot {slot} is not a squad slot", key=slot)
        with record.lock:
            agent = record.agent
            if agent is None:
                raise AgentNotEnlisted(f"slot {slot} is vacant", key=slot)
            with self._agents_lock:
                self._agent_slots.pop(agent, None)
            record.agent = None
            record.enlisted_at_block = 0
        log.debug("slot %d revoked from %s", slot, agent)
        return agent

    def get_squad_member(self, slot: int) -> SquadMember | None:
        record = self._slot(slot)
        if record is None:
            return None
        with record.lock:
            return record.snapshot()

    def slot_of(self, agent: str) -> int | None:
        with self._agents_lock:
            return self._agent_slots.get(agent)

    def active_squad(self) -> dict[int, SquadMember]:
        squad: dict[int, SquadMember] = {}
        for slot in self._slots:
            member = self.get_squad_member(slot)
            if member is not None:
                squad[slot] = member
        return squad

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def snapshot(self) -> dict[str, object]:
        return {
            "commander_tower": self._commander_tower,
            "mission_control": self._mission_control,
            "vault_hub": self._vault_hub,
            "paused": self._paused,
            "mission_counter": self.mission_counter,
            "total_rewards_disbursed": self.total_rewards_disbursed,
            "squad_size": len(self.active_squad()),
        }
