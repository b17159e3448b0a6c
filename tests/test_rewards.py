"""Tests for time-locked reward claims."""

from __future__ import annotations

import pytest

from strikeforce.defaults import MISSION_REWARD, PHASE_DURATION_BLOCKS
from strikeforce.ledger import (
    MissionAlreadyTerminated,
    MissionDoesNotExist,
    MissionLedger,
    PausedByCommander,
    PhaseLocked,
    RewardPoolExhausted,
)


@pytest.fixture
def ledger() -> MissionLedger:
    return MissionLedger("tower", "control", "vault")


def test_reward_amount_constant():
    assert MISSION_REWARD == 99000
    assert PHASE_DURATION_BLOCKS == 312


def test_claim_before_lock_fails(ledger):
    mission_id = ledger.launch_mission(0)
    with pytest.raises(PhaseLocked):
        ledger.claim_mission_reward(mission_id, "ace", 311)
    assert ledger.get_mission(mission_id).reward_claimed == 0
    assert ledger.total_rewards_disbursed == 0


def test_claim_at_lock_succeeds_once(ledger):
    mission_id = ledger.launch_mission(0)
    with pytest.raises(PhaseLocked):
        ledger.claim_mission_reward(mission_id, "ace", 311)

    assert ledger.claim_mission_reward(mission_id, "ace", 312) == 99000
    mission = ledger.get_mission(mission_id)
    assert mission.reward_claimed == 99000
    assert mission.claimed_by == "ace"
    assert ledger.total_rewards_disbursed == 99000

    with pytest.raises(RewardPoolExhausted):
        ledger.claim_mission_reward(mission_id, "ace", 313)
    assert ledger.total_rewards_disbursed == 99000


def test_lock_is_relative_to_start_block(ledger):
    mission_id = ledger.launch_mission(1000)
    with pytest.raises(PhaseLocked):
        ledger.claim_mission_reward(mission_id, "ace", 1311)
    assert ledger.claim_mission_reward(mission_id, "ace", 1312) == 99000


def test_reward_is_flat_across_phases(ledger):
    early = ledger.launch_mission(0)
    late = ledger.launch_mission(0)
    for block in range(4):
        ledger.advance_phase(late, block)
    assert ledger.claim_mission_reward(early, "ace", 400) == ledger.claim_mission_reward(late, "ace", 400)


def test_total_grows_by_reward_per_claim(ledger):
    ids = [ledger.launch_mission(0) for _ in range(3)]
    for n, mission_id in enumerate(ids, start=1):
        ledger.claim_mission_reward(mission_id, f"agent-{n}", 500)
        assert ledger.total_rewards_disbursed == 99000 * n


def test_claim_terminated_mission_fails(ledger):
    mission_id = ledger.launch_mission(0)
    ledger.terminate_mission(mission_id)
    with pytest.raises(MissionAlreadyTerminated):
        ledger.claim_mission_reward(mission_id, "ace", 1000)


def test_terminated_check_precedes_time_lock(ledger):
    mission_id = ledger.launch_mission(0)
    ledger.terminate_mission(mission_id)
    with pytest.raises(MissionAlreadyTerminated):
        ledger.claim_mission_reward(mission_id, "ace", 1)


def test_terminate_after_claim_blocks_second_claim(ledger):
    mission_id = ledger.launch_mission(0)
    ledger.claim_mission_reward(mission_id, "ace", 312)
    ledger.terminate_mission(mission_id)
    with pytest.raises(MissionAlreadyTerminated):
        ledger.claim_mission_reward(mission_id, "ace", 400)


def test_claim_unknown_mission(ledger):
    with pytest.raises(MissionDoesNotExist):
        ledger.claim_mission_reward(9, "ace", 1000)


def test_claim_while_paused(ledger):
    mission_id = ledger.launch_mission(0)
    ledger.set_paused(True)
    with pytest.raises(PausedByCommander):
        ledger.claim_mission_reward(mission_id, "ace", 1000)
    ledger.set_paused(False)
    assert ledger.claim_mission_reward(mission_id, "ace", 1000) == 99000


def test_claim_with_bad_block_changes_nothing(ledger):
    mission_id = ledger.launch_mission(0)
    with pytest.raises(TypeError):
        ledger.claim_mission_reward(mission_id, "ace", None)
    assert ledger.get_mission(mission_id).reward_claimed == 0
    assert ledger.total_rewards_disbursed == 0


def test_claim_with_bad_recipient_changes_nothing(ledger):
    mission_id = ledger.launch_mission(0)
    with pytest.raises(TypeError):
        ledger.claim_mission_reward(mission_id, 42, 400)
    assert ledger.get_mission(mission_id).claimed_by is None
    assert ledger.total_rewards_disbursed == 0
