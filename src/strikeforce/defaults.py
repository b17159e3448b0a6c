"""Shared constants — ledger tunables, env var names, config path resolver.

Single source of truth for the numbers the ledger enforces.
"""

from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Ledger constants
# ---------------------------------------------------------------------------

MAX_SQUAD_SIZE = 12
COOLDOWN_BLOCKS = 47
MISSION_CAP_PER_PHASE = 99
REWARD_BASE_UNITS = 1000
PHASE_DURATION_BLOCKS = 312
MAX_PHASE_INDEX = 5
TICK_BASE = 17

# Declared split between vault and control; no disbursement path uses it.
VAULT_SHARE_BPS = 85
CONTROL_SHARE_BPS = 15

# Flat, independent of how many phases a mission has cleared.
MISSION_REWARD = REWARD_BASE_UNITS * MISSION_CAP_PER_PHASE

CONSTANTS: dict[str, int] = {
    "MAX_SQUAD_SIZE": MAX_SQUAD_SIZE,
    "COOLDOWN_BLOCKS": COOLDOWN_BLOCKS,
    "MISSION_CAP_PER_PHASE": MISSION_CAP_PER_PHASE,
    "REWARD_BASE_UNITS": REWARD_BASE_UNITS,
    "PHASE_DURATION_BLOCKS": PHASE_DURATION_BLOCKS,
    "MAX_PHASE_INDEX": MAX_PHASE_INDEX,
    "TICK_BASE": TICK_BASE,
    "VAULT_SHARE_BPS": VAULT_SHARE_BPS,
    "CONTROL_SHARE_BPS": CONTROL_SHARE_BPS,
    "MISSION_REWARD": MISSION_REWARD,
}

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------

ENV_CONFIG_PATH = "STRIKEFORCE_CONFIG"

# ---------------------------------------------------------------------------
# Default paths
# ---------------------------------------------------------------------------

CONFIG_FILE_NAME = "strikeforce.yaml"


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


def resolve_config_path(explicit: str | Path | None = None) -> Path:
    """Resolve config path: explicit arg > ENV_CONFIG_PATH > ./strikeforce.yaml."""
    if explicit:
        return Path(explicit).expanduser()
    env = os.getenv(ENV_CONFIG_PATH)
    if env:
        return Path(env).expanduser()
    return Path.cwd() / CONFIG_FILE_NAME
