from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from strikeforce.defaults import resolve_config_path
from strikeforce.ledger import MissionLedger

IDENTITY_KEYS = ("commander_tower", "mission_control", "vault_hub")


@dataclass(frozen=True)
class LedgerConfig:
    commander_tower: str
    mission_control: str
    vault_hub: str
    config_path: Path | None = None

    def build_ledger(self) -> MissionLedger:
        return MissionLedger(self.commander_tower, self.mission_control, self.vault_hub)

    def as_dict(self) -> dict[str, object]:
        return {
            "commander_tower": self.commander_tower,
            "mission_control": self.mission_control,
            "vault_hub": self.vault_hub,
            "config_path": str(self.config_path) if self.config_path else None,
        }


def parse_config(raw: Any, source: str = "<config>", config_path: Path | None = None) -> LedgerConfig:
    """Validate a raw YAML mapping and build a LedgerConfig."""
    if not isinstance(raw, dict):
        raise ValueError(f"{source}: top-level config must be a YAML mapping")

    values: dict[str, str] = {}
    for key in IDENTITY_KEYS:
        value = raw.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{source}: '{key}' must be a non-empty string")
        values[key] = value.strip()

    return LedgerConfig(config_path=config_path, **values)


def load_config(config_path: str | Path | None = None) -> LedgerConfig:
    cfg_path = resolve_config_path(config_path).resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config not found: {cfg_path}")

    raw = yaml.safe_load(cfg_path.read_text()) or {}
    return parse_config(raw, source=str(cfg_path), config_path=cfg_path)
