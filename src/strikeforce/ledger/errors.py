"""Named ledger failures. Every check raises before any state is touched."""

from __future__ import annotations


class LedgerError(Exception):
    """Base for every rejected ledger call."""

    def __init__(self, message: str, key: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key

    @property
    def code(self) -> str:
        return type(self).__name__


class PausedByCommander(LedgerError):
    pass


class ZeroAddressDisallowed(LedgerError):
    pass


class MissionDoesNotExist(LedgerError):
    pass


class MissionAlreadyTerminated(LedgerError):
    pass


class InvalidPhaseTransition(LedgerError):
    pass


class SquadOverCapacity(LedgerError):
    pass


class SlotAlreadyFilled(LedgerError):
    pass


class AgentNotEnlisted(LedgerError):
    pass


class AgentAlreadyEnlisted(LedgerError):
    pass


class RewardPoolExhausted(LedgerError):
    pass


class PhaseLocked(LedgerError):
    pass


ERRORS: dict[str, type[LedgerError]] = {
    cls.__name__: cls
    for cls in (
        PausedByCommander,
        ZeroAddressDisallowed,
        MissionDoesNotExist,
        MissionAlreadyTerminated,
        InvalidPhaseTransition,
        SquadOverCapacity,
        SlotAlreadyFilled,
        AgentNotEnlisted,
        AgentAlreadyEnlisted,
        RewardPoolExhausted,
        PhaseLocked,
    )
}
