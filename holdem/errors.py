from __future__ import annotations

from typing import Optional


class PokerError(ValueError):
    """Base class for rejected input. ``code`` is stable and safe to send to clients."""

    code = "POKER_ERROR"

    def __init__(self, msg: str, index: Optional[int] = None) -> None:
        super().__init__(msg)
        self.msg = msg
        self.index = index


class InvalidFormatError(PokerError):
    code = "INVALID_FORMAT"


class InvalidSuitError(PokerError):
    code = "INVALID_SUIT"


class InvalidRankError(PokerError):
    code = "INVALID_RANK"


class InvalidCardCountError(PokerError):
    code = "INVALID_CARD_COUNT"


class InvalidCommunityCountError(PokerError):
    code = "INVALID_COMMUNITY_COUNT"


class InvalidPlayerCountError(PokerError):
    code = "INVALID_PLAYER_COUNT"


class InvalidSimulationCountError(PokerError):
    code = "INVALID_SIMULATION_COUNT"
