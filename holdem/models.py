from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, NamedTuple, Tuple

from .cards import Card, cards_to_labels


class HandCategory(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}


@dataclass(frozen=True, order=True)
class Hand:
    # Ordering only looks at value; two hands with equal value rank the same.
    value: int
    category: HandCategory = field(compare=False)
    description: str = field(compare=False)
    cards: Tuple[Card, ...] = field(compare=False)
    kickers: Tuple[int, ...] = field(compare=False, default=())

    def payload(self) -> Dict[str, object]:
        return {
            "best_hand": self.description,
            "hand_value": self.value,
            "best_five_cards": cards_to_labels(self.cards),
        }


@dataclass(frozen=True)
class HandComparison:
    player1: Hand
    player2: Hand
    winner: int  # 0 tie, 1 or 2

    def payload(self) -> Dict[str, object]:
        return {
            "player1_hand": self.player1.payload(),
            "player2_hand": self.player2.payload(),
            "winner": self.winner,
        }


class WinProbability(NamedTuple):
    win_probability: float
    tie_probability: float

    def payload(self) -> Dict[str, float]:
        return {"win_probability": self.win_probability, "tie_probability": self.tie_probability}
