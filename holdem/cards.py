from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Optional, Sequence

from .errors import InvalidFormatError, InvalidRankError, InvalidSuitError, PokerError

RANKS = "23456789TJQKA"
SUITS = "HDCS"


class Suit(str, Enum):
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"


class Rank(IntEnum):
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @property
    def letter(self) -> str:
        return RANKS[self.value]


_SUIT_BY_LETTER = {suit.value: suit for suit in Suit}
_RANK_BY_LETTER = {rank.letter: rank for rank in Rank}


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: Rank

    @property
    def label(self) -> str:
        return f"{self.suit.value}{self.rank.letter}"

    def __str__(self) -> str:
        return self.label


def parse_card(label: str) -> Card:
    """Parse a suit-then-rank label such as ``"HA"`` or ``"s7"``."""
    if len(label) != 2:
        raise InvalidFormatError(f"Invalid card format: {label!r} (must be 2 characters)")
    suit = _SUIT_BY_LETTER.get(label[0].upper())
    if suit is None:
        raise InvalidSuitError(f"Invalid suit: {label[0]!r} (must be H, D, C, or S)")
    rank = _RANK_BY_LETTER.get(label[1].upper())
    if rank is None:
        raise InvalidRankError(f"Invalid rank: {label[1]!r} (must be 2-9, T, J, Q, K, or A)")
    return Card(suit, rank)


def parse_cards(labels: Sequence[str]) -> List[Card]:
    cards = []
    for idx, label in enumerate(labels):
        try:
            cards.append(parse_card(label))
        except PokerError as exc:
            raise type(exc)(f"card {idx} ({label!r}): {exc.msg}", index=idx) from exc
    return cards


def card_to_string(card: Card) -> str:
    return card.label


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def full_deck() -> List[Card]:
    return [Card(suit, rank) for suit in Suit for rank in Rank]


def remove_cards(deck: Iterable[Card], to_remove: Iterable[Card]) -> List[Card]:
    known = set(to_remove)
    return [card for card in deck if card not in known]


def shuffle(deck: Sequence[Card], rng: Optional[random.Random] = None) -> List[Card]:
    # A fresh generator per call when none is injected; seeded from the OS.
    rng = rng or random.Random()
    shuffled = list(deck)
    rng.shuffle(shuffled)
    return shuffled


def deal(deck: List[Card], count: int) -> List[Card]:
    if len(deck) < count:
        raise ValueError(f"Not enough cards left in deck ({count} requested, {len(deck)} left)")
    drawn = deck[:count]
    del deck[:count]
    return drawn
