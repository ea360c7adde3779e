"""Hold'em hand evaluation and win-probability primitives used by the odds service."""

from .cards import (
    Card,
    RANKS,
    SUITS,
    Rank,
    Suit,
    card_to_string,
    cards_to_labels,
    deal,
    full_deck,
    parse_card,
    parse_cards,
    remove_cards,
    shuffle,
)
from .errors import (
    InvalidCardCountError,
    InvalidCommunityCountError,
    InvalidFormatError,
    InvalidPlayerCountError,
    InvalidRankError,
    InvalidSimulationCountError,
    InvalidSuitError,
    PokerError,
)
from .evaluator import compare_hands, evaluate_best, evaluate_best_hand, evaluate_five
from .models import Hand, HandCategory, HandComparison, WinProbability
from .simulator import calculate_win_probability

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "Rank",
    "Suit",
    "card_to_string",
    "cards_to_labels",
    "deal",
    "full_deck",
    "parse_card",
    "parse_cards",
    "remove_cards",
    "shuffle",
    "PokerError",
    "InvalidFormatError",
    "InvalidSuitError",
    "InvalidRankError",
    "InvalidCardCountError",
    "InvalidCommunityCountError",
    "InvalidPlayerCountError",
    "InvalidSimulationCountError",
    "evaluate_five",
    "evaluate_best",
    "evaluate_best_hand",
    "compare_hands",
    "Hand",
    "HandCategory",
    "HandComparison",
    "WinProbability",
    "calculate_win_probability",
]
