from __future__ import annotations

from typing import List

from holdem.cards import Card, parse_cards
from holdem.evaluator import evaluate_best_hand
from holdem.models import Hand


def cards(*labels: str) -> List[Card]:
    """Shorthand for parse_cards in table-driven tests."""
    return parse_cards(list(labels))


def best(hole: List[str], community: List[str]) -> Hand:
    return evaluate_best_hand(parse_cards(hole), parse_cards(community))


def showdown(community: List[str], player1: List[str], player2: List[str]) -> str:
    """Return "player1", "player2" or "tie" for two hands on one board."""
    value1 = best(player1, community).value
    value2 = best(player2, community).value
    if value1 > value2:
        return "player1"
    if value2 > value1:
        return "player2"
    return "tie"
