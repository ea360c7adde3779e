from __future__ import annotations

import itertools
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from .cards import Card, Rank
from .errors import InvalidCardCountError
from .models import Hand, HandCategory, HandComparison

# Hand values pack the category and up to five kicker ranks into two-digit
# decimal slots: category * 100**5 + k0 * 100**4 + ... + k4. Ranks are 0-12,
# so no slot can carry into the next one.
SLOT = 100
KICKER_SLOTS = 5

_WHEEL = [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE]


def hand_value(category: HandCategory, kickers: Sequence[int]) -> int:
    value = int(category)
    for idx in range(KICKER_SLOTS):
        value = value * SLOT + (kickers[idx] if idx < len(kickers) else 0)
    return value


def evaluate_five(cards: Sequence[Card]) -> Hand:
    """Classify exactly five cards and score them.

    The returned hand keeps the input cards sorted ascending by rank.
    """
    if len(cards) != 5:
        raise InvalidCardCountError(f"Expected 5 cards, got {len(cards)}")

    ordered = tuple(sorted(cards, key=lambda card: card.rank))
    ranks = [card.rank for card in ordered]
    descending = sorted(ranks, reverse=True)

    is_flush = len({card.suit for card in ordered}) == 1
    straight_high = _straight_high(ranks)

    counts = Counter(ranks)
    # Groups ordered by size, then by rank, e.g. [(K, 3), (4, 2)] for kings full.
    groups = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    sizes = [size for _, size in groups]

    if straight_high is not None and is_flush:
        if ranks[0] == Rank.TEN and ranks[-1] == Rank.ACE:
            return _hand(HandCategory.ROYAL_FLUSH, [straight_high], ordered)
        return _hand(HandCategory.STRAIGHT_FLUSH, [straight_high], ordered)
    if sizes[0] == 4:
        return _hand(HandCategory.FOUR_OF_A_KIND, [groups[0][0], groups[1][0]], ordered)
    if sizes[0] == 3 and sizes[1] == 2:
        return _hand(HandCategory.FULL_HOUSE, [groups[0][0], groups[1][0]], ordered)
    if is_flush:
        return _hand(HandCategory.FLUSH, descending, ordered)
    if straight_high is not None:
        return _hand(HandCategory.STRAIGHT, [straight_high], ordered)
    if sizes[0] == 3:
        return _hand(HandCategory.THREE_OF_A_KIND, [rank for rank, _ in groups], ordered)
    if sizes[0] == 2 and sizes[1] == 2:
        return _hand(HandCategory.TWO_PAIR, [rank for rank, _ in groups], ordered)
    if sizes[0] == 2:
        return _hand(HandCategory.PAIR, [rank for rank, _ in groups], ordered)
    return _hand(HandCategory.HIGH_CARD, descending, ordered)


def _hand(category: HandCategory, kickers: Sequence[Rank], cards: Tuple[Card, ...]) -> Hand:
    kicker_values = tuple(int(rank) for rank in kickers)
    return Hand(
        value=hand_value(category, kicker_values),
        category=category,
        description=category.label,
        cards=cards,
        kickers=kicker_values,
    )


def _straight_high(ranks: List[Rank]) -> Optional[Rank]:
    """Return the effective high card of a straight, or None. ``ranks`` must be sorted."""
    if ranks == _WHEEL:
        return Rank.FIVE  # Ace plays low
    if all(ranks[idx] == ranks[0] + idx for idx in range(1, 5)):
        return ranks[-1]
    return None


def evaluate_best(cards: Sequence[Card]) -> Hand:
    """Return the strongest five-card hand out of 5 to 7 cards. Higher value is better."""
    if not 5 <= len(cards) <= 7:
        raise InvalidCardCountError(f"Expected 5 to 7 cards, got {len(cards)}")
    best: Optional[Hand] = None
    for combo in itertools.combinations(cards, 5):
        hand = evaluate_five(combo)
        if best is None or hand.value > best.value:
            best = hand
    assert best is not None
    return best


def evaluate_best_hand(hole: Sequence[Card], community: Sequence[Card]) -> Hand:
    if len(hole) != 2:
        raise InvalidCardCountError(f"Expected 2 hole cards, got {len(hole)}")
    if len(community) != 5:
        raise InvalidCardCountError(f"Expected 5 community cards, got {len(community)}")
    return evaluate_best(list(hole) + list(community))


def compare_hands(
    player1_hole: Sequence[Card],
    player1_community: Sequence[Card],
    player2_hole: Sequence[Card],
    player2_community: Sequence[Card],
) -> HandComparison:
    hand1 = evaluate_best_hand(player1_hole, player1_community)
    hand2 = evaluate_best_hand(player2_hole, player2_community)
    winner = 0
    if hand1.value > hand2.value:
        winner = 1
    elif hand2.value > hand1.value:
        winner = 2
    return HandComparison(player1=hand1, player2=hand2, winner=winner)
