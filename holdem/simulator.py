"""Monte Carlo win-probability estimation for a single Hold'em hand."""

from __future__ import annotations

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Sequence, Tuple

from .cards import Card, deal, full_deck, remove_cards, shuffle
from .errors import (
    InvalidCardCountError,
    InvalidCommunityCountError,
    InvalidPlayerCountError,
    InvalidSimulationCountError,
)
from .evaluator import evaluate_best_hand
from .models import WinProbability

LOGGER = logging.getLogger("holdem.simulator")

COMMUNITY_COUNTS = (0, 3, 4, 5)


def calculate_win_probability(
    hole: Sequence[Card],
    community: Sequence[Card],
    num_players: int,
    num_simulations: int,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    workers: int = 1,
) -> WinProbability:
    """Estimate how often ``hole`` wins or ties against ``num_players - 1`` random hands.

    A trial counts as a tie only when every opponent matches the subject's hand
    value; tying the best opponent while beating another counts as neither.
    Pass ``seed`` or ``rng`` for reproducible runs.
    """
    if len(hole) != 2:
        raise InvalidCardCountError(f"Expected 2 hole cards, got {len(hole)}")
    if len(community) not in COMMUNITY_COUNTS:
        raise InvalidCommunityCountError(
            f"Must provide 0, 3, 4, or 5 community cards, got {len(community)}"
        )
    if num_players < 2:
        raise InvalidPlayerCountError(f"Must have at least 2 players, got {num_players}")
    if num_simulations < 1:
        raise InvalidSimulationCountError(f"Must run at least 1 simulation, got {num_simulations}")

    deck = remove_cards(full_deck(), list(hole) + list(community))
    needed = 5 - len(community) + 2 * (num_players - 1)
    if needed > len(deck):
        raise InvalidPlayerCountError(
            f"Not enough cards to deal {num_players} players ({needed} needed, {len(deck)} left)"
        )
    if workers < 1:
        raise ValueError("workers must be at least 1")

    rng = rng or random.Random(seed)
    hole = list(hole)
    community = list(community)

    if workers == 1:
        wins, ties = _run_trials(hole, community, deck, num_players, num_simulations, rng)
    else:
        wins, ties = _run_parallel(hole, community, deck, num_players, num_simulations, rng, workers)

    LOGGER.debug(
        "Simulated %d trials for %d players: %d wins, %d ties", num_simulations, num_players, wins, ties
    )
    return WinProbability(wins / num_simulations, ties / num_simulations)


def _run_trials(
    hole: List[Card],
    community: List[Card],
    deck: List[Card],
    num_players: int,
    trials: int,
    rng: random.Random,
) -> Tuple[int, int]:
    missing = 5 - len(community)
    wins = 0
    ties = 0
    for _ in range(trials):
        shuffled = shuffle(deck, rng)
        board = community + deal(shuffled, missing)
        opponent_values = [
            evaluate_best_hand(deal(shuffled, 2), board).value for _ in range(num_players - 1)
        ]

        ours = evaluate_best_hand(hole, board).value
        best_other = max(opponent_values)
        if ours > best_other:
            wins += 1
        elif ours == best_other and all(value == ours for value in opponent_values):
            ties += 1
    return wins, ties


def _trial_worker(args: Tuple[List[Card], List[Card], List[Card], int, int, int]) -> Tuple[int, int]:
    hole, community, deck, num_players, trials, seed = args
    return _run_trials(hole, community, deck, num_players, trials, random.Random(seed))


def split_trials(total: int, workers: int) -> List[int]:
    """Split ``total`` into at most ``workers`` near-equal, non-empty chunks."""
    workers = min(workers, total)
    base, extra = divmod(total, workers)
    return [base + (1 if idx < extra else 0) for idx in range(workers)]


def _run_parallel(
    hole: List[Card],
    community: List[Card],
    deck: List[Card],
    num_players: int,
    trials: int,
    rng: random.Random,
    workers: int,
) -> Tuple[int, int]:
    # Each chunk gets its own generator; partial sums are merged afterwards.
    chunks = split_trials(trials, workers)
    args_list = [
        (hole, community, deck, num_players, chunk, rng.getrandbits(64)) for chunk in chunks
    ]
    wins = ties = 0
    with ProcessPoolExecutor(max_workers=len(chunks)) as ex:
        for chunk_wins, chunk_ties in ex.map(_trial_worker, args_list):
            wins += chunk_wins
            ties += chunk_ties
    return wins, ties
