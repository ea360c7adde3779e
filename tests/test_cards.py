import random

import pytest

from holdem.cards import (
    Card,
    Rank,
    Suit,
    card_to_string,
    deal,
    full_deck,
    parse_card,
    parse_cards,
    remove_cards,
    shuffle,
)
from holdem.errors import InvalidFormatError, InvalidRankError, InvalidSuitError, PokerError

from .helpers import cards


def test_parse_card_reads_suit_then_rank():
    assert parse_card("HA") == Card(Suit.HEARTS, Rank.ACE)
    assert parse_card("S7") == Card(Suit.SPADES, Rank.SEVEN)
    assert parse_card("DT") == Card(Suit.DIAMONDS, Rank.TEN)
    assert parse_card("C2") == Card(Suit.CLUBS, Rank.TWO)


def test_parse_card_is_case_insensitive():
    assert parse_card("hq") == parse_card("HQ")
    assert parse_card("sK") == Card(Suit.SPADES, Rank.KING)


def test_parse_card_rejects_bad_labels():
    for label in ("", "H", "H10", "HAS"):
        with pytest.raises(InvalidFormatError, match="Invalid card format"):
            parse_card(label)
    with pytest.raises(InvalidSuitError, match="Invalid suit"):
        parse_card("XA")
    with pytest.raises(InvalidRankError, match="Invalid rank"):
        parse_card("H1")
    # Rank-first labels are not accepted.
    with pytest.raises(InvalidSuitError):
        parse_card("AH")


def test_parse_errors_are_value_errors_with_codes():
    with pytest.raises(ValueError):
        parse_card("ZZ")
    try:
        parse_card("H0")
    except PokerError as exc:
        assert exc.code == "INVALID_RANK"
    else:
        pytest.fail("expected PokerError")


def test_parse_cards_fails_fast_and_reports_index():
    with pytest.raises(InvalidRankError) as info:
        parse_cards(["HA", "SK", "D1", "XX"])
    assert info.value.index == 2
    assert "card 2" in str(info.value)
    assert "'D1'" in str(info.value)


def test_parse_cards_preserves_order():
    parsed = parse_cards(["S2", "HA", "DT"])
    assert [card.label for card in parsed] == ["S2", "HA", "DT"]
    assert parse_cards([]) == []


def test_card_to_string_round_trips_every_card():
    for suit in "HDCSdhcs":
        for rank in "23456789TJQKAtjqka":
            label = suit + rank
            assert card_to_string(parse_card(label)) == label.upper()


def test_full_deck_has_52_unique_cards_in_suit_major_order():
    deck = full_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert deck[0] == Card(Suit.HEARTS, Rank.TWO)
    assert deck[12] == Card(Suit.HEARTS, Rank.ACE)
    assert deck[13] == Card(Suit.DIAMONDS, Rank.TWO)
    assert deck[-1] == Card(Suit.SPADES, Rank.ACE)


def test_remove_cards_keeps_relative_order():
    deck = cards("H2", "H3", "H4", "H5", "H6")
    remaining = remove_cards(deck, cards("H4", "H2", "SA"))
    assert remaining == cards("H3", "H5", "H6")
    assert len(deck) == 5


def test_remove_cards_matches_structurally():
    deck = full_deck()
    remaining = remove_cards(deck, [Card(Suit.CLUBS, Rank.KING), parse_card("ck")])
    assert len(remaining) == 51
    assert Card(Suit.CLUBS, Rank.KING) not in remaining


def test_shuffle_returns_new_permutation_without_touching_input():
    deck = full_deck()
    original = list(deck)
    shuffled = shuffle(deck, random.Random(7))
    assert deck == original
    assert shuffled is not deck
    assert sorted(shuffled, key=lambda c: (c.suit.value, c.rank)) == sorted(
        deck, key=lambda c: (c.suit.value, c.rank)
    )
    assert shuffled != deck


def test_shuffle_with_seeded_generators_is_reproducible():
    deck = full_deck()
    assert shuffle(deck, random.Random(99)) == shuffle(deck, random.Random(99))


def test_shuffle_without_generator_draws_fresh_permutations():
    deck = full_deck()
    draws = {tuple(shuffle(deck)) for _ in range(5)}
    assert len(draws) > 1


def test_deal_pops_from_front_and_raises_when_exhausted():
    deck = cards("HA", "DK", "C9")
    assert deal(deck, 2) == cards("HA", "DK")
    assert deck == cards("C9")
    with pytest.raises(ValueError, match=r"Not enough cards left in deck \(2 requested, 1 left\)"):
        deal(deck, 2)
