from itertools import permutations

import pytest

from pitboss.blackjack.scoring import (
    hand_total,
    is_blackjack,
    is_soft,
    point_value,
    split_value,
)
from pitboss.common.card import Card, Rank, Suit


@pytest.mark.parametrize(
    "codes, expected",
    [
        ("TC 7D", 17),
        ("AH AC", 12),
        ("AS KD", 21),
        ("AS 5D 5C", 21),
        ("AS AD 9C", 21),
        ("AS AD AC AH", 14),
        ("KS QD 2C", 22),
        ("5S 6D AC", 12),
        ("AS 9D AC TD", 21),
    ],
)
def test_hand_total(cards, codes, expected):
    assert hand_total(cards(codes)) == expected


def test_total_does_not_depend_on_card_order(cards):
    hand = cards("AS 5D AC 9H")
    totals = {hand_total(order) for order in permutations(hand)}
    assert totals == {16}


def test_empty_hand_totals_zero():
    assert hand_total([]) == 0


def test_face_down_cards_do_not_count():
    hidden = Card(Suit.SPADES, Rank.ACE, face_up=False)
    assert hand_total([hidden]) == 0
    assert hand_total([Card(Suit.CLUBS, Rank.TEN), hidden]) == 10


def test_is_soft(cards):
    assert is_soft(cards("AS 6D"))
    assert not is_soft(cards("AS 6D TC"))
    assert not is_soft(cards("TS 7D"))
    assert is_soft(cards("AS AD"))


def test_is_blackjack(cards):
    assert is_blackjack(cards("AS KD"))
    assert is_blackjack(cards("TS AD"))
    assert not is_blackjack(cards("7S 7D 7C"))
    assert not is_blackjack(cards("AS 9D"))


def test_hidden_ace_is_not_blackjack():
    hand = [Card(Suit.SPADES, Rank.KING), Card(Suit.HEARTS, Rank.ACE, face_up=False)]
    assert not is_blackjack(hand)


def test_point_value(cards):
    ace, king, five = cards("AS KD 5C")
    assert point_value(ace) == 11
    assert point_value(ace, 10) == 11
    assert point_value(ace, 11) == 1
    assert point_value(king, 20) == 10
    assert point_value(five) == 5
    assert point_value(Card(Suit.CLUBS, Rank.FIVE, face_up=False)) == 0


def test_split_value_ignores_visibility():
    assert split_value(Card(Suit.CLUBS, Rank.QUEEN, face_up=False)) == 10
    assert split_value(Card(Suit.CLUBS, Rank.ACE)) == 11
