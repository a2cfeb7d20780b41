import pytest

from pitboss.blackjack.hand import BlackjackHand
from pitboss.common.actor import InvalidHandIndexError, Participant
from pitboss.common.card import Card, Rank, Suit
from pitboss.common.io_interface import TestIOInterface
from pitboss.common.shoe import Shoe


def card(rank, suit=Suit.CLUBS):
    return Card(suit, rank)


@pytest.fixture
def io_interface():
    return TestIOInterface()


@pytest.fixture
def participant(io_interface):
    return Participant("Alice", io_interface, max_hands=4)


def test_participant_starts_with_one_empty_hand(participant):
    assert len(participant.hands) == 1
    assert isinstance(participant.hands[0], BlackjackHand)
    assert len(participant.hands[0]) == 0


def test_hand_with_invalid_index(participant):
    with pytest.raises(InvalidHandIndexError):
        participant.hand(1)
    with pytest.raises(InvalidHandIndexError):
        participant.hand(-1)


def test_draw_into(participant):
    shoe = Shoe.stacked([card(Rank.KING), card(Rank.SEVEN)])
    assert participant.draw_into(shoe)
    assert participant.draw_into(shoe)
    assert participant.total() == 17
    assert shoe.is_empty()


def test_draw_into_face_down_does_not_count(participant):
    shoe = Shoe.stacked([card(Rank.KING), card(Rank.SEVEN)])
    participant.draw_into(shoe)
    participant.draw_into(shoe, face_up=False)
    assert participant.total() == 10
    assert not participant.hands[0].cards[1].face_up


def test_draw_into_invalid_index_is_reported(participant, io_interface):
    shoe = Shoe.stacked([card(Rank.KING)])
    assert not participant.draw_into(shoe, 3)
    assert len(shoe) == 1
    assert io_interface.sent_messages == ["Invalid hand index 3."]


def test_sixth_card_is_not_drawn(participant, io_interface):
    shoe = Shoe.stacked([card(Rank.TWO)] * 5 + [card(Rank.THREE)])
    for _ in range(5):
        assert participant.draw_into(shoe)
    assert not participant.draw_into(shoe)
    assert len(participant.hands[0]) == 5
    assert participant.total() == 10
    assert len(shoe) == 1
    assert io_interface.sent_messages == [
        "Cannot draw more than 5 cards into hand 1."
    ]


def test_total_of_missing_hand_is_zero(participant):
    assert participant.total(2) == 0


def test_split_pair(participant):
    shoe = Shoe.stacked(
        [card(Rank.EIGHT), card(Rank.EIGHT, Suit.HEARTS), card(Rank.THREE), card(Rank.TEN)]
    )
    participant.draw_into(shoe)
    participant.draw_into(shoe)

    assert participant.can_split(0)
    assert participant.split(shoe, 0)

    assert len(participant.hands) == 2
    first, second = participant.hands
    assert first.cards == [card(Rank.EIGHT), card(Rank.THREE)]
    assert second.cards == [card(Rank.EIGHT, Suit.HEARTS), card(Rank.TEN)]
    assert first.is_split and second.is_split
    assert shoe.is_empty()


def test_split_ten_valued_cards(participant):
    shoe = Shoe.stacked(
        [card(Rank.KING), card(Rank.TEN), card(Rank.TWO), card(Rank.THREE)]
    )
    participant.draw_into(shoe)
    participant.draw_into(shoe)
    assert participant.split(shoe, 0)
    assert [p.value() for p in participant.hands] == [12, 13]


def test_split_non_pair_is_ignored(participant):
    shoe = Shoe.stacked([card(Rank.EIGHT), card(Rank.NINE), card(Rank.TWO)])
    participant.draw_into(shoe)
    participant.draw_into(shoe)
    assert not participant.split(shoe, 0)
    assert len(participant.hands) == 1
    assert len(shoe) == 1


def test_split_invalid_index_is_ignored(participant):
    shoe = Shoe.stacked([card(Rank.TWO)])
    assert not participant.split(shoe, 5)
    assert len(shoe) == 1


def test_split_stops_at_hand_limit(io_interface):
    participant = Participant("Bob", io_interface, max_hands=2)
    shoe = Shoe.stacked([card(Rank.FIVE)] * 6)
    participant.draw_into(shoe)
    participant.draw_into(shoe)
    assert participant.split(shoe, 0)
    assert participant.can_split(0)
    assert not participant.has_room_to_split()
    assert not participant.split(shoe, 0)
    assert len(participant.hands) == 2
    assert len(shoe) == 2


def test_reset(participant):
    shoe = Shoe.stacked([card(Rank.FIVE)] * 4)
    participant.draw_into(shoe)
    participant.draw_into(shoe)
    participant.split(shoe, 0)
    participant.reset()
    assert len(participant.hands) == 1
    assert len(participant.hands[0]) == 0
