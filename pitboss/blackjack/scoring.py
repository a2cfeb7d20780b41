"""
Pure scoring functions for blackjack hands.

Totals are computed in two passes: every revealed Ace starts at 11 and Aces
are demoted to 1 one at a time while the hand is over 21. The result does not
depend on the order of the cards. Face-down cards never count.
"""

from typing import Iterable, Tuple

from pitboss.blackjack.constants import BLACKJACK, get_blackjack_value
from pitboss.common.card import Card, Rank


def point_value(card: Card, running_total: int = 0) -> int:
    """
    Value of a single card given the total accumulated before it.

    This depends on the order cards are visited in, so it is only meant for
    single-card questions. Use `hand_total` for a hand.

    >>> from pitboss.common.card import Suit
    >>> point_value(Card(Suit.SPADES, Rank.ACE), 15)
    1
    """
    if not card.face_up:
        return 0
    if card.rank == Rank.ACE:
        return 11 if running_total + 11 <= BLACKJACK else 1
    return get_blackjack_value(card.rank)


def _total_and_soft_aces(cards: Iterable[Card]) -> Tuple[int, int]:
    total = 0
    aces = 0
    for card in cards:
        if not card.face_up:
            continue
        if card.rank == Rank.ACE:
            aces += 1
        else:
            total += get_blackjack_value(card.rank)
    total += 11 * aces
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1
    return total, aces


def hand_total(cards: Iterable[Card]) -> int:
    """
    Best total of the revealed cards.

    >>> from pitboss.common.card import Suit
    >>> hand_total([Card(Suit.HEARTS, Rank.ACE), Card(Suit.CLUBS, Rank.ACE)])
    12
    """
    return _total_and_soft_aces(cards)[0]


def is_soft(cards: Iterable[Card]) -> bool:
    """True when at least one revealed Ace is still counted as 11."""
    return _total_and_soft_aces(cards)[1] > 0


def is_blackjack(cards) -> bool:
    """True iff the hand has exactly two cards totalling 21."""
    cards = list(cards)
    return len(cards) == 2 and hand_total(cards) == BLACKJACK


def split_value(card: Card) -> int:
    """Value compared when deciding a split; visibility is ignored."""
    return get_blackjack_value(card.rank)
