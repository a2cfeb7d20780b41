"""
Text rendering of cards for the terminal.

Every card is a block of five lines (see `Card.visual`); a hand is drawn as
its card blocks side by side, followed by a total line.
"""

from typing import Iterable, List

from pitboss.blackjack.hand import BlackjackHand
from pitboss.common.card import Card

CARD_HEIGHT = 5


def render_cards(cards: Iterable[Card]) -> str:
    """
    Lay card blocks out in one row.

    >>> from pitboss.common.card import Rank, Suit
    >>> print(render_cards([Card(Suit.SPADES, Rank.ACE)]))
     _____
    |A    |
    |  S  |
    |    A|
     -----
    """
    visuals: List[List[str]] = [card.visual for card in cards]
    if not visuals:
        return ""
    rows = []
    for line in range(CARD_HEIGHT):
        rows.append(" ".join(visual[line] for visual in visuals).rstrip())
    return "\n".join(rows)


def render_hand(hand: BlackjackHand, show_total: bool = True) -> str:
    text = render_cards(hand.cards)
    if show_total:
        text += f"\nTotal: {hand.value()}"
    return text


def hand_label(hand_index: int, hand_count: int) -> str:
    """``"Your hand"`` for a lone hand, ``"Hand 2"`` once there are several."""
    if hand_count == 1:
        return "Your hand"
    return f"Hand {hand_index + 1}"
