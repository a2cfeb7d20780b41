"""
BlackjackHand: a hand with the house five-card limit and blackjack scoring.
"""

from pitboss.blackjack import scoring
from pitboss.blackjack.constants import BLACKJACK, MAX_HAND_CARDS
from pitboss.common.card import Card
from pitboss.common.hand import Hand


class HandFullError(Exception):
    """Raised when a card is added to a hand that already holds the maximum."""

    pass


class BlackjackHand(Hand):
    """A hand in the game of Blackjack."""

    def __init__(self, *args, is_split: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self._is_split = is_split

    def add_card(self, card: Card) -> None:
        """Add a card, refusing a sixth one."""
        if self.is_full:
            raise HandFullError(
                f"Cannot draw more than {MAX_HAND_CARDS} cards into one hand."
            )
        super().add_card(card)

    def value(self) -> int:
        """Total of the revealed cards with the best Ace values."""
        return scoring.hand_total(self._cards)

    @property
    def is_soft(self) -> bool:
        """Determine if the hand is soft (contains an ace counted as 11)."""
        return scoring.is_soft(self._cards)

    @property
    def is_blackjack(self) -> bool:
        """Two cards totalling 21, whether or not the hand came from a split."""
        return scoring.is_blackjack(self._cards)

    @property
    def is_natural(self) -> bool:
        """A blackjack dealt as the original two cards, not built by splitting."""
        return self.is_blackjack and not self._is_split

    @property
    def is_bust(self) -> bool:
        return self.value() > BLACKJACK

    @property
    def is_full(self) -> bool:
        return len(self._cards) >= MAX_HAND_CARDS

    @property
    def can_split(self) -> bool:
        """Two cards of equal scoring value, ignoring whether they are face up."""
        return len(self._cards) == 2 and scoring.split_value(
            self._cards[0]
        ) == scoring.split_value(self._cards[1])

    @property
    def is_split(self) -> bool:
        """Return whether this hand was created from a split."""
        return self._is_split

    def mark_split(self) -> None:
        self._is_split = True
