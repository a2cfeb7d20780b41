from pitboss.blackjack.constants import (
    DEALER_STAND_TOTAL,
    MAX_PLAYER_HANDS,
    NUM_DECKS,
)
from pitboss.common.hand import Hand


class Rules:
    """
    House rules for one table.

    These are the fixed house constants gathered in one place; the game has
    no optional rule variants.
    """

    def __init__(
        self,
        num_decks: int = NUM_DECKS,
        max_splits: int = MAX_PLAYER_HANDS - 1,
        dealer_stand_total: int = DEALER_STAND_TOTAL,
    ):
        if num_decks < 1:
            raise ValueError("num_decks must be at least 1")
        if max_splits < 0:
            raise ValueError("max_splits must be non-negative")
        self.num_decks = num_decks
        self.max_splits = max_splits
        self.dealer_stand_total = dealer_stand_total

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "num_decks": self.num_decks,
            "max_splits": self.max_splits,
            "dealer_stand_total": self.dealer_stand_total,
        }

    def should_dealer_hit(self, hand: Hand) -> bool:
        """
        Determine if the dealer should hit.

        The dealer stands on any total of 17 or more, soft 17 included.
        """
        return hand.value() < self.dealer_stand_total

    def get_max_hands(self) -> int:
        """
        Maximum number of hands a player may hold.

        Every split adds one hand, so this caps the total number of splits
        in a round regardless of which hand they are made from.
        """
        return self.max_splits + 1

    def can_split_more(self, current_num_hands: int) -> bool:
        """
        Check if a player can split again based on their current number of hands.

        Args:
            current_num_hands (int): The player's current number of hands.

        Returns:
            bool: True if the player can split again, False otherwise.
        """
        return current_num_hands < self.get_max_hands()
