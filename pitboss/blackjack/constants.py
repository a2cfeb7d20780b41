"""Blackjack-specific constants and value mappings."""

from pitboss.common.card import Rank

BLACKJACK = 21
DEALER_STAND_TOTAL = 17
MAX_HAND_CARDS = 5
MAX_PLAYER_HANDS = 4
NUM_DECKS = 6

# Ace is listed at its high value; scoring demotes it to 1 when needed.
BLACKJACK_VALUES = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
    Rank.ACE: 11,
}


def get_blackjack_value(rank: Rank) -> int:
    """Get the blackjack value for a given rank, counting an Ace as 11."""
    return BLACKJACK_VALUES[rank]
