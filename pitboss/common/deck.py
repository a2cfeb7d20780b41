"""
This module contains the Deck class, which represents one standard pack of
52 cards. A blackjack shoe is assembled from several of these.

>>> deck = Deck()
>>> deck.size
52
>>> deck.deal()
Card(Suit.SPADES, Rank.ACE)
>>> deck.size
51
"""

from typing import List, Optional

from pitboss.common.card import Card, Rank, Suit


class Deck:
    """
    A class representing a deck of cards.
    """

    def __init__(self, cards: Optional[List[Card]] = None):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, a default deck will be constructed.
        """
        if cards is None:
            self.cards: List[Card] = self.initialize_default_deck()
        else:
            self.cards = cards.copy()

    @staticmethod
    def initialize_default_deck() -> List[Card]:
        """
        Construct a default deck with all possible combinations of suits and ranks.

        Cards carry a mutable face-up flag, so every deck gets its own instances.

        :return: A list of Card instances representing the default deck.
        """
        return [Card(suit, rank) for suit in Suit for rank in Rank]

    def deal(self) -> Card:
        """
        Pop the top card from the deck.

        :return: A card instance.
        """
        return self.cards.pop()

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.
        """
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"
