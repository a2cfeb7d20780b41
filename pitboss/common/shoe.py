"""
The dealing shoe: several decks merged and shuffled once.

Cards leave the shoe from the end of its list and never come back, so the
number of cards remaining only goes down over a round.
"""

import logging
import random
from typing import Iterable, List, Optional

from pitboss.common.card import Card
from pitboss.common.deck import Deck

logger = logging.getLogger("pitboss.shoe")

# Seeded from OS entropy once, when the module is first imported.
_process_rng = random.Random()


def seed_process_rng(seed: Optional[int]) -> None:
    """Reseed the generator shared by every shoe that is not given its own."""
    _process_rng.seed(seed)


def get_process_rng() -> random.Random:
    return _process_rng


class EmptyShoeError(Exception):
    """Raised when a card is drawn from a shoe with no cards left."""

    pass


class Shoe:
    def __init__(
        self,
        num_decks: int = 6,
        rng: Optional[random.Random] = None,
        cards: Optional[List[Card]] = None,
    ):
        """
        Initialize a Shoe instance.

        :param num_decks: Number of decks to use in the shoe (default is 6)
        :param rng: Random source for the shuffle. Defaults to the process-wide
                    generator, which is seeded once per process.
        :param cards: Explicit card list, used as-is without shuffling. The last
                      card in the list is drawn first.
        """
        if num_decks < 1:
            raise ValueError("Number of decks must be at least 1")

        self.num_decks = num_decks
        self.rng = rng if rng is not None else _process_rng

        if cards is not None:
            self.cards: List[Card] = list(cards)
        else:
            self.cards = []
            for _ in range(num_decks):
                self.cards.extend(Deck().cards)
            self.shuffle()

    @classmethod
    def stacked(cls, draw_order: Iterable[Card]) -> "Shoe":
        """
        Build a shoe that deals the given cards in the given order.

        >>> from pitboss.common.card import Rank, Suit
        >>> shoe = Shoe.stacked([Card(Suit.CLUBS, Rank.TEN), Card(Suit.HEARTS, Rank.TWO)])
        >>> shoe.draw()
        Card(Suit.CLUBS, Rank.TEN)
        """
        ordered = list(draw_order)
        ordered.reverse()
        return cls(num_decks=1, cards=ordered)

    def shuffle(self):
        """Shuffle all cards still in the shoe."""
        self.rng.shuffle(self.cards)
        logger.debug("Shuffled shoe of %d cards", len(self.cards))

    def draw(self, face_up: bool = True) -> Card:
        """
        Remove the last card of the shoe and return it with the given visibility.

        :param face_up: Whether the drawn card is dealt face up
        :return: The drawn card
        :raises EmptyShoeError: If the shoe has no cards left
        """
        try:
            card = self.cards.pop()
        except IndexError as exc:
            raise EmptyShoeError("Cannot draw from an empty shoe.") from exc
        if face_up:
            card.reveal()
        else:
            # Cards never turn back face down, so hidden draws get a new instance.
            card = Card(card.suit, card.rank, face_up=False)
        return card

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining in the shoe."""
        return len(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return f"Shoe with {self.cards_remaining} cards remaining"

    def __repr__(self) -> str:
        return f"Shoe(num_decks={self.num_decks}, cards_remaining={self.cards_remaining})"
