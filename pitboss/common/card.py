"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Hearts, Diamonds, Clubs, and Spades. Suits are cosmetic in blackjack.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Two through Ten, Jack, Queen, King, and Ace.

- `Card`: A class representing a playing card. A card has a suit, a rank and a
face-up flag. Rank and suit never change once the card exists; the face-up
flag can only go from face down to face up.

This module is part of the `pitboss` package, a terminal blackjack game.
"""

from enum import Enum, unique
from typing import List


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"

    @property
    def letter(self) -> str:
        """Single letter used on the card glyph."""
        return self.value

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


_SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck.

    The value is the rank's ordinal, not its blackjack score; see
    `pitboss.blackjack.scoring` for scoring.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def rank_str(self) -> str:
        """One-character abbreviation: 2-9, T, J, Q, K or A."""
        if self.value <= 9:
            return str(self.value)
        return self.name[0]

    def __str__(self) -> str:
        return self.rank_str


_FACE_DOWN_VISUAL = [
    " _____ ",
    "|XXXXX|",
    "|XX X |",
    "|XXXXX|",
    " ----- ",
]


class Card:
    """
    Class representing a playing card.

    >>> card = Card(Suit.HEARTS, Rank.TWO)
    >>> print(card)
    2 of ♥
    >>> hidden = Card(Suit.SPADES, Rank.ACE, face_up=False)
    >>> print(hidden)
    face-down card
    """

    __slots__ = ("_suit", "_rank", "_face_up")

    def __init__(self, suit: Suit, rank: Rank, face_up: bool = True):
        """
        Initialize a Card instance.

        :param suit: Suit of the card (one of the Suit enums)
        :param rank: Rank of the card (one of the Rank enums)
        :param face_up: Whether the card is visible
        """
        if not isinstance(suit, Suit):
            raise TypeError(f"Invalid suit: {suit}")
        if not isinstance(rank, Rank):
            raise TypeError(f"Invalid rank: {rank}")
        self._suit = suit
        self._rank = rank
        self._face_up = bool(face_up)

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def face_up(self) -> bool:
        return self._face_up

    def reveal(self) -> None:
        """
        Turn the card face up.

        A card is never turned back face down, so calling this on a card that
        is already visible does nothing.
        """
        self._face_up = True

    @property
    def visual(self) -> List[str]:
        """
        The five text lines of the card glyph.

        >>> Card(Suit.CLUBS, Rank.TEN).visual[1]
        '|T    |'
        """
        if not self._face_up:
            return list(_FACE_DOWN_VISUAL)
        rank_str = self._rank.rank_str
        return [
            " _____ ",
            f"|{rank_str}    |",
            f"|  {self._suit.letter}  |",
            f"|    {rank_str}|",
            " ----- ",
        ]

    def __eq__(self, other):
        """
        Checks if this card is equal to another card.

        Visibility is not part of a card's identity.

        :param other: The other card to compare to.
        :return: True if the cards have the same rank and suit, False otherwise.
        """
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return NotImplemented

    def __hash__(self):
        return hash((self._suit, self._rank))

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        if self._face_up:
            return f"Card(Suit.{self._suit.name}, Rank.{self._rank.name})"
        return f"Card(Suit.{self._suit.name}, Rank.{self._rank.name}, face_up=False)"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: A string representation of the card.
        """
        if not self._face_up:
            return "face-down card"
        return f"{self._rank.rank_str} of {self._suit}"
