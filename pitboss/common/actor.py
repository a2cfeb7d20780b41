"""
This module contains the Participant class: the hand-holding capability shared
by everyone seated at the table.

A Participant owns an ordered list of hands, can draw a card from the shoe into
one of them, report a hand's total and split a pair into two hands. The player
and the dealer each compose one Participant and add their own behavior on top
(see `pitboss.blackjack.actor`).

Failed draws are reported through the IO interface and leave everything
untouched; failed splits are ignored.
"""

import logging
from typing import List

from pitboss.blackjack.hand import BlackjackHand, HandFullError
from pitboss.common.io_interface import IOInterface
from pitboss.common.shoe import Shoe

logger = logging.getLogger("pitboss.actor")


class InvalidHandIndexError(Exception):
    """Raised when a hand index does not name one of the participant's hands."""

    pass


class InvalidSplitError(Exception):
    """Raised when a split is requested on a hand that cannot be split."""

    pass


class Participant:
    """
    The hands of one seat at the table.

    :param name: Name used in messages
    :param io_interface: Where failed draws are reported
    :param max_hands: Upper bound on the number of hands splitting may create
    """

    def __init__(self, name: str, io_interface: IOInterface, max_hands: int = 1):
        self.name = name
        self.io_interface = io_interface
        self.max_hands = max_hands
        self.hands: List[BlackjackHand] = [BlackjackHand()]

    def hand(self, hand_index: int) -> BlackjackHand:
        """
        Return the hand at `hand_index`.

        :raises InvalidHandIndexError: If there is no such hand
        """
        if not 0 <= hand_index < len(self.hands):
            raise InvalidHandIndexError(f"Invalid hand index {hand_index}.")
        return self.hands[hand_index]

    def draw_into(self, shoe: Shoe, hand_index: int = 0, face_up: bool = True) -> bool:
        """
        Draw one card from the shoe into a hand.

        Nothing is drawn when the index is invalid or the hand is already full;
        the problem is reported and False is returned.

        :return: True if a card was added
        """
        try:
            hand = self.hand(hand_index)
            if hand.is_full:
                raise HandFullError(
                    f"Cannot draw more than {len(hand)} cards into hand {hand_index + 1}."
                )
            hand.add_card(shoe.draw(face_up))
        except (InvalidHandIndexError, HandFullError) as e:
            logger.warning("%s: %s", self.name, e)
            self.io_interface.output(str(e))
            return False
        return True

    def total(self, hand_index: int = 0) -> int:
        """Total of the given hand, or 0 if there is no such hand."""
        try:
            return self.hand(hand_index).value()
        except InvalidHandIndexError:
            return 0

    def can_split(self, hand_index: int = 0) -> bool:
        """Whether the hand holds two cards of equal value."""
        try:
            return self.hand(hand_index).can_split
        except InvalidHandIndexError:
            return False

    def has_room_to_split(self) -> bool:
        return len(self.hands) < self.max_hands

    def split(self, shoe: Shoe, hand_index: int) -> bool:
        """
        Split a pair into two hands.

        The second card moves to a new hand appended after the existing hands,
        then each of the two hands receives one face-up card. Ineligible
        requests are ignored.

        :return: True if the hand was split
        """
        try:
            self._split(shoe, hand_index)
        except InvalidSplitError as e:
            logger.debug("%s: split ignored: %s", self.name, e)
            return False
        return True

    def _split(self, shoe: Shoe, hand_index: int) -> None:
        if not self.can_split(hand_index):
            raise InvalidSplitError(f"Hand {hand_index + 1} is not a pair.")
        if not self.has_room_to_split():
            raise InvalidSplitError(
                f"{self.name} already holds {len(self.hands)} hands."
            )

        source = self.hands[hand_index]
        new_hand = BlackjackHand(is_split=True)
        new_hand.add_card(source.take_last_card())
        source.mark_split()

        source.add_card(shoe.draw())
        new_hand.add_card(shoe.draw())
        self.hands.append(new_hand)
        logger.debug(
            "%s split hand %d into hands %d and %d",
            self.name,
            hand_index + 1,
            hand_index + 1,
            len(self.hands),
        )

    def reset(self) -> None:
        """Drop all hands and start again with one empty hand."""
        self.hands = [BlackjackHand()]

    def __repr__(self) -> str:
        return f"Participant({self.name!r}, hands={self.hands!r})"

