"""
This module provides the `Player` and `Dealer` roles for a game of Blackjack.

Both roles are built around a `Participant`, which owns the hands and knows how
to draw, total and split them. The roles add what is particular to each seat:

- `Player` holds up to four hands and gets its decisions from a `Strategy`.
- `Dealer` holds exactly one hand, is dealt one card face down, and plays a
  fixed policy driven by a small phase machine (`DealerPhase`).

Exceptions:
    - `InvalidActionError`: Raised when the dealer is asked to do something its
      current phase does not allow.

This module is part of the `pitboss` package, a terminal blackjack game.
"""

import logging
from enum import Enum
from typing import List, Optional

from pitboss.blackjack.action import Action
from pitboss.blackjack.constants import BLACKJACK
from pitboss.blackjack.hand import BlackjackHand
from pitboss.blackjack.rules import Rules
from pitboss.blackjack.strategy import InteractiveStrategy, Strategy
from pitboss.common.actor import Participant
from pitboss.common.card import Card
from pitboss.common.io_interface import IOInterface
from pitboss.common.shoe import Shoe

logger = logging.getLogger("pitboss.actor")


class InvalidActionError(Exception):
    """Raised when an actor attempts an action that is not currently valid."""

    pass


class Player:
    """The single player at the table."""

    def __init__(
        self,
        name: str,
        io_interface: IOInterface,
        strategy: Optional[Strategy] = None,
        rules: Optional[Rules] = None,
    ):
        """Creates a new player; without a strategy the player is asked through `io_interface`."""
        self.rules = rules or Rules()
        self.participant = Participant(
            name, io_interface, max_hands=self.rules.get_max_hands()
        )
        self.strategy = strategy or InteractiveStrategy(io_interface)
        self.io_interface = io_interface

    @property
    def name(self) -> str:
        return self.participant.name

    @property
    def hands(self) -> List[BlackjackHand]:
        return self.participant.hands

    def draw_into(self, shoe: Shoe, hand_index: int = 0, face_up: bool = True) -> bool:
        return self.participant.draw_into(shoe, hand_index, face_up)

    def total(self, hand_index: int = 0) -> int:
        return self.participant.total(hand_index)

    def can_split(self, hand_index: int = 0) -> bool:
        """A pair that may be split without going over the hand limit."""
        return self.participant.can_split(
            hand_index
        ) and self.rules.can_split_more(len(self.hands))

    def split(self, shoe: Shoe, hand_index: int) -> bool:
        return self.participant.split(shoe, hand_index)

    def is_busted(self, hand_index: int = 0) -> bool:
        return self.total(hand_index) > BLACKJACK

    @property
    def has_natural(self) -> bool:
        """A two-card 21 in the original hand, with no splits made."""
        return len(self.hands) == 1 and self.hands[0].is_natural

    def decide_split(self, hand_index: int, dealer_up_card: Optional[Card]) -> bool:
        return self.strategy.decide_split(self, hand_index, dealer_up_card)

    def decide_action(self, hand_index: int, dealer_up_card: Optional[Card]) -> Action:
        action = self.strategy.decide_action(self, hand_index, dealer_up_card)
        if action not in (Action.HIT, Action.STAND):
            raise InvalidActionError(f"{self.name} cannot {action.value} now.")
        return action

    def reset(self):
        """Resets the player's hands."""
        self.participant.reset()


class DealerPhase(Enum):
    """Where the dealer is in a round."""

    WAITING = "waiting"
    DEALT = "dealt"
    REVEALED = "revealed"
    DRAWING = "drawing"
    DONE = "done"


class Dealer:
    """A dealer in a game of Blackjack."""

    def __init__(
        self,
        io_interface: IOInterface,
        rules: Optional[Rules] = None,
        name: str = "Dealer",
    ):
        self.rules = rules or Rules()
        self.participant = Participant(name, io_interface, max_hands=1)
        self.phase = DealerPhase.WAITING

    @property
    def name(self) -> str:
        return self.participant.name

    @property
    def hands(self) -> List[BlackjackHand]:
        return self.participant.hands

    @property
    def current_hand(self) -> BlackjackHand:
        """Returns the dealer's only hand."""
        return self.participant.hands[0]

    @property
    def up_card(self) -> Optional[Card]:
        cards = self.current_hand.cards
        return cards[0] if cards else None

    @property
    def hole_card(self) -> Optional[Card]:
        cards = self.current_hand.cards
        return cards[1] if len(cards) > 1 else None

    def total(self) -> int:
        """Total of the visible cards; the hole card counts only once revealed."""
        return self.participant.total(0)

    def _require(self, phase: DealerPhase, action: str) -> None:
        if self.phase != phase:
            raise InvalidActionError(
                f"{self.name} cannot {action} while {self.phase.value}."
            )

    def deal_initial(self, shoe: Shoe) -> None:
        """Take one card face up and one face down."""
        self._require(DealerPhase.WAITING, "take the initial deal")
        self.participant.draw_into(shoe, 0, face_up=True)
        self.participant.draw_into(shoe, 0, face_up=False)
        self.phase = DealerPhase.DEALT

    def reveal(self) -> Card:
        """Turn the hole card face up at the start of the dealer's turn."""
        self._require(DealerPhase.DEALT, "reveal")
        for card in self.current_hand.cards:
            card.reveal()
        self.phase = DealerPhase.REVEALED
        logger.debug("%s reveals %s (%d)", self.name, self.hole_card, self.total())
        return self.hole_card

    def should_hit(self) -> bool:
        """Determine if dealer should hit."""
        return self.rules.should_dealer_hit(self.current_hand)

    def play(self, shoe: Shoe) -> List[Card]:
        """
        Draw until the hand reaches 17 or more.

        Soft 17 stands. If the hand fills up first, the dealer stops there.

        :return: The cards drawn, in order
        """
        self._require(DealerPhase.REVEALED, "play")
        self.phase = DealerPhase.DRAWING
        drawn = []
        while self.should_hit():
            if not self.participant.draw_into(shoe, 0):
                break
            drawn.append(self.current_hand.cards[-1])
        self.phase = DealerPhase.DONE
        return drawn

    @property
    def has_natural(self) -> bool:
        return self.current_hand.is_natural

    def reset(self):
        """Resets dealer's state."""
        self.participant.reset()
        self.phase = DealerPhase.WAITING
