from abc import ABC, abstractmethod
from typing import Optional

from pitboss.blackjack.action import Action
from pitboss.blackjack.constants import DEALER_STAND_TOTAL, get_blackjack_value
from pitboss.common.card import Card
from pitboss.common.io_interface import IOInterface


class Strategy(ABC):
    """
    Source of the player's decisions.

    The round controller asks the strategy two kinds of question: whether to
    split an eligible pair, and whether to hit or stand on a hand.
    """

    @abstractmethod
    def decide_split(self, player, hand_index: int, dealer_up_card: Optional[Card]) -> bool:
        """Return True to split the pair in `player.hands[hand_index]`."""
        pass

    @abstractmethod
    def decide_action(
        self, player, hand_index: int, dealer_up_card: Optional[Card]
    ) -> Action:
        """Return Action.HIT or Action.STAND for the given hand."""
        pass


class InteractiveStrategy(Strategy):
    """Asks a human through the IO interface."""

    def __init__(self, io_interface: IOInterface):
        self.io_interface = io_interface

    def decide_split(self, player, hand_index, dealer_up_card=None) -> bool:
        return self.io_interface.confirm(
            f"You have a pair in hand {hand_index + 1}. Do you want to split?"
        )

    def decide_action(self, player, hand_index, dealer_up_card=None) -> Action:
        if self.io_interface.confirm(f"Draw another card for hand {hand_index + 1}?"):
            return Action.HIT
        return Action.STAND


class DealerStrategy(Strategy):
    """Plays like the dealer: never splits, hits below 17."""

    def decide_split(self, player, hand_index, dealer_up_card=None) -> bool:
        return False

    def decide_action(self, player, hand_index, dealer_up_card=None) -> Action:
        if player.total(hand_index) < DEALER_STAND_TOTAL:
            return Action.HIT
        return Action.STAND


# Dealer up-card values for which each pair is split.
_SPLIT_AGAINST = {
    2: range(2, 8),
    3: range(2, 8),
    4: range(5, 7),
    6: range(2, 7),
    7: range(2, 8),
    8: range(2, 12),
    9: (2, 3, 4, 5, 6, 8, 9),
    11: range(2, 12),
}


class BasicStrategy(Strategy):
    """
    Standard basic strategy reduced to hit, stand and split.

    Doubling and surrender are not offered at this table, so hands a full
    chart would double are hit instead.
    """

    def _up_value(self, dealer_up_card: Optional[Card]) -> int:
        if dealer_up_card is None or not dealer_up_card.face_up:
            return 10
        return get_blackjack_value(dealer_up_card.rank)

    def decide_split(self, player, hand_index, dealer_up_card=None) -> bool:
        hand = player.hands[hand_index]
        if not hand.can_split:
            return False
        pair_value = get_blackjack_value(hand.cards[0].rank)
        return self._up_value(dealer_up_card) in _SPLIT_AGAINST.get(pair_value, ())

    def decide_action(self, player, hand_index, dealer_up_card=None) -> Action:
        hand = player.hands[hand_index]
        total = hand.value()
        up = self._up_value(dealer_up_card)

        if hand.is_soft:
            if total >= 19:
                return Action.STAND
            if total == 18:
                return Action.STAND if up <= 8 else Action.HIT
            return Action.HIT

        if total >= 17:
            return Action.STAND
        if total >= 13:
            return Action.STAND if up <= 6 else Action.HIT
        if total == 12:
            return Action.STAND if 4 <= up <= 6 else Action.HIT
        return Action.HIT


def create_strategy(name: str) -> Strategy:
    """Build a strategy from its command line name."""
    if name == "dealer":
        return DealerStrategy()
    if name == "basic":
        return BasicStrategy()
    raise ValueError(f"Unknown strategy: {name}")
