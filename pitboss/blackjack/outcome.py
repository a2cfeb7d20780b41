"""Settlement results for a round of blackjack."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pitboss.blackjack.constants import BLACKJACK


class Outcome(Enum):
    """How one player hand finished against the dealer."""

    BLACKJACK = "blackjack"
    WIN = "win"
    LOSE = "lose"
    BUST = "bust"
    PUSH = "push"

    @property
    def is_player_win(self) -> bool:
        return self in (Outcome.BLACKJACK, Outcome.WIN)

    @property
    def is_dealer_win(self) -> bool:
        return self in (Outcome.LOSE, Outcome.BUST)


@dataclass
class HandResult:
    hand_index: int
    total: int
    outcome: Outcome


@dataclass
class RoundResult:
    """Per-hand outcomes of one round; `aborted` rounds have none."""

    hands: List[HandResult] = field(default_factory=list)
    dealer_total: Optional[int] = None
    aborted: bool = False

    @property
    def outcomes(self) -> List[Outcome]:
        return [hand.outcome for hand in self.hands]

    @property
    def net_wins(self) -> int:
        """Hands won minus hands lost."""
        return sum(o.is_player_win for o in self.outcomes) - sum(
            o.is_dealer_win for o in self.outcomes
        )


def settle_hand(
    player_total: int,
    dealer_total: int,
    natural: bool = False,
    dealer_natural: bool = False,
) -> Outcome:
    """
    Compare one player hand with the dealer's final hand.

    A bust loses even if the dealer also busts. A natural wins as BLACKJACK
    unless the dealer holds a natural too, which is a push.
    """
    if player_total > BLACKJACK:
        return Outcome.BUST
    if natural:
        return Outcome.PUSH if dealer_natural else Outcome.BLACKJACK
    if dealer_total > BLACKJACK:
        return Outcome.WIN
    if player_total > dealer_total:
        return Outcome.WIN
    if player_total < dealer_total:
        return Outcome.LOSE
    return Outcome.PUSH
