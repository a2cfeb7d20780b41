"""
Logging for blackjack decision paths.
Tracks split offers, hit/stand choices, dealer draws and hand outcomes.
"""

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from pitboss.blackjack.action import Action
from pitboss.common.card import Card


@dataclass
class DecisionContext:
    """Context for a single decision point."""

    timestamp: datetime
    player_name: str
    hand_index: int
    hand_cards: List[Card]
    hand_value: int
    is_soft: bool
    is_pair: bool
    is_split_hand: bool
    dealer_upcard: Optional[Card]
    choice: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "player": self.player_name,
            "hand_index": self.hand_index,
            "cards": [str(c) for c in self.hand_cards],
            "value": self.hand_value,
            "soft": self.is_soft,
            "pair": self.is_pair,
            "split_hand": self.is_split_hand,
            "dealer_up": str(self.dealer_upcard) if self.dealer_upcard else None,
            "choice": self.choice,
        }


class DecisionLogger:
    """Logs the decisions made during blackjack rounds."""

    def __init__(self, log_level: Optional[int] = None, keep_history: bool = False):
        self.logger = logging.getLogger("pitboss.decisions")
        if os.environ.get("PITBOSS_DISABLE_LOGGING", "").lower() in (
            "1",
            "true",
            "yes",
        ):
            self.logger.setLevel(logging.ERROR)
        elif log_level is not None:
            self.logger.setLevel(log_level)

        self.decision_history: List[DecisionContext] = []
        self.current_round_decisions: List[DecisionContext] = []
        self.rounds_logged = 0
        self.keep_history = keep_history

    def set_level(self, level):
        """Set the logging level."""
        self.logger.setLevel(level)

    def _record(self, player, hand_index: int, dealer_upcard, choice: str):
        hand = player.hands[hand_index]
        context = DecisionContext(
            timestamp=datetime.now(),
            player_name=player.name,
            hand_index=hand_index,
            hand_cards=list(hand.cards),
            hand_value=hand.value(),
            is_soft=hand.is_soft,
            is_pair=hand.can_split,
            is_split_hand=hand.is_split,
            dealer_upcard=dealer_upcard,
            choice=choice,
        )
        self.current_round_decisions.append(context)
        return context

    def log_split_offer(self, player, hand_index: int, dealer_upcard, accepted: bool):
        """Log a split offer and whether it was taken."""
        context = self._record(
            player, hand_index, dealer_upcard, "split" if accepted else "keep pair"
        )
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                f"Split offer for {context.player_name} hand {hand_index + 1}: "
                f"{[str(c) for c in context.hand_cards]} vs dealer {dealer_upcard} - "
                f"{'accepted' if accepted else 'declined'}"
            )

    def log_action(self, player, hand_index: int, dealer_upcard, action: Action):
        """Log a hit or stand decision."""
        context = self._record(player, hand_index, dealer_upcard, action.value)
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                f"Decision for {context.player_name} hand {hand_index + 1}: "
                f"{[str(c) for c in context.hand_cards]} (value={context.hand_value}, "
                f"soft={context.is_soft}) vs dealer {dealer_upcard} -> {action.value}"
            )

    def log_dealer_draw(self, dealer_name: str, card: Card, total: int):
        """Log one dealer hit."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"{dealer_name} hits and gets {card} (total {total})")

    def log_round_start(self, player_name: str):
        """Log the start of a new round."""
        self.rounds_logged += 1
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(
                f"=== Round {self.rounds_logged} starting for {player_name} ==="
            )
        self.current_round_decisions = []

    def log_round_end(self, outcomes: Dict[str, Any]):
        """Log the end of a round with outcomes."""
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info("=== Round ended ===")
            for hand, outcome in outcomes.items():
                self.logger.info(f"{hand}: {outcome}")

        if self.keep_history:
            self.decision_history.extend(self.current_round_decisions)
        self.current_round_decisions = []

    def get_decision_summary(self) -> Dict[str, Any]:
        """Get a summary of all decisions made."""
        summary: Dict[str, Any] = {
            "total_decisions": len(self.decision_history),
            "by_choice": {},
            "split_count": 0,
        }

        for decision in self.decision_history:
            choice = decision.choice
            summary["by_choice"][choice] = summary["by_choice"].get(choice, 0) + 1
            if choice == Action.SPLIT.value:
                summary["split_count"] += 1

        return summary

    def export_decisions(self, filepath: str):
        """Export decision history to a JSON file."""
        data = {
            "decisions": [d.to_dict() for d in self.decision_history],
            "summary": self.get_decision_summary(),
        }

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        self.logger.info(
            f"Exported {len(self.decision_history)} decisions to {filepath}"
        )

    def clear(self):
        self.decision_history = []
        self.current_round_decisions = []
        self.rounds_logged = 0


# Global logger instance
decision_logger = DecisionLogger()
