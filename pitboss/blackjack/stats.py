"""
This module contains the SimulationStats class which is responsible for
tracking and updating the statistics of a blackjack session.
"""

from pitboss.blackjack.outcome import Outcome, RoundResult


class SimulationStats:
    """
    A class that holds the statistics of the session.
    """

    def __init__(self):
        """
        Initializes the SimulationStats with default values.
        """
        self.games_played = 0
        self.games_aborted = 0
        self.hands_played = 0
        self.outcome_counts = {outcome: 0 for outcome in Outcome}

    def update(self, result: RoundResult):
        """Updates the statistics with the result of one round."""
        self.games_played += 1
        if result.aborted:
            self.games_aborted += 1
            return
        for outcome in result.outcomes:
            self.hands_played += 1
            self.outcome_counts[outcome] += 1

    @property
    def player_wins(self) -> int:
        return sum(n for o, n in self.outcome_counts.items() if o.is_player_win)

    @property
    def dealer_wins(self) -> int:
        return sum(n for o, n in self.outcome_counts.items() if o.is_dealer_win)

    @property
    def draws(self) -> int:
        return self.outcome_counts[Outcome.PUSH]

    def report(self):
        """
        Returns a dictionary containing the current statistics.
        """
        return {
            "games_played": self.games_played,
            "games_aborted": self.games_aborted,
            "hands_played": self.hands_played,
            "player_wins": self.player_wins,
            "dealer_wins": self.dealer_wins,
            "draws": self.draws,
            "blackjacks": self.outcome_counts[Outcome.BLACKJACK],
            "busts": self.outcome_counts[Outcome.BUST],
        }
