"""
This module is used to execute a game of Blackjack.

It can be used to play a game in different modes:
- Interactive console mode, where the user plays rounds until they decline another.
- Simulation mode, where rounds are played automatically by a strategy.
- Logging mode, where simulation output is written to a specified file.
- Visualization mode, where a real-time graph of net wins is displayed.

To run the game in different modes, specific command line arguments are used.
For example, `--console` (the default) runs the game in interactive console mode,
`--simulate` runs the game in simulation mode and `--log_file` followed by a filename
writes the simulation output to that file. `--vis` enables real-time visualization
of the simulation results.
"""

import argparse
import logging
import sys
import time
from typing import Optional

import matplotlib.pyplot as plt

from pitboss.blackjack.actor import Dealer, Player
from pitboss.blackjack.decision_logger import decision_logger
from pitboss.blackjack.outcome import RoundResult
from pitboss.blackjack.rules import Rules
from pitboss.blackjack.state import DealingState, EndRoundState, GameState
from pitboss.blackjack.stats import SimulationStats
from pitboss.blackjack.strategy import Strategy, create_strategy
from pitboss.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    IOInterface,
    LoggingIOInterface,
)
from pitboss.common.shoe import EmptyShoeError, Shoe, seed_process_rng

logger = logging.getLogger("pitboss.game")


class BlackjackGraph:
    def __init__(self, max_games):
        self.max_games = max_games
        self.games = []
        self.net_wins = []

        plt.ion()  # Turn on interactive mode
        self.fig, self.ax = plt.subplots()
        (self.line,) = self.ax.plot([], [], "b-")

        self.ax.set_xlim(0, max_games)
        self.ax.set_ylim(-10, 10)
        self.ax.set_title("Blackjack Performance")
        self.ax.set_xlabel("Games")
        self.ax.set_ylabel("Hands won minus hands lost")
        self.ax.grid(True)

    def update(self, game_number, net_wins):
        self.games.append(game_number)
        self.net_wins.append(net_wins)

        self.line.set_data(self.games, self.net_wins)

        if game_number > self.ax.get_xlim()[1]:
            self.ax.set_xlim(0, game_number + 10)

        y_min = min(self.net_wins) - 10
        y_max = max(self.net_wins) + 10
        self.ax.set_ylim(y_min, y_max)

        self.fig.canvas.draw()
        self.fig.canvas.flush_events()

    def close(self):
        plt.ioff()
        plt.show()  # Keep the graph window open after simulation ends


class BlackjackGame:
    """
    A class to represent one round of Blackjack.

    A game lives for a single round: it builds a fresh shoe, deals, plays and
    settles, and is then discarded.

    Attributes
    ----------
    io_interface : IOInterface
        Interface for input and output operations.
    rules : Rules
        Object defining the house rules.
    shoe : Shoe
        Shoe of cards for the round.
    player : Player
        The player.
    dealer : Dealer
        Dealer for the game.
    current_state : GameState
        Current state of the game.
    stats : SimulationStats
        Statistics the round's result is added to.
    result : RoundResult
        Settlement of the round, once it has ended.
    """

    def __init__(
        self,
        rules: Rules,
        io_interface: IOInterface,
        strategy: Optional[Strategy] = None,
        shoe: Optional[Shoe] = None,
        stats: Optional[SimulationStats] = None,
        player_name: str = "Player",
    ):
        self.rules = rules
        self.io_interface = io_interface
        self.shoe = shoe if shoe is not None else Shoe(num_decks=rules.num_decks)
        self.dealer = Dealer(io_interface, rules)
        self.player = Player(player_name, io_interface, strategy, rules)
        self.stats = stats if stats is not None else SimulationStats()
        self.current_state: GameState = DealingState()
        self.result: Optional[RoundResult] = None

    def set_state(self, state: GameState):
        """Change the current state of the game."""
        logger.debug("Changing state to %s", state)
        self.current_state = state

    def play_round(self) -> RoundResult:
        """
        Play the round until it reaches the end state.

        Running out of cards aborts the round; the result is then marked
        aborted and holds no outcomes.
        """
        decision_logger.log_round_start(self.player.name)
        try:
            while not isinstance(self.current_state, EndRoundState):
                self.current_state.handle(self)
            self.current_state.handle(self)
        except EmptyShoeError as e:
            logger.error("Round aborted in %s: %s", self.current_state, e)
            self.io_interface.output("The shoe ran out of cards. Round aborted.")
            self.result = RoundResult(aborted=True)
            self.stats.update(self.result)
            decision_logger.log_round_end({"round": "aborted"})
        return self.result


def create_rules(args):
    """Create the Rules object based on the command line arguments."""
    return Rules(num_decks=args.num_decks)


def create_io_interface(args):
    """Create the IO interface based on the command line arguments."""
    if not args.simulate:
        return ConsoleIOInterface()
    if args.log_file:
        return LoggingIOInterface(args.log_file)
    return DummyIOInterface()


def configure_logging(verbose: bool = False):
    """Send pitboss log records to stderr."""
    root = logging.getLogger("pitboss")
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def play_console(rules: Rules, io_interface: IOInterface, stats: SimulationStats):
    """Play rounds until the player declines another one."""
    while io_interface.confirm("\nWanna play blackjack?"):
        game = BlackjackGame(rules, io_interface, stats=stats)
        game.play_round()


def run_simulation(
    rules: Rules,
    io_interface: IOInterface,
    strategy: Strategy,
    num_games: int,
    stats: SimulationStats,
    graph: Optional[BlackjackGraph] = None,
):
    """Play `num_games` rounds with the given strategy."""
    net_wins = 0
    for game_number in range(1, num_games + 1):
        game = BlackjackGame(rules, io_interface, strategy, stats=stats)
        result = game.play_round()
        net_wins += result.net_wins
        if graph:
            graph.update(game_number, net_wins)
    return net_wins


def print_report(stats: SimulationStats, net_wins: Optional[int] = None):
    report = stats.report()
    print(f"Games played: {report['games_played']:,}")
    if report["games_aborted"]:
        print(f"Games aborted: {report['games_aborted']:,}")
    print(f"Hands played: {report['hands_played']:,}")
    print(f"Player wins: {report['player_wins']:,}")
    print(f"  of which blackjacks: {report['blackjacks']:,}")
    print(f"Dealer wins: {report['dealer_wins']:,}")
    print(f"  of which player busts: {report['busts']:,}")
    print(f"Draws: {report['draws']:,}")
    if net_wins is not None:
        print(f"Net hands won: {net_wins:+,}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Blackjack against the dealer.")
    parser.add_argument(
        "--console",
        action="store_true",
        help="Play interactively in the console (the default).",
        default=False,
    )
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Play rounds automatically with the strategy chosen by --strat.",
        default=False,
    )
    parser.add_argument(
        "--num_games", type=int, default=1, help="Number of games to simulate"
    )
    parser.add_argument(
        "--strat",
        type=str,
        choices=["dealer", "basic"],
        default="basic",
        help="Strategy for simulation: 'dealer' mimics the dealer, 'basic' follows basic strategy",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the shuffle for reproducible games.",
    )
    parser.add_argument(
        "--num_decks", type=int, default=6, help="Number of decks in the shoe"
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Write simulation output to the specified file.",
    )
    parser.add_argument(
        "--vis",
        action="store_true",
        help="Visualize the simulation results in a real-time graph.",
        default=False,
    )
    parser.add_argument(
        "--export_decisions",
        type=str,
        help="Write every decision made during the session to this JSON file.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
        default=False,
    )
    return parser


def main(argv=None):
    """
    Main function to start the game.

    It handles command-line arguments to determine the mode of operation,
    plays the rounds and prints out the statistics of the games played.
    """
    args = build_parser().parse_args(argv)
    if args.console:
        args.simulate = False

    configure_logging(args.verbose)
    if args.seed is not None:
        seed_process_rng(args.seed)

    decision_logger.keep_history = args.export_decisions is not None
    rules = create_rules(args)
    io_interface = create_io_interface(args)
    stats = SimulationStats()

    if args.simulate:
        strategy = create_strategy(args.strat)
        graph = BlackjackGraph(args.num_games) if args.vis else None

        start_time = time.time()
        net_wins = run_simulation(
            rules, io_interface, strategy, args.num_games, stats, graph
        )
        duration = time.time() - start_time
        games_per_second = args.num_games / duration if duration > 0 else 0

        print("Simulation completed.")
        print_report(stats, net_wins)
        print(f"\nDuration of simulation: {duration:.2f} seconds")
        print(f"Games simulated per second: {games_per_second:,.2f}")

        if graph:
            graph.close()
    else:
        play_console(rules, io_interface, stats)
        if stats.games_played:
            print_report(stats)

    if args.export_decisions:
        decision_logger.export_decisions(args.export_decisions)
    return 0


if __name__ == "__main__":
    sys.exit(main())
