"""
This module provides the game state management for a round of Blackjack. It
uses the state design pattern: each state does its part of the round, reports
to the IO interface and hands over to the next state.

Classes:

GameState: An abstract base class for game states.
DealingState: The dealer takes one card up and one down, the player two up.
SplittingState: Pairs are offered for splitting until a full pass splits nothing.
PlayersTurnState: Each player hand hits or stands; skipped on a natural.
DealersTurnState: The dealer reveals the hole card and draws to 17.
EndRoundState: Every player hand is settled against the dealer.

The handle method in each game state class is responsible for performing the
actions required in that state, notifying the interface, and transitioning to
the next state. Each game state class also overrides the str method to return
the state name.
"""

from abc import ABC, abstractmethod

from pitboss.blackjack.action import Action
from pitboss.blackjack.decision_logger import decision_logger
from pitboss.blackjack.outcome import HandResult, Outcome, RoundResult, settle_hand
from pitboss.common.io_interface import DummyIOInterface
from pitboss.ui.console import hand_label, render_hand


class GameState(ABC):
    """
    Abstract base class for game states.
    """

    @abstractmethod
    def handle(self, game) -> None:
        """The method that handles the game state."""

    def __str__(self) -> str:
        return self.__class__.__name__


def show_player_hand(game, hand_index: int) -> None:
    player = game.player
    game.io_interface.output(f"{hand_label(hand_index, len(player.hands))}:")
    game.io_interface.output(render_hand(player.hands[hand_index]))


class DealingState(GameState):
    """
    The game state where the dealer is dealing the cards.
    """

    def handle(self, game):
        """
        Deals the dealer's up card and hole card, then the player's two cards,
        and changes the game state to SplittingState.
        """
        game.dealer.deal_initial(game.shoe)
        game.io_interface.output("Dealer's hand:")
        game.io_interface.output(render_hand(game.dealer.current_hand, show_total=False))

        game.player.draw_into(game.shoe, 0)
        game.player.draw_into(game.shoe, 0)
        show_player_hand(game, 0)

        game.set_state(SplittingState())


class SplittingState(GameState):
    """
    The game state where the player may split pairs.

    All hands are scanned in order and every eligible pair is offered. Hands
    created during a pass are scanned in the same pass. Passes repeat until
    one of them splits nothing.
    """

    def handle(self, game):
        player = game.player
        up_card = game.dealer.up_card

        split_made = True
        while split_made:
            split_made = False
            hand_index = 0
            while hand_index < len(player.hands):
                if player.can_split(hand_index):
                    accepted = player.decide_split(hand_index, up_card)
                    decision_logger.log_split_offer(player, hand_index, up_card, accepted)
                    if accepted and player.split(game.shoe, hand_index):
                        split_made = True
                        for index in range(len(player.hands)):
                            show_player_hand(game, index)
                hand_index += 1

        game.set_state(PlayersTurnState())


class PlayersTurnState(GameState):
    """The game state where it's the player's turn to play."""

    def handle(self, game):
        """Plays every player hand and changes the game state to DealersTurnState."""
        player = game.player
        if player.has_natural:
            game.io_interface.output("Blackjack!")
        else:
            for hand_index in range(len(player.hands)):
                self.play_hand(game, hand_index)
        game.set_state(DealersTurnState())

    def play_hand(self, game, hand_index):
        """Hit until the player stands, busts or the hand is full."""
        player = game.player
        up_card = game.dealer.up_card
        while True:
            action = player.decide_action(hand_index, up_card)
            decision_logger.log_action(player, hand_index, up_card, action)
            if action == Action.STAND:
                return
            if not player.draw_into(game.shoe, hand_index):
                return
            show_player_hand(game, hand_index)
            if player.is_busted(hand_index):
                game.io_interface.output(f"Hand {hand_index + 1} busted! You lose.")
                return


class DealersTurnState(GameState):
    """
    The game state where it's the dealer's turn to play.
    """

    def handle(self, game):
        """Reveals the hole card, draws to 17 and changes the game state to EndRoundState."""
        dealer = game.dealer
        hole_card = dealer.reveal()
        game.io_interface.output(f"Dealer reveals {hole_card}.")

        for card in dealer.play(game.shoe):
            decision_logger.log_dealer_draw(dealer.name, card, dealer.total())
            game.io_interface.output(f"Dealer hits and gets {card}.")

        game.io_interface.output("Dealer's hand:")
        game.io_interface.output(render_hand(dealer.current_hand))
        game.set_state(EndRoundState())


class EndRoundState(GameState):
    """
    The game state where the round is ending.
    """

    def handle(self, game):
        """
        Settles every hand, outputs the results and updates the statistics.
        """
        game.result = self.calculate_results(game)
        self.output_results(game, game.result)
        game.stats.update(game.result)
        decision_logger.log_round_end(
            {
                f"{game.player.name} hand {hand.hand_index + 1}": hand.outcome.value
                for hand in game.result.hands
            }
        )

    def calculate_results(self, game) -> RoundResult:
        """Settles each player hand against the dealer's final total."""
        dealer_total = game.dealer.total()
        natural = game.player.has_natural
        result = RoundResult(dealer_total=dealer_total)
        for hand_index in range(len(game.player.hands)):
            player_total = game.player.total(hand_index)
            outcome = settle_hand(
                player_total,
                dealer_total,
                natural=natural,
                dealer_natural=game.dealer.has_natural,
            )
            result.hands.append(HandResult(hand_index, player_total, outcome))
        return result

    def output_results(self, game, result: RoundResult):
        """Outputs the results of the round."""
        if isinstance(game.io_interface, DummyIOInterface):
            return

        for hand in result.hands:
            label = f"Hand {hand.hand_index + 1}"
            if hand.outcome == Outcome.BUST:
                message = f"{label} busted! You lose."
            elif hand.outcome == Outcome.BLACKJACK:
                message = f"{label} wins with a blackjack!"
            elif hand.outcome == Outcome.WIN:
                message = f"{label} wins!"
            elif hand.outcome == Outcome.LOSE:
                message = f"{label} loses."
            else:
                message = f"{label} ties."
            game.io_interface.output(message)
