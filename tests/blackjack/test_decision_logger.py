import json
import logging

import pytest

from pitboss.blackjack.action import Action
from pitboss.blackjack.actor import Player
from pitboss.blackjack.decision_logger import DecisionLogger, decision_logger
from pitboss.blackjack.hand import BlackjackHand


@pytest.fixture
def player(io_interface, cards):
    player = Player("Alice", io_interface)
    player.hands[0] = BlackjackHand(cards("8S 8D"))
    return player


def test_log_action_records_context(player, cards):
    up_card = cards("6C")[0]
    decision_logger.log_round_start(player.name)
    decision_logger.log_action(player, 0, up_card, Action.STAND)

    (context,) = decision_logger.current_round_decisions
    assert context.player_name == "Alice"
    assert context.hand_value == 16
    assert context.is_pair
    assert not context.is_split_hand
    assert context.choice == "stand"
    assert context.to_dict()["dealer_up"] == "6 of ♣"


def test_round_end_moves_decisions_to_history(player, cards):
    up_card = cards("TC")[0]
    decision_logger.log_round_start(player.name)
    decision_logger.log_split_offer(player, 0, up_card, True)
    decision_logger.log_action(player, 0, up_card, Action.HIT)
    decision_logger.log_round_end({"Alice hand 1": "win"})

    assert decision_logger.current_round_decisions == []
    assert decision_logger.rounds_logged == 1
    summary = decision_logger.get_decision_summary()
    assert summary["total_decisions"] == 2
    assert summary["by_choice"] == {"split": 1, "hit": 1}
    assert summary["split_count"] == 1


def test_declined_split(player):
    decision_logger.log_split_offer(player, 0, None, False)
    assert decision_logger.current_round_decisions[0].choice == "keep pair"


def test_history_is_off_by_default(player):
    logger = DecisionLogger()
    assert not logger.keep_history
    logger.log_round_start(player.name)
    logger.log_action(player, 0, None, Action.STAND)
    logger.log_round_end({})
    assert logger.decision_history == []
    assert logger.rounds_logged == 1


def test_export_decisions(player, tmp_path):
    decision_logger.log_round_start(player.name)
    decision_logger.log_action(player, 0, None, Action.HIT)
    decision_logger.log_round_end({})

    path = tmp_path / "decisions.json"
    decision_logger.export_decisions(str(path))

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["summary"]["total_decisions"] == 1
    assert data["decisions"][0]["choice"] == "hit"
    assert data["decisions"][0]["cards"] == ["8 of ♠", "8 of ♦"]


def test_debug_messages(player, caplog):
    decision_logger.set_level(logging.DEBUG)
    try:
        with caplog.at_level(logging.DEBUG, logger="pitboss.decisions"):
            decision_logger.log_action(player, 0, None, Action.STAND)
    finally:
        decision_logger.set_level(logging.NOTSET)
    assert "-> stand" in caplog.text


def test_environment_disables_logging(monkeypatch):
    monkeypatch.setenv("PITBOSS_DISABLE_LOGGING", "1")
    logger = DecisionLogger()
    try:
        assert logger.logger.level == logging.ERROR
    finally:
        logger.set_level(logging.NOTSET)
