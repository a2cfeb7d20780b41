from pitboss.blackjack.outcome import HandResult, Outcome, RoundResult
from pitboss.blackjack.stats import SimulationStats


def make_result(*outcomes):
    return RoundResult(
        hands=[HandResult(i, 0, outcome) for i, outcome in enumerate(outcomes)],
        dealer_total=18,
    )


def test_initial_stats():
    stats = SimulationStats()
    assert stats.report() == {
        "games_played": 0,
        "games_aborted": 0,
        "hands_played": 0,
        "player_wins": 0,
        "dealer_wins": 0,
        "draws": 0,
        "blackjacks": 0,
        "busts": 0,
    }


def test_update_counts_every_hand():
    stats = SimulationStats()
    stats.update(make_result(Outcome.BLACKJACK))
    stats.update(make_result(Outcome.WIN, Outcome.BUST, Outcome.PUSH))
    stats.update(make_result(Outcome.LOSE))

    report = stats.report()
    assert report["games_played"] == 3
    assert report["hands_played"] == 5
    assert report["player_wins"] == 2
    assert report["dealer_wins"] == 2
    assert report["draws"] == 1
    assert report["blackjacks"] == 1
    assert report["busts"] == 1


def test_update_with_aborted_round():
    stats = SimulationStats()
    stats.update(RoundResult(aborted=True))
    assert stats.games_played == 1
    assert stats.games_aborted == 1
    assert stats.hands_played == 0
