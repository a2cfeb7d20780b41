import pytest

from pitboss.blackjack.outcome import HandResult, Outcome, RoundResult, settle_hand


@pytest.mark.parametrize(
    "player_total, dealer_total, expected",
    [
        (22, 18, Outcome.BUST),
        (22, 23, Outcome.BUST),
        (18, 22, Outcome.WIN),
        (20, 18, Outcome.WIN),
        (17, 19, Outcome.LOSE),
        (18, 18, Outcome.PUSH),
        (21, 21, Outcome.PUSH),
    ],
)
def test_settle_hand(player_total, dealer_total, expected):
    assert settle_hand(player_total, dealer_total) == expected


def test_natural_beats_dealer_twenty_one():
    assert settle_hand(21, 21, natural=True) == Outcome.BLACKJACK


def test_natural_against_dealer_natural_pushes():
    assert settle_hand(21, 21, natural=True, dealer_natural=True) == Outcome.PUSH


def test_dealer_natural_is_compared_on_total():
    assert settle_hand(21, 21, dealer_natural=True) == Outcome.PUSH
    assert settle_hand(20, 21, dealer_natural=True) == Outcome.LOSE


def test_outcome_sides():
    assert Outcome.BLACKJACK.is_player_win
    assert Outcome.WIN.is_player_win
    assert Outcome.BUST.is_dealer_win
    assert Outcome.LOSE.is_dealer_win
    assert not Outcome.PUSH.is_player_win
    assert not Outcome.PUSH.is_dealer_win


def test_round_result_net_wins():
    result = RoundResult(
        hands=[
            HandResult(0, 21, Outcome.WIN),
            HandResult(1, 10, Outcome.LOSE),
            HandResult(2, 18, Outcome.WIN),
            HandResult(3, 17, Outcome.PUSH),
        ],
        dealer_total=17,
    )
    assert result.outcomes == [Outcome.WIN, Outcome.LOSE, Outcome.WIN, Outcome.PUSH]
    assert result.net_wins == 1


def test_aborted_round_has_no_outcomes():
    result = RoundResult(aborted=True)
    assert result.outcomes == []
    assert result.net_wins == 0
