"""
Pytest configuration and fixtures for blackjack tests.
"""

import pytest

from pitboss.common.card import Card, Rank, Suit
from pitboss.common.io_interface import TestIOInterface


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "strategy: mark test as testing strategy decisions"
    )
    config.addinivalue_line(
        "markers", "split: mark test as testing split scenarios"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )


_RANKS = {rank.rank_str: rank for rank in Rank}
_SUITS = {suit.letter: suit for suit in Suit}


def parse_card(code: str) -> Card:
    """Build a card from a short code such as ``"TC"`` or ``"AS"``."""
    return Card(_SUITS[code[1]], _RANKS[code[0]])


@pytest.fixture
def cards():
    """Turn ``"TC 6D AS"`` into a list of cards."""

    def _cards(codes: str):
        return [parse_card(code) for code in codes.split()]

    return _cards


@pytest.fixture
def io_interface():
    return TestIOInterface()
