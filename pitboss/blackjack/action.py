"""Defines the Action enum for the choices a player makes on a blackjack hand."""
from enum import Enum


class Action(Enum):
    """Enum for the possible actions a player can take on a hand."""

    HIT = "hit"
    STAND = "stand"
    SPLIT = "split"
