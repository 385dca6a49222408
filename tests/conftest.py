"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by every test package.
"""

import pytest

from onejack.common.card import Card, Rank, Suit
from onejack.events import EventBus


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


def card(short: str) -> Card:
    """
    Build a card from a compact code such as ``"AH"``, ``"10D"`` or ``"KS"``.
    """
    ranks = {
        "A": Rank.ACE,
        "J": Rank.JACK,
        "Q": Rank.QUEEN,
        "K": Rank.KING,
    }
    suits = {"C": Suit.CLUBS, "H": Suit.HEARTS, "S": Suit.SPADES, "D": Suit.DIAMONDS}
    rank_code, suit_code = short[:-1], short[-1]
    rank = ranks[rank_code] if rank_code in ranks else Rank(int(rank_code))
    return Card(rank, suits[suit_code])


def hand(*codes: str):
    return tuple(card(code) for code in codes)

