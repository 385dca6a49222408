"""
onejack: a game of blackjack against the dealer, built on immutable game
states and pure transitions.
"""

__version__ = "0.1.0"
