"""
Core engine for onejack.

This package drives a game of blackjack in a platform-agnostic way; rendering
and input belong to the presentation layer.
"""

from onejack.engine.blackjack import BlackjackEngine

__all__ = ["BlackjackEngine"]
