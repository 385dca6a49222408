"""
Immutable state models for a game of blackjack.

This module provides frozen dataclasses for the cards on the table and for
the two shapes a game can be in. They are designed to be used with the pure
transition functions in :mod:`onejack.blackjack.transitions`, which build new
state instances rather than modifying existing ones.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, FrozenSet, Optional, Tuple

from onejack.common.card import Card


class GameResult(Enum):
    """Possible outcomes of a finished game."""

    PLAYER_BLACKJACK = auto()
    DEALER_BLACKJACK = auto()
    PLAYER_AND_DEALER_BLACKJACK = auto()
    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    DEALER_BUST = auto()
    PLAYER_BUST = auto()
    DRAW = auto()


@dataclass(frozen=True)
class CardsState:
    """
    Immutable snapshot of every card in the game.

    Attributes:
        player_hand: Cards held by the player, in the order dealt
        dealer_hand: Cards held by the dealer, in the order dealt
        deck: Undealt cards; the next card to be drawn is at the front
    """

    player_hand: Tuple[Card, ...] = ()
    dealer_hand: Tuple[Card, ...] = ()
    deck: Tuple[Card, ...] = ()

    def __post_init__(self):
        # Accept any sequence but always store tuples
        object.__setattr__(self, "player_hand", tuple(self.player_hand))
        object.__setattr__(self, "dealer_hand", tuple(self.dealer_hand))
        object.__setattr__(self, "deck", tuple(self.deck))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the cards to a dictionary suitable for serialization.

        Returns:
            Dictionary with each hand rendered as card strings
        """
        return {
            "player_hand": [str(card) for card in self.player_hand],
            "dealer_hand": [str(card) for card in self.dealer_hand],
            "deck_cards_remaining": len(self.deck),
        }


@dataclass(frozen=True)
class GameState:
    """
    Base of the two game states. Never instantiated directly.

    Attributes:
        state: The cards on the table
    """

    state: CardsState

    @property
    def is_finished(self) -> bool:
        return isinstance(self, Finished)

    def to_dict(self) -> Dict[str, Any]:
        return {"finished": self.is_finished, **self.state.to_dict()}


@dataclass(frozen=True)
class InProgress(GameState):
    """
    A game waiting on the player to stick or twist.

    Attributes:
        possible_scores: Every total of 21 or lower the player's hand can make
        game_id: Identifies the game this state belongs to; not part of equality
    """

    possible_scores: FrozenSet[int]
    game_id: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "possible_scores", frozenset(self.possible_scores))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            **super().to_dict(),
            "possible_scores": sorted(self.possible_scores),
        }


@dataclass(frozen=True)
class Finished(GameState):
    """
    A game that has been decided.

    Attributes:
        result: How the game ended
        game_id: Identifies the game this state belongs to; not part of equality
    """

    result: GameResult
    game_id: Optional[str] = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            **super().to_dict(),
            "result": self.result.name,
        }
