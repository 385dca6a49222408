"""
Blackjack engine implementation.

This module provides the BlackjackEngine class, which owns the deck provider
and shuffler for a table, drives the pure state transitions, and publishes
what happened on the event bus.
"""

import logging
import uuid
from typing import Any, Dict, Optional, Sequence

from onejack.blackjack.state import Finished, GameState, InProgress
from onejack.blackjack.transitions import StateTransitionEngine
from onejack.common.card import Card
from onejack.common.deck import (
    DeckProvider,
    Shuffler,
    create_deck_of_cards,
    seeded_shuffler,
)
from onejack.events import EngineEventType, EventBus
from onejack.exceptions import InvalidTransitionError

logger = logging.getLogger("onejack.engine")


class BlackjackEngine:
    """
    Engine for a single player against the dealer.

    The engine holds no game state of its own between calls: the caller keeps
    the latest GameState and passes it back for each decision. The game id
    travels on the state, so one engine can serve any number of games.
    """

    def __init__(
        self,
        deck_provider: DeckProvider = create_deck_of_cards,
        shuffler: Optional[Shuffler] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the blackjack engine.

        Args:
            deck_provider: Builds the full ordered deck for each new game
            shuffler: Puts the deck in play order. Defaults to a random
                      shuffle seeded from config["seed"]
            config: Configuration options for the engine
        """
        self.config = config or {}
        self.deck_provider = deck_provider
        self.shuffler = shuffler or seeded_shuffler(self.config.get("seed"))
        self.emit_events = self.config.get("emit_events", True)
        self.event_bus = EventBus.get_instance()

    def _emit(
        self, game: GameState, event_type: EngineEventType, data: Dict[str, Any]
    ) -> None:
        if self.emit_events:
            self.event_bus.emit(event_type, {"game_id": game.game_id, **data})

    def _emit_card(self, game: GameState, recipient: str, card: Card) -> None:
        self._emit(
            game,
            EngineEventType.CARD_DEALT,
            {"recipient": recipient, "card": str(card)},
        )

    def _finish(self, game: GameState) -> GameState:
        if isinstance(game, Finished):
            logger.info("Game %s finished: %s", game.game_id, game.result.name)
            self._emit(game, EngineEventType.GAME_ENDED, {"result": game.result.name})
        return game

    @staticmethod
    def _require_in_progress(game: GameState, action: str) -> InProgress:
        if not isinstance(game, InProgress):
            raise InvalidTransitionError(f"Cannot {action}: the game is already finished")
        return game

    def deal(self) -> GameState:
        """
        Start a new game from a freshly shuffled deck.

        Returns:
            InProgress, or Finished if the player was dealt blackjack
        """
        cards: Sequence[Card] = self.shuffler(self.deck_provider())
        game = StateTransitionEngine.deal(cards, game_id=str(uuid.uuid4()))
        logger.debug(
            "Game %s dealt: player %s, dealer %s",
            game.game_id,
            [str(card) for card in game.state.player_hand],
            [str(card) for card in game.state.dealer_hand],
        )

        self._emit(
            game,
            EngineEventType.GAME_STARTED,
            {
                "player_hand": [str(card) for card in game.state.player_hand],
                "dealer_upcard": str(game.state.dealer_hand[-1]),
            },
        )
        for player_card, dealer_card in zip(
            game.state.player_hand, game.state.dealer_hand
        ):
            self._emit_card(game, "player", player_card)
            self._emit_card(game, "dealer", dealer_card)

        return self._finish(game)

    def twist(self, game: GameState) -> GameState:
        """
        Deal the player another card.

        Args:
            game: The current game, which must be in progress

        Returns:
            The next game state

        Raises:
            InvalidTransitionError: If the game is already finished
        """
        game = self._require_in_progress(game, "twist")
        self._emit(game, EngineEventType.PLAYER_ACTION, {"action": "twist"})

        new_game = StateTransitionEngine.twist(game)
        if new_game is game:
            logger.warning("Game %s: twist ignored, the deck is empty", game.game_id)
            return game

        self._emit_card(new_game, "player", new_game.state.player_hand[-1])
        return self._finish(new_game)

    def stick(self, game: GameState) -> Finished:
        """
        Stand, and let the dealer play out their hand.

        Args:
            game: The current game, which must be in progress

        Returns:
            The finished game

        Raises:
            InvalidTransitionError: If the game is already finished
        """
        game = self._require_in_progress(game, "stick")
        self._emit(game, EngineEventType.PLAYER_ACTION, {"action": "stick"})

        finished = StateTransitionEngine.stick(game)
        drawn = finished.state.dealer_hand[len(game.state.dealer_hand):]
        for index, card in enumerate(drawn, start=len(game.state.dealer_hand) + 1):
            logger.debug("Game %s: dealer draws %s", game.game_id, card)
            self._emit_card(game, "dealer", card)
            self._emit(
                game,
                EngineEventType.DEALER_ACTION,
                {"dealer_hand": [str(c) for c in finished.state.dealer_hand[:index]]},
            )

        return self._finish(finished)
