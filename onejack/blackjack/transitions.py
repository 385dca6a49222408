"""
State transition functions for blackjack.

This module provides pure functions for moving a game from one state to the
next, without modifying the original state objects and without any I/O.
Cards are always drawn by position from the front of the deck.
"""

from typing import Optional, Sequence

from onejack.blackjack.constants import BLACKJACK, DEALER_STAND_THRESHOLD
from onejack.blackjack.hand import (
    BLACKJACK_HAND,
    BUST_HAND,
    classify_hand,
    max_score,
)
from onejack.blackjack.state import (
    CardsState,
    Finished,
    GameResult,
    GameState,
    InProgress,
)
from onejack.common.card import Card


class StateTransitionEngine:
    """
    Pure functions for state transitions in blackjack.

    This class contains static methods that implement game state transitions.
    Each method takes a state and returns a new state, without modifying the
    original.
    """

    @staticmethod
    def deal(
        shuffled_cards: Sequence[Card], game_id: Optional[str] = None
    ) -> GameState:
        """
        Deal the opening hands from an already shuffled deck.

        Cards go alternately to the player and the dealer, two each, and the
        rest become the deck.

        Args:
            shuffled_cards: The full deck in play order
            game_id: Optional identifier carried by every later state

        Returns:
            InProgress, or Finished when the player was dealt blackjack
        """
        cards = tuple(shuffled_cards)
        return StateTransitionEngine.resolve_player_hand(
            CardsState(
                player_hand=cards[0:4:2],
                dealer_hand=cards[1:4:2],
                deck=cards[4:],
            ),
            game_id,
        )

    @staticmethod
    def twist(game: InProgress) -> GameState:
        """
        Deal the player one more card.

        Args:
            game: Current game state

        Returns:
            New game state; the same state when the deck is exhausted
        """
        cards = game.state
        if not cards.deck:
            return game

        return StateTransitionEngine.resolve_player_hand(
            CardsState(
                player_hand=cards.player_hand + cards.deck[:1],
                dealer_hand=cards.dealer_hand,
                deck=cards.deck[1:],
            ),
            game.game_id,
        )

    @staticmethod
    def stick(game: InProgress) -> Finished:
        """
        Stand on the player's hand and let the dealer play it out.

        The dealer draws while under 17 and not already ahead or level.
        Checks are applied in order: dealer blackjack, dealer bust, dealer
        ahead, level, dealer draws, player ahead.

        Args:
            game: Current game state

        Returns:
            The finished game
        """
        cards = game.state
        player_max = max_score(cards.player_hand)

        while True:
            dealer_max = max_score(cards.dealer_hand)

            if dealer_max == BLACKJACK and len(cards.dealer_hand) == 2:
                return Finished(cards, GameResult.DEALER_BLACKJACK, game.game_id)
            if dealer_max == 0:
                return Finished(cards, GameResult.DEALER_BUST, game.game_id)
            if dealer_max > player_max:
                return Finished(cards, GameResult.DEALER_WINS, game.game_id)
            if dealer_max == player_max:
                return Finished(cards, GameResult.DRAW, game.game_id)
            if dealer_max < DEALER_STAND_THRESHOLD:
                if not cards.deck:
                    # Dealer must draw but the shoe is empty
                    return Finished(cards, GameResult.DEALER_BUST, game.game_id)
                cards = StateTransitionEngine.dealer_takes_deck_card(cards)
                continue
            return Finished(cards, GameResult.PLAYER_WINS, game.game_id)

    @staticmethod
    def dealer_takes_deck_card(cards: CardsState) -> CardsState:
        """Move the front card of the deck onto the dealer's hand."""
        if not cards.deck:
            return cards
        return CardsState(
            player_hand=cards.player_hand,
            dealer_hand=cards.dealer_hand + cards.deck[:1],
            deck=cards.deck[1:],
        )

    @staticmethod
    def resolve_player_hand(
        cards: CardsState, game_id: Optional[str] = None
    ) -> GameState:
        """
        Work out the game state implied by the player's hand.

        Args:
            cards: Cards on the table
            game_id: Identifier to stamp on the new state

        Returns:
            Finished on blackjack or bust, otherwise InProgress
        """
        player_value = classify_hand(cards.player_hand)

        if player_value == BLACKJACK_HAND:
            if classify_hand(cards.dealer_hand) == BLACKJACK_HAND:
                return Finished(
                    cards, GameResult.PLAYER_AND_DEALER_BLACKJACK, game_id
                )
            return Finished(cards, GameResult.PLAYER_BLACKJACK, game_id)
        if player_value == BUST_HAND:
            return Finished(cards, GameResult.PLAYER_BUST, game_id)
        return InProgress(cards, player_value.possible_scores, game_id)


deal = StateTransitionEngine.deal
twist = StateTransitionEngine.twist
stick = StateTransitionEngine.stick
