"""
Tests for the BlackjackEngine class.

This module checks that the engine shuffles through its injected
collaborators, delegates to the pure transitions, and publishes the expected
events.
"""

import pytest
from unittest.mock import patch

from conftest import hand
from onejack.blackjack.state import CardsState, Finished, GameResult, InProgress
from onejack.common.deck import create_deck_of_cards, seeded_shuffler
from onejack.engine import BlackjackEngine
from onejack.events import EngineEventType, EventBus, EventEmitter
from onejack.exceptions import InvalidTransitionError


def no_shuffle(cards):
    return list(cards)


@pytest.fixture
def engine_for():
    """Build an engine that deals the given cards in the given order."""

    def build(cards, **config):
        return BlackjackEngine(
            deck_provider=lambda: list(cards), shuffler=no_shuffle, config=config
        )

    return build


@pytest.fixture
def events():
    """Collect every (event_type, data) pair emitted on the bus."""
    received = []
    EventBus.get_instance().on_any(received.append)
    return received


def test_initialization():
    engine = BlackjackEngine()
    assert engine.config == {}
    assert engine.deck_provider is create_deck_of_cards
    assert engine.shuffler is not None
    assert engine.event_bus is EventBus.get_instance()


def test_deal_uses_the_shuffler():
    cards = hand("AH", "2H", "AC", "2C", "JD")
    engine = BlackjackEngine(
        deck_provider=lambda: list(cards), shuffler=lambda c: list(reversed(c))
    )

    game = engine.deal()

    assert game.state.deck == hand("AH")
    assert game.state.player_hand == hand("JD", "AC")
    assert game.state.dealer_hand == hand("2C", "2H")


def test_seeded_engines_deal_the_same_game():
    first = BlackjackEngine(config={"seed": 1234}).deal()
    second = BlackjackEngine(config={"seed": 1234}).deal()
    assert first == second


def test_default_shuffler_is_seeded_from_config():
    expected = seeded_shuffler(42)(create_deck_of_cards())

    game = BlackjackEngine(config={"seed": 42}).deal()

    assert game.state.player_hand == (expected[0], expected[2])
    assert game.state.dealer_hand == (expected[1], expected[3])
    assert game.state.deck == tuple(expected[4:])


def test_full_deck_deal_leaves_48_cards():
    game = BlackjackEngine(config={"seed": 5}).deal()
    state = game.state
    assert len(state.player_hand) == 2
    assert len(state.dealer_hand) == 2
    assert len(state.deck) == 48
    assert set(state.player_hand + state.dealer_hand + state.deck) == set(
        create_deck_of_cards()
    )


def test_deal_emits_start_and_cards(engine_for, events):
    engine = engine_for(hand("9H", "2H", "7C", "5C", "JD"))

    game = engine.deal()

    types = [event_type for event_type, _ in events]
    assert types == ["GAME_STARTED"] + ["CARD_DEALT"] * 4
    start = events[0][1]
    assert start["game_id"] == game.game_id
    assert all(data["game_id"] == game.game_id for _, data in events)
    assert start["player_hand"] == ["9 of ♥", "7 of ♣"]
    assert start["dealer_upcard"] == "5 of ♣"
    assert [data["recipient"] for _, data in events[1:]] == [
        "player",
        "dealer",
        "player",
        "dealer",
    ]


def test_blackjack_deal_emits_game_ended(engine_for, events):
    engine = engine_for(hand("AH", "2H", "KC", "2C", "JD"))

    game = engine.deal()

    assert game.result == GameResult.PLAYER_BLACKJACK
    assert events[-1] == (
        "GAME_ENDED",
        {"game_id": game.game_id, "result": "PLAYER_BLACKJACK"},
    )


def test_each_deal_is_a_new_game(engine_for):
    engine = engine_for(hand("9H", "2H", "7C", "5C", "JD"))
    first = engine.deal()
    second = engine.deal()
    assert first.game_id is not None
    assert second.game_id != first.game_id


def test_events_follow_the_game_passed_in(engine_for, events):
    engine = engine_for(hand("10H", "10S", "9C", "8C", "JD"))
    first = engine.deal()
    second = engine.deal()
    events.clear()

    finished = engine.stick(first)

    assert finished.game_id == first.game_id
    assert events[-1] == (
        "GAME_ENDED",
        {"game_id": first.game_id, "result": "PLAYER_WINS"},
    )
    assert all(data["game_id"] == first.game_id for _, data in events)
    assert second.game_id != first.game_id


def test_game_id_survives_twist(engine_for):
    engine = engine_for(hand("9H", "2H", "7C", "5C", "3D", "JD"))
    game = engine.deal()

    assert engine.twist(game).game_id == game.game_id


def test_twist(engine_for, events):
    engine = engine_for(hand("9H", "2H", "7C", "5C", "3D", "JD"))
    game = engine.deal()
    events.clear()

    game = engine.twist(game)

    assert isinstance(game, InProgress)
    assert game.possible_scores == {19}
    assert [event_type for event_type, _ in events] == ["PLAYER_ACTION", "CARD_DEALT"]
    assert events[0][1]["action"] == "twist"
    assert events[1][1]["card"] == "3 of ♦"


def test_twist_to_bust_ends_the_game(engine_for, events):
    engine = engine_for(hand("9H", "2H", "7C", "5C", "JD"))
    game = engine.deal()

    game = engine.twist(game)

    assert game.result == GameResult.PLAYER_BUST
    assert events[-1][0] == "GAME_ENDED"


def test_twist_on_empty_deck_returns_same_state():
    engine = BlackjackEngine(config={"emit_events": False})
    game = InProgress(CardsState(hand("2H", "3H"), hand("4H", "5H")), {5})

    assert engine.twist(game) is game


def test_stick_emits_dealer_draws(engine_for, events):
    engine = engine_for(hand("10H", "6H", "8C", "10C", "4D", "JD"))
    game = engine.deal()
    events.clear()

    game = engine.stick(game)

    assert game.result == GameResult.DEALER_WINS
    types = [event_type for event_type, _ in events]
    assert types == ["PLAYER_ACTION", "CARD_DEALT", "DEALER_ACTION", "GAME_ENDED"]
    assert events[2][1]["dealer_hand"] == ["6 of ♥", "10 of ♣", "4 of ♦"]
    assert events[3][1]["result"] == "DEALER_WINS"


def test_finished_game_rejects_moves():
    engine = BlackjackEngine()
    game = Finished(CardsState(), GameResult.DRAW)

    with pytest.raises(InvalidTransitionError):
        engine.twist(game)
    with pytest.raises(InvalidTransitionError):
        engine.stick(game)


@patch.object(EventEmitter, "emit")
def test_events_can_be_disabled(mock_emit, engine_for):
    engine = engine_for(hand("9H", "2H", "7C", "5C", "JD"), emit_events=False)

    game = engine.deal()
    engine.stick(game)

    mock_emit.assert_not_called()


@patch.object(EventEmitter, "emit")
def test_stick_emits_game_ended(mock_emit, engine_for):
    engine = engine_for(hand("10H", "10S", "9C", "8C", "JD"))
    game = engine.deal()

    engine.stick(game)

    args, _ = mock_emit.call_args
    assert args[0] == EngineEventType.GAME_ENDED
    assert args[1]["result"] == "PLAYER_WINS"
