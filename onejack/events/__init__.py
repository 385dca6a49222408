"""
Event system for the onejack engine.

This package lets a presentation layer follow a game as it unfolds without
reaching into the state objects.
"""

from onejack.events.emitter import (
    EventEmitter,
    EventBus,
    EventPriority,
    EngineEventType,
)

__all__ = ["EventEmitter", "EventBus", "EventPriority", "EngineEventType"]
