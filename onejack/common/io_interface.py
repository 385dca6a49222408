"""
This module contains the IOInterface abstract base class and its implementations.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the line-based input/output used by the terminal game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> Optional[str]:
        """Get a line of input after showing a prompt; None at end of input."""
        pass


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> Optional[str]:
        print(prompt)
        try:
            return input()
        except EOFError:
            return None


class TestIOInterface(IOInterface):
    """
    A test IO interface. Collects output messages and replays scripted input.

    Prompts are recorded alongside output so a transcript reads in order.
    """

    __test__ = False

    def __init__(self, input_responses: Iterable[str] = ()):
        self.sent_messages: List[str] = []
        self.input_responses: List[str] = list(input_responses)

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> Optional[str]:
        self.sent_messages.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        return None
