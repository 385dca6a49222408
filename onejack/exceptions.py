"""Custom exceptions for onejack"""


class OneJackError(Exception):
    """Base exception for all onejack errors"""
    pass


class InvalidTransitionError(OneJackError):
    """A move was requested on a game that is already finished"""
    pass
