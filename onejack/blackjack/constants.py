"""Blackjack-specific constants and value mappings."""

from onejack.common.card import Rank

BLACKJACK = 21
DEALER_STAND_THRESHOLD = 17

# Aces are scored separately, as either of ACE_VALUES
ACE_VALUES = (1, 11)

BLACKJACK_VALUES = {
    Rank.ACE: 0,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}


def get_blackjack_value(rank: Rank) -> int:
    """Get the fixed blackjack value for a non-ace rank (0 for an ace)."""
    return BLACKJACK_VALUES[rank]
