"""
Hand valuation for blackjack.

A hand is any ordered sequence of cards. Rather than settling on a single
"best" total, every ace is tried as both 1 and 11 and all totals that stay
at or under 21 are reported, so a hand of ``A, 7`` is worth ``{8, 18}``.
"""

from dataclasses import dataclass
from typing import FrozenSet, Sequence, Union

from onejack.blackjack.constants import ACE_VALUES, BLACKJACK, get_blackjack_value
from onejack.common.card import Card, Rank


def possible_scores(cards: Sequence[Card]) -> FrozenSet[int]:
    """
    Compute every distinct total of the hand that does not exceed 21.

    Args:
        cards: The hand to value

    Returns:
        The set of legal totals; empty when the hand is bust
    """
    num_aces = sum(1 for card in cards if card.rank == Rank.ACE)
    scores = {sum(get_blackjack_value(card.rank) for card in cards)}

    for _ in range(num_aces):
        scores = {score + ace for score in scores for ace in ACE_VALUES}

    return frozenset(score for score in scores if score <= BLACKJACK)


def max_score(cards: Sequence[Card]) -> int:
    """The best total of the hand, or 0 when it is bust."""
    return max(possible_scores(cards), default=0)


@dataclass(frozen=True)
class BlackjackHand:
    pass


@dataclass(frozen=True)
class BustHand:
    pass


@dataclass(frozen=True)
class ValueSet:
    possible_scores: FrozenSet[int]


HandValue = Union[BlackjackHand, BustHand, ValueSet]

BLACKJACK_HAND = BlackjackHand()
BUST_HAND = BustHand()


def classify_hand(cards: Sequence[Card]) -> HandValue:
    """
    Classify a hand as blackjack, bust, or a set of totals of 21 or lower.

    Blackjack needs exactly two cards; a longer hand that reaches 21 is just
    a value set containing 21.
    """
    scores = possible_scores(cards)
    if BLACKJACK in scores and len(cards) == 2:
        return BLACKJACK_HAND
    if not scores:
        return BUST_HAND
    return ValueSet(scores)