"""
Deck provider for the blackjack engine.

The engine never owns randomness: it is handed a function that builds the
full ordered deck and a function that puts it in play order.

>>> len(create_deck_of_cards())
52
>>> create_deck_of_cards()[0]
Card(Rank.ACE, Suit.CLUBS)
"""

import random
from typing import Callable, List, Optional, Sequence

from onejack.common.card import Card, Rank, Suit

DeckProvider = Callable[[], List[Card]]
Shuffler = Callable[[Sequence[Card]], List[Card]]

# Precompute the default deck
_default_deck = [Card(rank, suit) for suit in Suit for rank in Rank]


def create_deck_of_cards() -> List[Card]:
    """
    Construct a deck with one card for every combination of suit and rank.

    :return: A new list of 52 cards, grouped by suit in Ace to King order.
    """
    return _default_deck.copy()


def shuffle_cards(
    cards: Sequence[Card], rng: Optional[random.Random] = None
) -> List[Card]:
    """
    Return the cards in a random order, leaving the input untouched.

    :param cards: The cards to shuffle.
    :param rng: Optional random generator, for reproducible shuffles.
    :return: A new shuffled list.
    """
    shuffled = list(cards)
    (rng or random).shuffle(shuffled)
    return shuffled


def seeded_shuffler(seed: Optional[int]) -> Shuffler:
    """
    Build a shuffler bound to its own random generator.

    A ``None`` seed still gets a private generator, seeded from the OS.
    """
    rng = random.Random(seed)

    def shuffle(cards: Sequence[Card]) -> List[Card]:
        return shuffle_cards(cards, rng)

    return shuffle
