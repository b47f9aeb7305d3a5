"""
Deck module for Truco.
Handles deck creation, shuffling, and drawing cards.
"""

import random
from typing import List, Optional
from truco.card import Card, create_deck


class DeckExhaustedError(ValueError):
    """Raised when drawing from an empty deck."""


class Deck:
    """Manages a deck of cards with shuffling and drawing capabilities."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.cards: List[Card] = create_deck()
        self.shuffle()

    def shuffle(self):
        """Shuffle the deck randomly."""
        self.rng.shuffle(self.cards)

    def draw(self) -> Card:
        """
        Remove and return the card at the end of the deck.

        Raises:
            DeckExhaustedError: If the deck is empty
        """
        if not self.cards:
            raise DeckExhaustedError("Cannot draw from an empty deck")
        return self.cards.pop()

    def cards_remaining(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)

    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def reset(self):
        """Reset deck to the full 40 cards and shuffle."""
        self.cards = create_deck()
        self.shuffle()
