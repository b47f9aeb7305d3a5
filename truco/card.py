"""
Card module for Truco.
Defines Card, Suit, and Rank with Truco ordering and the manilha relation.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import List


class Suit(Enum):
    """Card suits. Strength is only used as a tie-breaker."""
    CLUBS = "♣"
    HEARTS = "♥"
    SPADES = "♠"
    DIAMONDS = "♦"

    def __str__(self):
        return self.value

    @property
    def strength(self) -> int:
        return SUIT_STRENGTH[self]


class Rank(Enum):
    """Card ranks, declared from strongest to weakest."""
    THREE = "3"
    TWO = "2"
    ACE = "A"
    KNIGHT = "K"
    JOKER = "J"
    QUEEN = "Q"
    SEVEN = "7"
    SIX = "6"
    FIVE = "5"
    FOUR = "4"

    def __str__(self):
        return self.value

    @property
    def position(self) -> int:
        """Declaration position, 0 being the strongest rank."""
        return RANK_ORDER.index(self)


RANK_ORDER: List[Rank] = list(Rank)

# Diamonds > Spades > Clubs > Hearts
SUIT_STRENGTH = {
    Suit.DIAMONDS: 4,
    Suit.SPADES: 3,
    Suit.CLUBS: 2,
    Suit.HEARTS: 1,
}


def manilha_rank(turned_rank: Rank) -> Rank:
    """
    Rank that becomes manilha for a given turned card rank.

    It is the next stronger rank, wrapping from Three back to Four.
    """
    return RANK_ORDER[(turned_rank.position - 1) % len(RANK_ORDER)]


@total_ordering
@dataclass(frozen=True)
class Card:
    """An immutable playing card. Greater means stronger, manilhas aside."""

    rank: Rank
    suit: Suit

    def __str__(self):
        return f"{self.rank}{self.suit}"

    def __repr__(self):
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def strength(self):
        return (-self.rank.position, self.suit.strength)

    def __lt__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.strength < other.strength

    def is_manilha(self, turned_card: 'Card') -> bool:
        return self.rank == manilha_rank(turned_card.rank)

    def beats(self, other: 'Card', turned_card: 'Card') -> bool:
        """
        Determine if this card beats another in a trick.

        Args:
            other: The card to compare against
            turned_card: Card turned up for this round

        Returns:
            True if this card beats the other card
        """
        mine = self.is_manilha(turned_card)
        theirs = other.is_manilha(turned_card)

        # Manilhas among themselves: suit decides
        if mine and theirs:
            return self.suit.strength > other.suit.strength
        if mine:
            return True
        if theirs:
            return False

        return self > other


def is_manilha(card: Card, turned_card: Card) -> bool:
    """Check whether card is a manilha for the given turned card."""
    return card.is_manilha(turned_card)


def create_deck() -> List[Card]:
    """Create the 40-card Truco deck, suit-major."""
    deck = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(rank, suit))
    return deck
