"""
Player module for Truco.
Defines player state and strategy interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from truco.card import Card
from truco.rules import Side, InvalidSelectionError, validate_selection
from truco.utils import format_cards


@dataclass
class PlayContext:
    """What a player can see when choosing a card."""
    side: Side
    turned_card: Optional[Card]
    turn_stack: List[Card] = field(default_factory=list)
    round_number: int = 0
    scores: Tuple[int, int] = (0, 0)


class Player:
    """Represents a seat in the Truco game."""

    def __init__(self, side: Side, name: str = None):
        self.side = side
        self.name = name or side.value.title()
        self.hand: List[Card] = []
        self.score = 0
        self.strategy: Optional['BotInterface'] = None

    def receive_card(self, card: Card):
        """Add a dealt card to player's hand."""
        self.hand.append(card)

    def play_card_at(self, index: int) -> Card:
        """
        Remove and return the card at a 0-based index.

        The last card of the hand takes the freed slot, so the order of
        the remaining cards changes: [A, B, C] minus A leaves [C, B].

        Raises:
            InvalidSelectionError: If index is outside the hand
        """
        if not 0 <= index < len(self.hand):
            raise InvalidSelectionError(
                f"No card at position {index + 1} in a hand of {len(self.hand)}"
            )
        last = self.hand.pop()
        if index == len(self.hand):
            return last
        card = self.hand[index]
        self.hand[index] = last
        return card

    def reset_round(self):
        """Reset player state for new round."""
        self.hand = []

    def add_score(self, points: int):
        """Add points to player's total score."""
        self.score += points

    def __str__(self):
        return f"{self.name} (Score: {self.score})"


class BotInterface(ABC):
    """Abstract interface that all bots must implement."""

    @abstractmethod
    def choose_card(self, hand: List[Card], context: PlayContext) -> int:
        """
        Choose which card to play.

        Args:
            hand: Current hand, in display order
            context: Turned card, cards played so far and scores

        Returns:
            0-based index into hand
        """
        pass


class HumanPlayer(Player):
    """Human player that gets input from console."""

    def choose_card_interactive(self, context: PlayContext) -> int:
        """Ask for a 1-based card choice until a valid one is given."""
        print(f"Your turn! Which card will you play? {format_cards(self.hand)}")

        while True:
            raw = input(f"Enter card number (1-{len(self.hand)}): ").strip()
            try:
                return validate_selection(int(raw), len(self.hand))
            except InvalidSelectionError as e:
                print(e)
            except ValueError:
                print("Please enter a valid number")
