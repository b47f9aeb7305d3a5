"""
Rules module for Truco.
Contains game rules, validation logic, and rule constants.
"""

from enum import Enum
from typing import List, Tuple
from truco.card import Card


# Game constants
NUM_PLAYERS = 2
CARDS_PER_HAND = 3
DECK_SIZE = 40
PLAYS_PER_ROUND = NUM_PLAYERS * CARDS_PER_HAND

# Scoring constants
WINNING_SCORE = 12
SCORE_INCREMENT = 1


class Side(Enum):
    """The two seats at the table."""
    PLAYER = "player"
    COMPUTER = "computer"

    @property
    def other(self) -> 'Side':
        return Side.COMPUTER if self is Side.PLAYER else Side.PLAYER


class InvalidSelectionError(ValueError):
    """Raised when a chosen hand index does not point at a card."""


def dealing_order(first: Side, num_cards: int = PLAYS_PER_ROUND) -> List[Side]:
    """
    Sides receiving each dealt card, alternating from `first`.

    Args:
        first: Side receiving the first card
        num_cards: Number of cards to deal

    Returns:
        One Side per dealt card
    """
    order = []
    side = first
    for _ in range(num_cards):
        order.append(side)
        side = side.other
    return order


def trick_winner(previous: Card, current: Card, current_side: Side,
                 turned_card: Card) -> Side:
    """Side that takes a trick, given the card on top of the stack and the reply."""
    if current.beats(previous, turned_card):
        return current_side
    return current_side.other


def round_winner(turn_score: int) -> Side:
    """Ties go to the player."""
    return Side.PLAYER if turn_score >= 0 else Side.COMPUTER


def validate_selection(choice: int, hand_size: int) -> int:
    """
    Turn a 1-based hand choice into a list index.

    Raises:
        InvalidSelectionError: If the choice is outside the hand
    """
    if not 1 <= choice <= hand_size:
        raise InvalidSelectionError(
            f"Choose a card between 1 and {hand_size}, got {choice}"
        )
    return choice - 1


def is_match_over(scores: Tuple[int, int], winning_score: int = WINNING_SCORE) -> bool:
    return any(score >= winning_score for score in scores)
