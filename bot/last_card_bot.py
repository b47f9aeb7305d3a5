"""
The computer opponent's card policy.
"""

from typing import List
from truco.card import Card
from truco.player import BotInterface, PlayContext


class LastCardBot(BotInterface):
    """Always plays the card it was dealt last."""

    def __init__(self, name: str = "LastCardBot"):
        self.name = name

    def choose_card(self, hand: List[Card], context: PlayContext) -> int:
        if not hand:
            raise ValueError("Cannot choose a card from an empty hand")
        return len(hand) - 1

    def __str__(self):
        return self.name
