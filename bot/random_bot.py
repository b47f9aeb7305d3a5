"""
Random bot implementation for Truco.
Stands in for the human seat when matches are simulated.
"""

import random
from typing import List, Optional
from truco.card import Card
from truco.player import BotInterface, PlayContext


class RandomBot(BotInterface):
    """Bot that plays a uniformly random card from its hand."""

    def __init__(self, name: str = "RandomBot", seed: Optional[int] = None):
        self.name = name
        self.rng = random.Random(seed)

    def choose_card(self, hand: List[Card], context: PlayContext) -> int:
        return self.rng.randrange(len(hand))

    def __str__(self):
        return self.name
