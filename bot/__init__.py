"""Card-playing strategies for the Truco computer seat."""

from bot.last_card_bot import LastCardBot
from bot.random_bot import RandomBot

__all__ = ["LastCardBot", "RandomBot"]
