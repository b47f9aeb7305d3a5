"""
Utility module for Truco.
Contains logging and formatting helpers.
"""

import logging
from typing import List, Dict, Optional, Sequence
from truco.card import Card, manilha_rank


def setup_logging(log_file: str = "truco_game.log", level: int = logging.INFO):
    """Set up logging configuration for the game."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.FileHandler(log_file)]
    )


def format_cards(cards: Sequence[Card]) -> str:
    """Format cards in their current order, e.g. '3♦ - A♠ - 5♣'."""
    return ' - '.join(str(card) for card in cards)


def format_scores(player_score: int, computer_score: int) -> str:
    return f"Score: Player {player_score} - Computer {computer_score}"


class GameLogger:
    """Logging class for game events."""

    def __init__(self, name: str = "TrucoGame"):
        self.logger = logging.getLogger(name)

    def log_game_start(self, player_names: List[str], winning_score: int,
                       seed: Optional[int] = None):
        """Log the start of a new game session."""
        self.logger.info("=== NEW GAME STARTED ===")
        self.logger.info(f"Players: {', '.join(player_names)}")
        self.logger.info(f"Playing to {winning_score} points (seed: {seed})")

    def log_round_start(self, round_num: int, turned_card: Card,
                        hands: Dict[str, List[Card]]):
        """Log start of new round."""
        self.logger.info(
            f"=== Round {round_num} - Turned: {turned_card}, "
            f"Manilha: {manilha_rank(turned_card.rank)} ==="
        )
        for name, hand in hands.items():
            self.logger.debug(f"{name} hand: {format_cards(hand)}")

    def log_card_play(self, player_name: str, card: Card, turn_stack: List[Card]):
        """Log a card play."""
        self.logger.info(f"{player_name} plays {card} (played: {format_cards(turn_stack)})")

    def log_trick_winner(self, winner_name: str, trick_cards: List[Card], turn_score: int):
        """Log trick winner and cards played."""
        cards_str = ', '.join(str(card) for card in trick_cards)
        self.logger.info(f"{winner_name} wins trick with: {cards_str} (turn score {turn_score:+d})")

    def log_round_end(self, round_num: int, winner_name: str, scores: Dict[str, int]):
        self.logger.info(f"Round {round_num} won by {winner_name}")
        for name, score in scores.items():
            self.logger.debug(f"{name}: {score} points")

    def log_game_end(self, winner_name: str, final_scores: Dict[str, int]):
        """Log game completion."""
        self.logger.info("=== GAME COMPLETE ===")
        self.logger.info(f"Winner: {winner_name}")
        for name, score in final_scores.items():
            self.logger.info(f"{name}: {score} points")
