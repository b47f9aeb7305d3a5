"""
Round module for Truco.
Handles dealing, trick resolution and the per-round turn score.
"""

from typing import List, Dict, Optional, Tuple
from truco.card import Card
from truco.deck import Deck
from truco.player import Player, PlayContext
from truco.rules import (
    Side, PLAYS_PER_ROUND, dealing_order, trick_winner, round_winner,
)


class Round:
    """Manages one round: six alternating plays grouped into three tricks."""

    def __init__(self, round_number: int, deck: Deck, players: Dict[Side, Player],
                 starting_turn: Side = Side.PLAYER):
        self.round_number = round_number
        self.deck = deck
        self.players = players
        self.starting_turn = starting_turn
        self.turn = starting_turn
        self.turned_card: Optional[Card] = None

        # Every card played this round, both sides interleaved
        self.turn_stack: List[Card] = []

        # Positive at the end: player won, negative: computer won
        self.turn_score = 0
        self.trick_winners: List[Side] = []

    def deal(self):
        """Deal three cards to each side, then turn up one card."""
        for side in dealing_order(self.starting_turn):
            self.players[side].receive_card(self.deck.draw())
        self.turned_card = self.deck.draw()

    def context_for(self, side: Side, scores: Tuple[int, int] = (0, 0)) -> PlayContext:
        return PlayContext(
            side=side,
            turned_card=self.turned_card,
            turn_stack=list(self.turn_stack),
            round_number=self.round_number,
            scores=scores,
        )

    def play_card(self, side: Side, card: Card) -> Optional[Side]:
        """
        Record a played card and advance the turn.

        Args:
            side: Side playing the card
            card: Card already removed from that side's hand

        Returns:
            Winner of the trick if this card completed one, otherwise None
        """
        if self.is_complete():
            raise ValueError(f"Round {self.round_number} is already complete")
        if side != self.turn:
            raise ValueError(f"It is not {side.value}'s turn")

        winner = None
        if len(self.turn_stack) % 2 == 1:
            winner = self.resolve_trick(card)

        self.turn_stack.append(card)
        self.turn = self.turn.other
        return winner

    def resolve_trick(self, card: Card) -> Optional[Side]:
        """Compare card, played by the side on turn, with the top of the stack."""
        if not self.turn_stack:
            return None
        if self.turned_card is None:
            raise RuntimeError("Round has not been dealt")

        winner = trick_winner(self.turn_stack[-1], card, self.turn, self.turned_card)
        self.turn_score += 1 if winner is Side.PLAYER else -1
        self.trick_winners.append(winner)
        return winner

    def last_trick(self) -> List[Card]:
        return self.turn_stack[-2:]

    def is_complete(self) -> bool:
        return len(self.turn_stack) >= PLAYS_PER_ROUND

    @property
    def winner(self) -> Side:
        return round_winner(self.turn_score)

    def finish(self):
        """Clear hands and the turned card once the round is scored."""
        for player in self.players.values():
            player.reset_round()
        self.turned_card = None
