"""
Main game module for Truco.
Manages the match: rounds, turn carry-over and scores.
"""

import random
from typing import List, Dict, Optional, Tuple
from truco.card import Card
from truco.deck import Deck
from truco.player import Player, HumanPlayer, BotInterface
from truco.round import Round
from truco.rules import (
    Side, PLAYS_PER_ROUND, WINNING_SCORE, SCORE_INCREMENT, is_match_over,
)
from truco.utils import GameLogger, format_cards, format_scores


class TrucoGame:
    """Main game controller for Truco, one player against the computer."""

    def __init__(self, player: Player, computer: Player,
                 winning_score: int = WINNING_SCORE,
                 score_increment: int = SCORE_INCREMENT,
                 seed: Optional[int] = None,
                 reveal_computer_hand: bool = False,
                 quiet: bool = False):
        if player.side is not Side.PLAYER or computer.side is not Side.COMPUTER:
            raise ValueError("Players must sit in the player and computer seats")

        self.players: Dict[Side, Player] = {Side.PLAYER: player, Side.COMPUTER: computer}
        self.winning_score = winning_score
        self.score_increment = score_increment
        self.seed = seed
        self.rng = random.Random(seed)
        self.deck = Deck(self.rng)
        self.reveal_computer_hand = reveal_computer_hand
        self.quiet = quiet

        # Not reset between rounds
        self.turn = Side.PLAYER

        self.current_round = 0
        self.rounds: List[Round] = []
        self.game_complete = False
        self.logger = GameLogger()

    @property
    def player(self) -> Player:
        return self.players[Side.PLAYER]

    @property
    def computer(self) -> Player:
        return self.players[Side.COMPUTER]

    def _display(self, message: str):
        if not self.quiet:
            print(message)

    def get_scores(self) -> Tuple[int, int]:
        return self.player.score, self.computer.score

    def start_new_round(self) -> Round:
        """Deal a new round from the current deck."""
        if self.game_complete:
            raise ValueError("Game already complete")

        self.current_round += 1
        round_obj = Round(self.current_round, self.deck, self.players, self.turn)
        round_obj.deal()
        self.rounds.append(round_obj)

        self.logger.log_round_start(
            self.current_round, round_obj.turned_card,
            {p.name: list(p.hand) for p in self.players.values()}
        )
        return round_obj

    def choose_card(self, round_obj: Round, side: Side) -> Card:
        """Ask the side on turn for a card and remove it from its hand."""
        player = self.players[side]
        context = round_obj.context_for(side, self.get_scores())

        if isinstance(player.strategy, BotInterface):
            index = player.strategy.choose_card(list(player.hand), context)
        elif isinstance(player, HumanPlayer):
            index = player.choose_card_interactive(context)
        else:
            raise ValueError(f"{player.name} has no way to choose a card")

        return player.play_card_at(index)

    def play_round(self, round_obj: Round) -> Side:
        """
        Play the six cards of a round.

        Returns:
            Side that won the round
        """
        self._display(f"Your hand: {format_cards(self.player.hand)}")
        if self.reveal_computer_hand:
            self._display(f"Computer hand: {format_cards(self.computer.hand)}")
        self._display(f"Turned card: {round_obj.turned_card}")

        for _ in range(PLAYS_PER_ROUND):
            self._display(f"Cards played: {format_cards(round_obj.turn_stack)}")

            side = round_obj.turn
            card = self.choose_card(round_obj, side)
            if side is Side.COMPUTER:
                self._display(f"The computer played {card}")

            self.logger.log_card_play(self.players[side].name, card, round_obj.turn_stack)
            trick_winner = round_obj.play_card(side, card)

            if trick_winner is not None:
                self.logger.log_trick_winner(
                    self.players[trick_winner].name, round_obj.last_trick(),
                    round_obj.turn_score
                )
                if trick_winner is Side.PLAYER:
                    self._display("You won this trick!")
                else:
                    self._display("The computer won this trick!")

        self.turn = round_obj.turn
        return round_obj.winner

    def finish_round(self, round_obj: Round) -> Side:
        """Award the round, clear it and rebuild the deck."""
        winner = round_obj.winner
        self.players[winner].add_score(self.score_increment)

        round_obj.finish()
        self.deck.reset()

        self.logger.log_round_end(
            round_obj.round_number, self.players[winner].name,
            {p.name: p.score for p in self.players.values()}
        )

        if is_match_over(self.get_scores(), self.winning_score):
            self.game_complete = True
        return winner

    def get_winner(self) -> Optional[Side]:
        if not self.game_complete:
            return None
        if self.player.score >= self.winning_score:
            return Side.PLAYER
        return Side.COMPUTER

    def play_game(self) -> Side:
        """Play rounds until one side reaches the winning score."""
        self.logger.log_game_start(
            [p.name for p in self.players.values()], self.winning_score, self.seed
        )

        while not self.game_complete:
            self._display(format_scores(*self.get_scores()))
            round_obj = self.start_new_round()
            self.play_round(round_obj)
            self.finish_round(round_obj)

        winner = self.get_winner()
        if winner is Side.PLAYER:
            self._display("You won! Congratulations!")
        else:
            self._display("The computer won, better luck next time!")

        self.logger.log_game_end(
            self.players[winner].name,
            {p.name: p.score for p in self.players.values()}
        )
        return winner
