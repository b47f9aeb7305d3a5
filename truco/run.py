#!/usr/bin/env python3
"""
Main entry point for Truco.
Play a match against the computer, or simulate bot-only matches.
"""

import argparse
import logging
from typing import Optional

import numpy as np

from truco.player import Player, HumanPlayer
from truco.game import TrucoGame
from truco.rules import Side, WINNING_SCORE
from truco.utils import setup_logging
from bot.last_card_bot import LastCardBot
from bot.random_bot import RandomBot


def create_bot_player(bot_type: str, side: Side, seed: Optional[int] = None) -> Player:
    """Create a bot player of specified type."""
    bot_map = {
        'last': LastCardBot,
        'random': RandomBot,
    }

    if bot_type not in bot_map:
        raise ValueError(f"Unknown bot type: {bot_type}. Available: {list(bot_map.keys())}")

    player = Player(side, "Computer" if side is Side.COMPUTER else f"{bot_type.title()}Bot")
    if bot_type == 'random':
        player.strategy = RandomBot(player.name, seed)
    else:
        player.strategy = bot_map[bot_type](player.name)
    return player


def create_human_player(name: str = None) -> HumanPlayer:
    """Create a human player."""
    return HumanPlayer(Side.PLAYER, name or "Player")


def run_interactive_game(seed: Optional[int] = None, winning_score: int = WINNING_SCORE,
                         reveal: bool = False) -> dict:
    """Run a match between the human and the computer."""
    game = TrucoGame(
        create_human_player(),
        create_bot_player('last', Side.COMPUTER),
        winning_score=winning_score,
        seed=seed,
        reveal_computer_hand=reveal,
    )

    print("Playing against the computer...")

    try:
        winner = game.play_game()
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted by user")
        return {'interrupted': True}

    return {
        'winner': game.players[winner].name,
        'scores': {p.name: p.score for p in game.players.values()},
        'rounds_played': game.current_round
    }


def run_simulation(num_games: int, seed: Optional[int] = None,
                   winning_score: int = WINNING_SCORE) -> dict:
    """Play bot-only matches and summarise the results."""
    if num_games < 1:
        raise ValueError("Need at least one game to simulate")

    player_wins = np.zeros(num_games, dtype=bool)
    rounds = np.zeros(num_games, dtype=int)

    for i in range(num_games):
        game_seed = None if seed is None else seed + i
        game = TrucoGame(
            create_bot_player('random', Side.PLAYER, game_seed),
            create_bot_player('last', Side.COMPUTER),
            winning_score=winning_score,
            seed=game_seed,
            quiet=True,
        )
        player_wins[i] = game.play_game() is Side.PLAYER
        rounds[i] = game.current_round

    return {
        'games': num_games,
        'player_wins': int(player_wins.sum()),
        'computer_wins': int(num_games - player_wins.sum()),
        'player_win_rate': float(player_wins.mean()),
        'mean_rounds': float(rounds.mean()),
        'std_rounds': float(rounds.std()),
    }


def main():
    parser = argparse.ArgumentParser(description="Play Truco against the computer")
    parser.add_argument('--seed', type=int, default=None,
                       help='Seed for the shuffles')
    parser.add_argument('--winning-score', type=int, default=WINNING_SCORE,
                       help='Points needed to win the match')
    parser.add_argument('--reveal', action='store_true',
                       help="Show the computer's hand after dealing")
    parser.add_argument('--simulate', type=int, metavar='N', default=None,
                       help='Play N matches between bots and print statistics')
    parser.add_argument('--log-file', default='truco_game.log',
                       help='File to write the game log to')
    parser.add_argument('--verbose', action='store_true',
                       help='Enable verbose logging')

    args = parser.parse_args()

    if args.winning_score < 1:
        parser.error("--winning-score must be at least 1")

    # Setup logging
    setup_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)

    print("🎴 Bora jogar um truco? 🎴")

    if args.simulate is not None:
        if args.simulate < 1:
            parser.error("--simulate needs at least one game")
        stats = run_simulation(args.simulate, args.seed, args.winning_score)
        print(f"Games played: {stats['games']}")
        print(f"RandomBot wins: {stats['player_wins']} ({stats['player_win_rate']:.1%})")
        print(f"Computer wins: {stats['computer_wins']}")
        print(f"Rounds per match: {stats['mean_rounds']:.1f} ± {stats['std_rounds']:.1f}")
        return

    result = run_interactive_game(args.seed, args.winning_score, args.reveal)

    if not result.get('interrupted'):
        print("\n✅ Final score: " + ", ".join(
            f"{name} {score}" for name, score in result['scores'].items()
        ))


if __name__ == "__main__":
    main()
