"""
Command-line interface for playing against the minimax engine.
"""

import argparse
import logging

from minimax_engine.api import play_game
from minimax_engine.utils.config import Config, DEFAULT_GAME, GAMES
from minimax_engine.utils.factory import create_game


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play grid games against a depth-limited minimax engine"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default=DEFAULT_GAME,
        help=f"Game to play (default: {DEFAULT_GAME})",
    )
    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=None,
        help="Plies to search ahead (default: per game)",
    )
    parser.add_argument(
        "--no-pruning",
        action="store_true",
        help="Use plain minimax instead of alpha-beta (same moves, slower)",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="AI plays for all players (no human players)",
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        default=None,
        help="Comma-separated list of human player numbers (e.g., '1,2'). Overrides --self-play.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log search statistics",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )
    return parser.parse_args(argv)


def parse_human_players(players_str: str | None, num_players: int, game_id: str, self_play: bool) -> list[int]:
    """Parse and validate the human players argument."""
    if self_play and players_str is None:
        return []

    if players_str is None:
        return [1]  # Default: player 1 is human

    # Parse comma-separated values
    try:
        human_players = [int(p.strip()) for p in players_str.split(",") if p.strip()]
    except ValueError as e:
        raise ValueError(
            f"Invalid --players format: '{players_str}'. "
            "Expected comma-separated integers (e.g., '1,2')."
        ) from e

    # Validate player numbers
    invalid = [p for p in human_players if p < 1 or p > num_players]
    if invalid:
        raise ValueError(
            f"Invalid player number(s): {invalid}. {game_id} only supports players 1-{num_players}."
        )

    return sorted(set(human_players))


def configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv=None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    # Set up game
    game = create_game(args.game)
    players = list(range(1, game.num_players() + 1))

    # Determine human players; the engine plays everyone else
    human_players = parse_human_players(args.players, game.num_players(), game.game_id(), args.self_play)

    config = Config(
        game_name=args.game,
        depth=args.depth,
        use_pruning=not args.no_pruning,
        ai_players=[p for p in players if p not in human_players],
    )

    # Run
    play_game(game, config)


if __name__ == "__main__":
    main()
