"""
Command line simulator: seats random bots and plays rounds.

    holdem-sim --players 6 --rounds 50 --seed 42
"""

import asyncio
import logging

import click

from .bots.random_bot import RandomBot
from .core.config import BlindSchedule, GameConfig
from .core.exceptions import PokerGameError
from .game.game import Game
from .game.recorder import HistoryRecorder


def build_game(players: int, starting_chips: int, small_blind: int, big_blind: int,
               seed=None, blind_increase_every: int = 5) -> Game:
    """Create a game with ``players`` random bots, seeded from ``seed`` when given."""
    config = GameConfig(
        starting_chips=starting_chips,
        small_blind=small_blind,
        big_blind=big_blind,
        random_seed=seed,
        blind_schedule=BlindSchedule(increase_every=blind_increase_every),
    )
    game = Game(config, recorder=HistoryRecorder())
    for bot_id in range(1, players + 1):
        bot_seed = None if seed is None else seed + bot_id
        game.add_bot(RandomBot(bot_id, f"Bot {bot_id}", seed=bot_seed))
    return game


@click.command()
@click.option('--players', type=click.IntRange(2, 10), default=4, show_default=True,
              help='Number of random bots to seat.')
@click.option('--rounds', type=click.IntRange(min=1), default=None,
              help='Stop after this many rounds (default: play until one player remains).')
@click.option('--starting-chips', type=click.IntRange(min=1), default=1000, show_default=True)
@click.option('--small-blind', type=click.IntRange(min=1), default=5, show_default=True)
@click.option('--big-blind', type=click.IntRange(min=2), default=10, show_default=True)
@click.option('--blind-increase-every', type=click.IntRange(min=0), default=5, show_default=True,
              help='Rounds between blind increases, 0 to keep blinds fixed.')
@click.option('--seed', type=int, default=None, help='Seed for a reproducible game.')
@click.option('--save-history/--no-save-history', default=False, show_default=True,
              help='Write the game history as JSON.')
@click.option('--log-dir', type=click.Path(file_okay=False), default='logs', show_default=True)
@click.option('-v', '--verbose', count=True, help='-v for round narration, -vv for every action.')
def main(players, rounds, starting_chips, small_blind, big_blind, blind_increase_every,
         seed, save_history, log_dir, verbose):
    """Simulate No-Limit Texas Hold'em between random bots."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(level=level, format='%(message)s')

    try:
        game = build_game(players, starting_chips, small_blind, big_blind, seed,
                          blind_increase_every)
    except PokerGameError as e:
        raise click.BadParameter(str(e))

    try:
        result = asyncio.run(game.start_game(
            max_rounds=rounds, save_history=save_history, log_dir=log_dir
        ))
    except PokerGameError as e:
        raise click.ClickException(f"Game aborted: {e}")

    click.echo(f"Rounds played: {result.rounds_played}")
    for player in result.standings:
        click.echo(f"  {player.name}: {player.chips}")
    click.echo(f"Winner(s): {', '.join(result.winners)}")
    if result.history_path is not None:
        click.echo(f"History saved to {result.history_path}")


if __name__ == "__main__":
    main()
