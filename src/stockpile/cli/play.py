"""CLI command for playing on the terminal."""

from __future__ import annotations

import logging

import click

from stockpile.game.config import GameConfig
from stockpile.play.input import HELP_TEXT
from stockpile.play.session import PlaySession, SessionConfig

logger = logging.getLogger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--shuffle/--no-shuffle", default=False, help="Shuffle the stock before dealing")
@click.option(
    "--strict",
    is_flag=True,
    help="Reference behaviour: drop cards moved to a missing stack, stop if the display goes away",
)
@click.option("--delay", type=float, default=0.2, help="Seconds to wait after each command")
@click.option("--debug", is_flag=True, help="Show the next stock cards and the deck cursor")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    seed: int | None,
    shuffle: bool,
    strict: bool,
    delay: float,
    debug: bool,
    verbose: bool,
):
    """Play single-deck patience with typed commands."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    if strict:
        game_config = GameConfig.strict(seed=seed, shuffle=shuffle)
    else:
        game_config = GameConfig(seed=seed, shuffle=shuffle)

    config = SessionConfig(game=game_config, echo_delay=delay, debug=debug)

    click.echo(HELP_TEXT)
    click.echo(f"Seed: {game_config.seed} (use --seed {game_config.seed} to replay)")
    click.echo("")

    session = PlaySession(config, output_fn=click.echo)
    count = session.run()

    click.echo(f"\n{count} commands played. Bye!")


if __name__ == "__main__":
    main()
