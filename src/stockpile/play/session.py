"""Interactive play session: control loop, game worker and display worker."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from stockpile.game.channel import Channel, ChannelClosedError
from stockpile.game.commands import Command
from stockpile.game.config import GameConfig
from stockpile.game.engine import Game
from stockpile.game.state import State
from stockpile.play.display import StateRenderer
from stockpile.play.input import CommandReader

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for a play session."""

    game: GameConfig = field(default_factory=GameConfig)
    prompt: str = "> "
    echo_delay: float = 0.2  # Seconds to wait after each command so output lands before the prompt
    debug: bool = False


class PlaySession:
    """Runs a game behind two worker threads.

    The game worker is the only thread that touches the Game. It applies
    commands from the command channel in the order they were sent. The
    display worker renders every snapshot arriving on the state channel.
    The calling thread reads player input and forwards parsed commands.
    """

    def __init__(
        self,
        config: SessionConfig,
        output_fn: Callable[[str], None] = print,
        reader: Optional[CommandReader] = None,
    ):
        """Initialize session."""
        self.config = config
        self.output_fn = output_fn
        self.reader = reader or CommandReader()
        self.renderer = StateRenderer()

        self.commands: Channel[Command] = Channel("command")
        self.states: Channel[State] = Channel("state")
        self.game = Game(self.states, config.game)

        self.submitted = 0
        self._game_thread: Optional[threading.Thread] = None
        self._display_thread: Optional[threading.Thread] = None

    def _game_loop(self) -> None:
        try:
            for command in self.commands:
                self.game.run_command(command)
        except ChannelClosedError:
            logger.exception("Game worker stopped: state observer is gone")

    def _display_loop(self) -> None:
        try:
            for state in self.states:
                self.output_fn(self.renderer.render(state, self.config.debug))
        except Exception:
            logger.exception("Display worker stopped")
            # Later snapshots are dropped by the game instead of piling up
            self.states.close()

    def start(self) -> None:
        """Start both workers. Calling twice is a no-op."""
        if self._game_thread is not None:
            return

        self._game_thread = threading.Thread(target=self._game_loop, name="game", daemon=True)
        self._display_thread = threading.Thread(target=self._display_loop, name="display", daemon=True)
        self._game_thread.start()
        self._display_thread.start()
        logger.info(f"Session started (seed {self.config.game.seed})")

    def submit(self, command: Command) -> None:
        """Queue a command for the game worker."""
        self.commands.send(command)
        self.submitted += 1

    def stop(self, timeout: Optional[float] = None) -> None:
        """Finish pending commands and snapshots, then stop both workers."""
        self.commands.close()
        if self._game_thread is not None:
            self._game_thread.join(timeout)

        self.states.close()
        if self._display_thread is not None:
            self._display_thread.join(timeout)

        logger.info(f"Session stopped after {self.submitted} commands")

    def run(self) -> int:
        """Read commands until the player quits.

        Returns:
            Number of commands sent to the game
        """
        self.start()
        try:
            while True:
                result = self.reader.read(self.config.prompt)

                if result.quit:
                    break

                if result.error:
                    self.output_fn(result.error)
                    continue

                if result.command is None:
                    continue

                self.submit(result.command)
                if self.config.echo_delay > 0:
                    time.sleep(self.config.echo_delay)
        finally:
            self.stop()

        return self.submitted

    def __enter__(self) -> "PlaySession":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
