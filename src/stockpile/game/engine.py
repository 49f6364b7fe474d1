"""Game state machine driven by commands."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Optional

from stockpile.cards.card import Card
from stockpile.game.channel import Channel, ChannelClosedError
from stockpile.game.commands import Command, Draw, GetState, Move, Place
from stockpile.game.config import DRAW_COUNT, GameConfig
from stockpile.game.state import State

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutcome:
    """What a command did to the table."""

    command: Command
    moved: int = 0  # Cards that reached their destination
    lost: int = 0  # Cards discarded (strict mode, bad destination)
    dealt: int = 0  # Cards dealt into the tableau
    published: bool = False


class Game:
    """Owns the game state and applies commands to it.

    The game is the only thing that mutates its State. Observers get deep
    copies through the state channel (GetState) or ``snapshot()``.

    Bad stack indices and short stacks are not errors: the command does as
    much as it can and the outcome reports what happened.
    """

    def __init__(
        self,
        tx: Optional[Channel[State]] = None,
        config: Optional[GameConfig] = None,
        state: Optional[State] = None,
    ):
        """Initialize game.

        Args:
            tx: Channel that receives state snapshots (None: no observer)
            config: Game configuration (defaults if None)
            state: Starting state (a fresh table if None)
        """
        self.config = config or GameConfig()
        self.tx = tx
        self._state = state if state is not None else State.new(rng=self.config.make_rng())

        if self.config.shuffle:
            self._state.deck.shuffle()
            logger.info(f"Shuffled stock with seed {self.config.seed}")

    def snapshot(self) -> State:
        return self._state.snapshot()

    def run_command(self, command: Command) -> CommandOutcome:
        """Apply one command to the state."""
        if isinstance(command, Draw):
            outcome = self._draw(command)
        elif isinstance(command, Move):
            outcome = self._move(command)
        elif isinstance(command, Place):
            outcome = self._place(command)
        elif isinstance(command, GetState):
            outcome = self._publish(command)
        else:
            raise TypeError(f"Unknown command: {command!r}")

        logger.debug(f"{command} -> {outcome}")
        return outcome

    def _deal(self) -> int:
        """Deal i + 1 cards into stack i for every stack."""
        dealt = 0
        for i, stack in enumerate(self._state.stacks):
            cards = self._state.deck.draw_many(i + 1)
            stack.extend(cards)
            dealt += len(cards)
        return dealt

    def _draw(self, command: Draw) -> CommandOutcome:
        dealt = 0
        if self._state.deck.is_full():
            dealt = self._deal()
            logger.info(f"Dealt {dealt} cards into the tableau")

        cards = self._state.deck.draw_many(DRAW_COUNT)
        self._state.unplaced.extend(cards)
        return CommandOutcome(command, moved=len(cards), dealt=dealt)

    def _stack(self, index: int) -> Optional[deque[Card]]:
        stacks = self._state.stacks
        if 0 <= index < len(stacks):
            return stacks[index]
        return None

    def _move(self, command: Move) -> CommandOutcome:
        source = self._stack(command.src)
        if source is None:
            return CommandOutcome(command)

        # Build the run bottom-first so it lands in its original order
        run: deque[Card] = deque()
        for _ in range(command.amount):
            if not source:
                break
            run.appendleft(source.pop())

        if not run:
            return CommandOutcome(command)

        target = self._stack(command.dest)
        if target is None:
            if self.config.restore_on_invalid_destination:
                source.extend(run)
                return CommandOutcome(command)
            logger.warning(f"Discarded {len(run)} cards moved to missing stack {command.dest}")
            return CommandOutcome(command, lost=len(run))

        moved = len(run)
        before = len(target)
        while run:
            target.append(run.popleft())
        assert len(target) == before + moved, "move dropped cards in transit"
        return CommandOutcome(command, moved=moved)

    def _place(self, command: Place) -> CommandOutcome:
        target = self._stack(command.stack)
        if target is None or not self._state.unplaced:
            return CommandOutcome(command)

        target.append(self._state.unplaced.pop())
        return CommandOutcome(command, moved=1)

    def _publish(self, command: GetState) -> CommandOutcome:
        if self.tx is None:
            logger.debug("No observer; snapshot dropped")
            return CommandOutcome(command)

        try:
            self.tx.send(self.snapshot())
        except ChannelClosedError:
            if self.config.strict_observer:
                raise
            logger.warning("State observer is gone; snapshot dropped")
            return CommandOutcome(command)

        return CommandOutcome(command, published=True)
