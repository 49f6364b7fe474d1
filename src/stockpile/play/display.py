"""Terminal display for game state."""

from __future__ import annotations

from stockpile.cards.display import format_card, format_cards
from stockpile.cards.schema import Suit
from stockpile.game.state import State


class StateRenderer:
    """Renders a state snapshot to terminal text."""

    def render(self, state: State, debug: bool = False) -> str:
        """Render the whole table, one stack per line."""
        lines: list[str] = []

        lines.append(f"=== Stock: {state.deck.remaining} of {state.deck.size} cards ===")
        lines.append("")

        for i, stack in enumerate(state.stacks):
            lines.append(f"[{i}] {format_cards(stack)}")

        lines.append("")
        lines.append(f"Waste: {format_cards(state.unplaced)}")
        lines.append(f"Foundations: {self._render_foundations(state)}")

        if debug:
            lines.append("")
            lines.append("--- Debug Info ---")
            lines.append(f"Next in stock: {format_cards(state.deck.get_many(3), empty='(none)')}")
            lines.append(f"Cursor: {state.deck.top}")

        return "\n".join(lines)

    def _render_foundations(self, state: State) -> str:
        slots = []
        for suit, top in zip(Suit, state.foundations):
            slots.append(format_card(top) if top is not None else f"-{suit.value}")
        return "  ".join(slots)
