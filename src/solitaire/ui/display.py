"""Monospace text grid rendering of a Klondike game state.

Example output::

    0 moves played in 00:29 for 0 points

       O (24)                  SA      SB      SC      SD
       ♤ 9                     _ _     _ _     _ _     _ _

        A       B       C       D       E       F       G
     0 ♦ 6     ? ?     ? ?     ? ?     ? ?     ? ?     ? ?
     1         ♤ 8     ? ?     ? ?     ? ?     ? ?     ? ?
     2                 ♦ 7     ? ?     ? ?     ? ?     ? ?
     3                         ♤ 6     ? ?     ? ?     ? ?
     4                                 ♤ K     ? ?     ? ?
     5                                         ♧ 2     ? ?
     6                                                 ♥ 6
     7
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from solitaire.models.state import Deck, GameState
from solitaire.models.validator import GameStateValidator

logger = logging.getLogger(__name__)

# 8 columns in 64 chars, leaves room on an 80 char terminal
COLUMN_WIDTH = 8
FIRST_COLUMN_WIDTH = 3
RESERVED_COLUMNS = 2

EMPTY_PILE = "_ _"
HIDDEN_CARD = "? ?"


def pad_and_append(builder: List[str], text: str, width: int) -> None:
    """Append ``text`` as one cell of ``width`` characters.

    Single-character text gets one leading space so it lines up with
    two-glyph card strings. Longer text is never truncated.
    """
    if len(text) == 1:
        text = " " + text
    builder.append(text.ljust(width))


def card_or_absent(deck: Deck, index: int) -> Optional[str]:
    """Short form of the card at ``index``, or None when out of bounds."""
    if 0 <= index < len(deck):
        return deck[index].short_string()
    return None


class GridRenderer:
    """Renders a game state as a fixed-width text grid."""

    def render(self, state: GameState) -> str:
        """Render ``state`` for monospace terminal printing."""
        GameStateValidator.check(state)

        builder: List[str] = []

        # Summary line: moves, time and score
        builder.append(f"{state}\n\n")

        # Stock header, reserved columns, one header per stack
        pad_and_append(builder, "", FIRST_COLUMN_WIDTH)
        pad_and_append(builder, f"O ({len(state.stock) + len(state.waste)})", COLUMN_WIDTH)
        self._reserved(builder)
        for name in state.stack_piles:
            pad_and_append(builder, name, COLUMN_WIDTH)
        builder.append("\n")

        # Top stock card, reserved columns, top card of every stack
        pad_and_append(builder, "", FIRST_COLUMN_WIDTH)
        pad_and_append(builder, self._top_or_empty(state.stock), COLUMN_WIDTH)
        self._reserved(builder)
        for stack in state.stack_piles.values():
            pad_and_append(builder, self._top_or_empty(stack), COLUMN_WIDTH)
        builder.append("\n\n")

        # Column headers
        pad_and_append(builder, "", FIRST_COLUMN_WIDTH)
        for name in state.columns:
            pad_and_append(builder, name, COLUMN_WIDTH)
        builder.append("\n")

        columns = list(state.columns.values())
        depth = max((len(column) for column in columns), default=0)
        logger.debug(f"Rendering {len(columns)} columns, tableau depth {depth}")

        # Rows 0..depth-1 hold cards; row `depth` is blank and ends the grid
        for row in range(depth + 1):
            self._row_label(builder, row)
            has_cards = self._print_row(builder, columns, row)
            if not has_cards:
                break
            builder.append("\n")

        builder.append("\n")
        return "".join(builder)

    def _print_row(self, builder: List[str], columns: Iterable[Deck], row: int) -> bool:
        """Append one tableau row. Returns whether any column had a card there."""
        has_cards = False
        for column in columns:
            if row < column.invisible_cards:
                card_string: Optional[str] = HIDDEN_CARD
            else:
                card_string = card_or_absent(column, row)
            if card_string is not None:
                has_cards = True
            pad_and_append(builder, card_string or "", COLUMN_WIDTH)
        return has_cards

    @staticmethod
    def _row_label(builder: List[str], row: int) -> None:
        pad_and_append(builder, f"{row:>{FIRST_COLUMN_WIDTH - 1}}", FIRST_COLUMN_WIDTH)

    @staticmethod
    def _reserved(builder: List[str]) -> None:
        # Blank spacing between the stock and the stacks
        for _ in range(RESERVED_COLUMNS):
            pad_and_append(builder, "", COLUMN_WIDTH)

    @staticmethod
    def _top_or_empty(deck: Deck) -> str:
        top = card_or_absent(deck, len(deck) - 1)
        return top if top is not None else EMPTY_PILE


def render_state(state: GameState) -> str:
    """Render ``state`` with a default GridRenderer."""
    return GridRenderer().render(state)
