"""Monospace text rendering of Klondike Solitaire game states."""

from solitaire.models.state import Card, Deck, GameState, Rank, Suit
from solitaire.ui.display import GridRenderer, render_state

__all__ = [
    "Card",
    "Deck",
    "GameState",
    "Rank",
    "Suit",
    "GridRenderer",
    "render_state",
]
