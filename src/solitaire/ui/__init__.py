"""Terminal display for game states."""

from solitaire.ui.display import GridRenderer, card_or_absent, pad_and_append
from solitaire.ui.rich_display import RichDisplay

__all__ = [
    "GridRenderer",
    "RichDisplay",
    "card_or_absent",
    "pad_and_append",
]
