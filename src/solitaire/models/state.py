"""Immutable Klondike game state representation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import timedelta
from enum import Enum
from typing import Iterator, Mapping


class Suit(Enum):
    """Card suit, valued by its single-letter code."""

    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]


class Rank(Enum):
    """Card rank, valued by its single-glyph short form (ten is X)."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "X"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"


SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♧",
    Suit.SPADES: "♤",
}


@dataclass(frozen=True)
class Card:
    """Immutable playing card."""

    suit: Suit
    rank: Rank

    def short_string(self) -> str:
        """Two-glyph display form, e.g. '♦ 6'."""
        return f"{self.suit.symbol} {self.rank.value}"

    def __str__(self) -> str:
        return f"{self.suit.value}{self.rank.value}"


@dataclass(frozen=True)
class Deck:
    """Ordered pile of cards, top = last.

    The first ``invisible_cards`` cards are face-down. Only tableau
    columns use a non-zero count.
    """

    cards: tuple[Card, ...] = ()
    invisible_cards: int = 0

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    @property
    def top(self) -> Card | None:
        return self.cards[-1] if self.cards else None


STACK_NAMES = ("SA", "SB", "SC", "SD")
COLUMN_NAMES = ("A", "B", "C", "D", "E", "F", "G")


def _empty_piles(names: tuple[str, ...]) -> dict[str, Deck]:
    return {name: Deck() for name in names}


@dataclass(frozen=True)
class GameState:
    """Snapshot of a Klondike game.

    ``stack_piles`` and ``columns`` are iterated in insertion order, which
    is the left-to-right display order.
    """

    stock: Deck = field(default_factory=Deck)
    waste: Deck = field(default_factory=Deck)
    stack_piles: Mapping[str, Deck] = field(
        default_factory=lambda: _empty_piles(STACK_NAMES)
    )
    columns: Mapping[str, Deck] = field(
        default_factory=lambda: _empty_piles(COLUMN_NAMES)
    )
    score: int = 0
    moves: int = 0
    elapsed: timedelta = timedelta(0)

    def copy_with(self, **changes) -> "GameState":  # type: ignore
        """Create a new state with specified changes."""
        return replace(self, **changes)

    def __str__(self) -> str:
        return f"{self.moves} moves played in {format_elapsed(self.elapsed)} for {self.score} points"


def format_elapsed(elapsed: timedelta) -> str:
    """Format a duration as mm:ss, or h:mm:ss from one hour up."""
    total = int(elapsed.total_seconds())
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"
