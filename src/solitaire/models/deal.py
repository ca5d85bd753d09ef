"""Klondike opening deal."""

from __future__ import annotations

import logging
import random
from typing import Optional

from solitaire.models.state import (
    COLUMN_NAMES,
    STACK_NAMES,
    Card,
    Deck,
    GameState,
    Rank,
    Suit,
)

logger = logging.getLogger(__name__)


def new_deck() -> list[Card]:
    """Ordered 52-card deck."""
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]


def deal_game(seed: Optional[int] = None) -> GameState:
    """Shuffle and deal a new game.

    Column i (0-based) receives i + 1 cards of which the first i are
    face-down. The remaining 24 cards form the stock.
    """
    rng = random.Random(seed)
    cards = new_deck()
    rng.shuffle(cards)

    columns: dict[str, Deck] = {}
    for i, name in enumerate(COLUMN_NAMES):
        dealt, cards = cards[: i + 1], cards[i + 1 :]
        columns[name] = Deck(cards=tuple(dealt), invisible_cards=i)

    logger.debug(f"Dealt game with seed {seed}, {len(cards)} cards left in stock")

    return GameState(
        stock=Deck(cards=tuple(cards)),
        waste=Deck(),
        stack_piles={name: Deck() for name in STACK_NAMES},
        columns=columns,
    )
