"""JSON snapshots of game states."""

from __future__ import annotations

import json
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from solitaire.models.state import Card, Deck, GameState, Rank, Suit

# Largest duration a timedelta can hold, in whole seconds
MAX_ELAPSED_SECONDS = int(timedelta.max.total_seconds())

# Alternative spellings accepted for ten
RANK_ALIASES = {"T": Rank.TEN, "10": Rank.TEN}


def parse_card(code: str) -> Card:
    """Parse '<suit><rank>' such as 'D6', 'SX' or 'H10'."""
    if len(code) < 2:
        raise ValueError(f"Invalid card code: {code!r}")
    suit_code, rank_code = code[0].upper(), code[1:].upper()
    try:
        suit = Suit(suit_code)
    except ValueError:
        raise ValueError(f"Unknown suit in card code: {code!r}") from None
    rank = RANK_ALIASES.get(rank_code)
    if rank is None:
        try:
            rank = Rank(rank_code)
        except ValueError:
            raise ValueError(f"Unknown rank in card code: {code!r}") from None
    return Card(suit=suit, rank=rank)


class ColumnSnapshot(BaseModel):
    """Tableau column with its face-down prefix length."""

    model_config = ConfigDict(extra="forbid")

    invisible_cards: int = Field(0, ge=0, description="Number of face-down cards")
    cards: list[str] = Field(default_factory=list)

    @field_validator("cards")
    @classmethod
    def check_cards(cls, cards: list[str]) -> list[str]:
        for code in cards:
            parse_card(code)
        return cards


class GameStateSnapshot(BaseModel):
    """Serialized game state."""

    model_config = ConfigDict(extra="forbid")

    score: int = 0
    moves: int = Field(0, ge=0)
    elapsed_seconds: int = Field(0, ge=0, le=MAX_ELAPSED_SECONDS)
    stock: list[str] = Field(default_factory=list)
    waste: list[str] = Field(default_factory=list)
    stack_piles: dict[str, list[str]]
    columns: dict[str, ColumnSnapshot]

    @field_validator("stock", "waste")
    @classmethod
    def check_pile(cls, cards: list[str]) -> list[str]:
        for code in cards:
            parse_card(code)
        return cards

    @field_validator("stack_piles")
    @classmethod
    def check_stacks(cls, stacks: dict[str, list[str]]) -> dict[str, list[str]]:
        for cards in stacks.values():
            for code in cards:
                parse_card(code)
        return stacks


def _deck(codes: list[str], invisible_cards: int = 0) -> Deck:
    return Deck(cards=tuple(parse_card(c) for c in codes), invisible_cards=invisible_cards)


def state_from_dict(data: dict[str, Any]) -> GameState:
    """Build a GameState from a snapshot dict.

    Raises:
        pydantic.ValidationError: if the snapshot does not match the schema
    """
    snapshot = GameStateSnapshot.model_validate(data)
    return GameState(
        stock=_deck(snapshot.stock),
        waste=_deck(snapshot.waste),
        stack_piles={name: _deck(cards) for name, cards in snapshot.stack_piles.items()},
        columns={
            name: _deck(column.cards, column.invisible_cards)
            for name, column in snapshot.columns.items()
        },
        score=snapshot.score,
        moves=snapshot.moves,
        elapsed=timedelta(seconds=snapshot.elapsed_seconds),
    )


def state_from_json(text: str) -> GameState:
    """Build a GameState from snapshot JSON text."""
    return state_from_dict(json.loads(text))


def state_to_dict(state: GameState) -> dict[str, Any]:
    """Convert a GameState to a snapshot dict."""
    snapshot = GameStateSnapshot(
        score=state.score,
        moves=state.moves,
        elapsed_seconds=int(state.elapsed.total_seconds()),
        stock=[str(c) for c in state.stock],
        waste=[str(c) for c in state.waste],
        stack_piles={name: [str(c) for c in deck] for name, deck in state.stack_piles.items()},
        columns={
            name: ColumnSnapshot(
                invisible_cards=deck.invisible_cards,
                cards=[str(c) for c in deck],
            )
            for name, deck in state.columns.items()
        },
    )
    return snapshot.model_dump()


def state_to_json(state: GameState, indent: int = 2) -> str:
    """Serialize a GameState to snapshot JSON text."""
    return json.dumps(state_to_dict(state), indent=indent, ensure_ascii=False)
