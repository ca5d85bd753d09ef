"""Tests for JSON snapshots."""

import json
from datetime import timedelta

import pytest
from pydantic import ValidationError
from solitaire.models.serialization import (
    MAX_ELAPSED_SECONDS,
    parse_card,
    state_from_dict,
    state_from_json,
    state_to_dict,
    state_to_json,
)
from solitaire.models.state import Card, Rank, Suit
from solitaire.models.deal import deal_game


def make_snapshot() -> dict:
    """Snapshot matching the docstring example in the display module."""
    return {
        "score": 0,
        "moves": 0,
        "elapsed_seconds": 29,
        "stock": ["H2", "S9"],
        "waste": [],
        "stack_piles": {"SA": [], "SB": [], "SC": [], "SD": []},
        "columns": {
            "A": {"invisible_cards": 0, "cards": ["D6"]},
            "B": {"invisible_cards": 1, "cards": ["C3", "S8"]},
            "C": {"invisible_cards": 2, "cards": ["C4", "C5", "D7"]},
        },
    }


class TestParseCard:
    """Tests for card codes."""

    def test_basic_codes(self):
        """Suit letter then rank glyph."""
        assert parse_card("D6") == Card(Suit.DIAMONDS, Rank.SIX)
        assert parse_card("sk") == Card(Suit.SPADES, Rank.KING)

    @pytest.mark.parametrize("code", ["HX", "HT", "H10"])
    def test_ten_aliases(self, code):
        """Ten accepts X, T and 10."""
        assert parse_card(code) == Card(Suit.HEARTS, Rank.TEN)

    @pytest.mark.parametrize("code", ["", "H", "Z5", "H1", "H11"])
    def test_invalid_codes(self, code):
        """Unknown codes raise ValueError."""
        with pytest.raises(ValueError):
            parse_card(code)


class TestStateFromDict:
    """Tests for loading snapshots."""

    def test_loads_piles(self):
        """Snapshot fields map onto the state."""
        state = state_from_dict(make_snapshot())

        assert len(state.stock) == 2
        assert state.stock.top == Card(Suit.SPADES, Rank.NINE)
        assert list(state.stack_piles) == ["SA", "SB", "SC", "SD"]
        assert list(state.columns) == ["A", "B", "C"]
        assert state.columns["C"].invisible_cards == 2
        assert state.elapsed == timedelta(seconds=29)

    def test_negative_face_down_rejected(self):
        """Schema rejects negative face-down counts."""
        data = make_snapshot()
        data["columns"]["A"]["invisible_cards"] = -1

        with pytest.raises(ValidationError):
            state_from_dict(data)

    def test_unknown_card_rejected(self):
        """Schema rejects bad card codes."""
        data = make_snapshot()
        data["stock"].append("Q9")

        with pytest.raises(ValidationError):
            state_from_dict(data)

    def test_missing_columns_rejected(self):
        """Columns are required."""
        data = make_snapshot()
        del data["columns"]

        with pytest.raises(ValidationError):
            state_from_dict(data)

    def test_elapsed_upper_bound(self):
        """Largest representable elapsed time loads; one more second is rejected."""
        data = make_snapshot()
        data["elapsed_seconds"] = MAX_ELAPSED_SECONDS
        assert state_from_dict(data).elapsed.days == 999999999

        data["elapsed_seconds"] = MAX_ELAPSED_SECONDS + 1
        with pytest.raises(ValidationError):
            state_from_dict(data)

    def test_unknown_field_rejected(self):
        """Extra fields are not allowed."""
        data = make_snapshot()
        data["hint"] = "move A to B"

        with pytest.raises(ValidationError):
            state_from_dict(data)


class TestStateToDict:
    """Tests for dumping snapshots."""

    def test_dump_matches_snapshot(self):
        """Loading then dumping keeps the snapshot content."""
        data = make_snapshot()
        assert state_to_dict(state_from_dict(data)) == data

    def test_dealt_game_survives_json(self):
        """A dealt game can be written and read back."""
        state = deal_game(seed=7)
        assert state_from_json(state_to_json(state)) == state

    def test_json_is_valid(self):
        """state_to_json emits parseable JSON."""
        parsed = json.loads(state_to_json(deal_game(seed=1)))
        assert set(parsed["columns"]) == set("ABCDEFG")
