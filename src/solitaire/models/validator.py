"""Game state validation to catch malformed snapshots before rendering."""

from datetime import timedelta
from typing import List, Mapping

from solitaire.models.state import Deck, GameState


class InvalidGameStateError(ValueError):
    """Raised when a game state fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("Invalid game state: " + "; ".join(errors))


class GameStateValidator:
    """Validates game state consistency."""

    @staticmethod
    def validate(state: GameState) -> List[str]:
        """Return list of validation errors (empty = valid).

        Besides negative face-down counts this rejects face-down counts
        larger than their pile, negative move counts, negative elapsed
        time, missing piles or pile mappings, and score, moves or elapsed
        of the wrong type. Score may be negative.
        """
        errors: List[str] = []

        piles: dict[str, Deck] = {"stock": state.stock, "waste": state.waste}
        for kind, group in (("stack", state.stack_piles), ("column", state.columns)):
            if group is None:
                errors.append(f"{kind} mapping is missing")
            else:
                piles.update(_named(group, kind))

        for label, deck in piles.items():
            if deck is None:
                errors.append(f"{label} is missing")
                continue
            if deck.invisible_cards < 0:
                errors.append(
                    f"{label} has negative face-down count {deck.invisible_cards}"
                )
            elif deck.invisible_cards > len(deck):
                errors.append(
                    f"{label} has {deck.invisible_cards} face-down cards "
                    f"but only holds {len(deck)}"
                )

        if not isinstance(state.score, int):
            errors.append(f"Score must be an integer, got {state.score!r}")

        if not isinstance(state.moves, int):
            errors.append(f"Move count must be an integer, got {state.moves!r}")
        elif state.moves < 0:
            errors.append(f"Move count must be non-negative, got {state.moves}")

        if not isinstance(state.elapsed, timedelta):
            errors.append(f"Elapsed time must be a timedelta, got {state.elapsed!r}")
        elif state.elapsed < timedelta(0):
            errors.append(f"Elapsed time must be non-negative, got {state.elapsed}")

        return errors

    @classmethod
    def check(cls, state: GameState) -> None:
        """Raise InvalidGameStateError if the state has any errors."""
        errors = cls.validate(state)
        if errors:
            raise InvalidGameStateError(errors)


def _named(piles: Mapping[str, Deck], kind: str) -> dict[str, Deck]:
    return {f"{kind} {name}": deck for name, deck in piles.items()}
