"""CLI commands for printing Solitaire game states."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console

from solitaire.models.deal import deal_game
from solitaire.models.serialization import state_from_json, state_to_json
from solitaire.models.validator import InvalidGameStateError
from solitaire.ui.rich_display import RichDisplay

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def _display() -> RichDisplay:
    return RichDisplay(Console(file=sys.stdout))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Print Klondike Solitaire game states as text grids."""
    setup_logging(verbose)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def show(path: Path) -> None:
    """Print the grid for a game state JSON file.

    PATH is the path to a game state snapshot.
    """
    try:
        with open(path, encoding="utf-8") as f:
            state = state_from_json(f.read())
    except UnicodeDecodeError as e:
        click.echo(f"Error: Could not decode file: {e}", err=True)
        sys.exit(1)
    except json.JSONDecodeError as e:
        click.echo(f"Error: Invalid JSON file: {e}", err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Error: Could not read file: {e}", err=True)
        sys.exit(1)
    except ValidationError as e:
        click.echo(f"Error: Invalid game state structure: {e}", err=True)
        sys.exit(1)

    logger.debug(f"Loaded game state from {path}")

    try:
        _display().show(state, clear=False)
    except InvalidGameStateError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option("--seed", type=int, default=None, help="Random seed for the shuffle")
@click.option("--json", "as_json", is_flag=True, help="Print the JSON snapshot instead of the grid")
def deal(seed: Optional[int], as_json: bool) -> None:
    """Deal a new game and print it."""
    state = deal_game(seed)
    if as_json:
        click.echo(state_to_json(state))
        return
    _display().show(state, clear=False)


if __name__ == "__main__":
    cli()
