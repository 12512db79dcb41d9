"""Command-line interface for reading Magic: The Gathering card notation."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from mtg_notation import __version__
from mtg_notation.config import settings
from mtg_notation.domain.value_objects import ColorIdentity, ManaCost, TypeLine
from mtg_notation.exceptions import NotationError
from mtg_notation.models import CardFace

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else getattr(logging, settings.effective_log_level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Read and check Magic: The Gathering type lines and mana costs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    type_line_parser = subparsers.add_parser("type-line", help="Parse a type line")
    type_line_parser.add_argument("text", help="Type line (e.g., 'Legendary Creature — Elf')")
    type_line_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail if a subtype does not fit the card types",
    )

    mana_parser = subparsers.add_parser("mana-cost", help="Parse a mana cost")
    mana_parser.add_argument("text", help="Mana cost (e.g., '{2}{W/U}{G}')")

    compare_parser = subparsers.add_parser(
        "compare", help="Check whether two mana costs are equivalent"
    )
    compare_parser.add_argument("first", help="First mana cost")
    compare_parser.add_argument("second", help="Second mana cost")

    identity_parser = subparsers.add_parser(
        "color-identity", help="Parse a color identity"
    )
    identity_parser.add_argument("text", help="Color initials (e.g., 'GW') or 'C'")

    card_parser = subparsers.add_parser("card", help="Read a card face from a JSON file")
    card_parser.add_argument("path", type=Path, help="Path to the card JSON file")

    return parser


def _report_error(error: Exception) -> int:
    logger.debug("Notation error", exc_info=error)
    console.print(f"[red]✗[/red] {escape(str(error))}")
    return 1


def show_type_line(text: str, strict: bool) -> int:
    type_line = TypeLine.parse(text)

    table = Table(title=escape(str(type_line)))
    table.add_column("Part")
    table.add_column("Values")
    table.add_row("Supertypes", ", ".join(str(s) for s in type_line.supertypes))
    table.add_row("Types", ", ".join(str(t) for t in type_line.types))
    table.add_row("Subtypes", ", ".join(str(s) for s in type_line.subtypes))
    console.print(table)

    if type_line.is_valid():
        console.print("[green]✓[/green] Valid type line")
        return 0

    invalid = type_line.invalid_subtypes()
    if invalid:
        names = ", ".join(str(subtype) for subtype in invalid)
        console.print(f"[yellow]![/yellow] Subtypes without a matching type: {escape(names)}")
    else:
        console.print("[yellow]![/yellow] Type line has no card types")
    return 1 if strict else 0


def show_mana_cost(text: str) -> int:
    cost = ManaCost.parse(text)
    console.print(f"Mana cost: {escape(str(cost))}")
    console.print(f"Mana value: {cost.mana_value}")
    console.print(f"Colors: {cost.colors}")
    return 0


def compare_costs(first: str, second: str) -> int:
    first_cost = ManaCost.parse(first)
    second_cost = ManaCost.parse(second)

    if first_cost == second_cost:
        console.print(
            f"[green]✓[/green] {escape(str(first_cost))} is equivalent to {escape(str(second_cost))}"
        )
        return 0

    console.print(
        f"[yellow]≠[/yellow] {escape(str(first_cost))} differs from {escape(str(second_cost))}"
    )
    return 1


def show_color_identity(text: str) -> int:
    identity = ColorIdentity.parse(text)
    names = ", ".join(color.display_name for color in identity) or "Colorless"
    console.print(f"{identity} ({names})")
    return 0


def show_card(path: Path) -> int:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        return _report_error(
            ValueError(f"Card file: expected a JSON object, got {type(data).__name__}")
        )

    card = CardFace.from_dict(data)
    console.print(escape(str(card)))
    console.print(f"Mana value: {card.mana_value}")
    console.print(f"Colors: {card.colors}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "type-line":
            strict = settings.strict_type_lines if args.strict is None else args.strict
            return show_type_line(args.text, strict)
        if args.command == "mana-cost":
            return show_mana_cost(args.text)
        if args.command == "compare":
            return compare_costs(args.first, args.second)
        if args.command == "color-identity":
            return show_color_identity(args.text)
        if args.command == "card":
            return show_card(args.path)
    except (NotationError, ValidationError) as e:
        return _report_error(e)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Could not read card file: {e}")
        return 1

    return 1


if __name__ == "__main__":
    sys.exit(main())
