"""CLI argument parsers and validators."""

from __future__ import annotations

from typing import Any

import typer

from ..sheet.context import parse_assignment, parse_overrides


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e


def parse_pairs(values: list[str], option: str) -> dict[str, Any]:
    """Parse repeated NAME=VALUE options, coercing the values."""
    try:
        return parse_overrides(values)
    except ValueError as e:
        raise typer.BadParameter(f"{option}: {e}") from e


def parse_literal_pairs(values: list[str], option: str) -> dict[str, str]:
    """Parse repeated KEY=VALUE options, keeping each value's text as given."""
    pairs: dict[str, str] = {}
    for item in values:
        try:
            key, raw = parse_assignment(item)
        except ValueError as e:
            raise typer.BadParameter(f"{option}: {e}") from e
        pairs[key] = raw
    return pairs
