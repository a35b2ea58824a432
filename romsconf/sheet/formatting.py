"""Conversion of sheet values to the text written after ``KEY ==``."""

from __future__ import annotations

from typing import Sequence

from ..core.models import ContinuationStyle, SheetValue


def format_scalar(value: bool | int | float | str) -> str:
    """Return the literal text for a scalar value.

    Strings are taken as already formatted. Booleans become Fortran
    logicals, numbers use Python's shortest round-tripping form.
    """
    if isinstance(value, bool):
        return "T" if value else "F"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def join_file_list(
    files: Sequence[str],
    style: ContinuationStyle | None = None,
    *,
    indent: str = "",
    newline: str = "\n",
) -> str:
    """Join file names into a backslash-continued block.

    Args:
        files: File names, in order
        style: Marker and indent of the continuation lines
        indent: Indent used when the style leaves it unset
        newline: Line terminator placed between entries

    Returns:
        The joined value; the last entry carries no continuation marker
    """
    if not files:
        raise ValueError("Cannot join an empty file list")
    style = style or ContinuationStyle()
    prefix = style.indent if style.indent is not None else indent
    return (style.marker + newline + prefix).join(files)


def format_value(
    value: SheetValue,
    style: ContinuationStyle | None = None,
    *,
    indent: str = "",
    newline: str = "\n",
) -> str:
    """Return the text for any sheet value, joining file lists as needed."""
    if isinstance(value, (tuple, list)):
        return join_file_list(value, style, indent=indent, newline=newline)
    return format_scalar(value)
