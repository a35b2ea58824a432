"""Variable context used to evaluate parameter sheet expressions."""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Iterable, Mapping

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"^-?\d+$")
_FLOAT_PATTERN = re.compile(r"^-?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?$")


def coerce_value(value: str) -> bool | int | float | str:
    """Coerce a string value to its appropriate type.

    Args:
        value: String value to coerce

    Returns:
        Coerced value (bool, int, float, or str)
    """
    value_lower = value.lower()

    if value_lower in ("true", "false"):
        return value_lower == "true"

    if _INT_PATTERN.match(value):
        return int(value)

    if _FLOAT_PATTERN.match(value):
        return float(value)

    return value


def parse_assignment(value: str) -> tuple[str, str]:
    """Split ``NAME=VALUE`` into its parts.

    Raises:
        ValueError: The text has no ``=`` or an empty name
    """
    name, sep, raw = value.partition("=")
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"Must be NAME=VALUE, got: {value!r}")
    return name, raw


def parse_overrides(values: Iterable[str]) -> dict[str, Any]:
    """Parse repeated ``NAME=VALUE`` options into a coerced mapping."""
    overrides: dict[str, Any] = {}
    for item in values:
        name, raw = parse_assignment(item)
        overrides[name] = coerce_value(raw)
    return overrides


def build_context(overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build the base evaluation context.

    Returns:
        Context with the process environment under ``env`` plus *overrides*
    """
    logger.debug("Building base evaluation context from environment")

    context: dict[str, Any] = {"env": dict(os.environ)}
    context.update(overrides or {})

    return context
