"""Exceptions raised while assembling and rendering model configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class RomsConfError(Exception):
    """Base class for all romsconf errors."""


class SheetError(RomsConfError):
    """Raised when a parameter sheet cannot be built or loaded."""


class TemplateKeyError(RomsConfError):
    """Raised when sheet keys do not line up with template assignments."""

    def __init__(self, message: str, keys: Iterable[str]) -> None:
        super().__init__(message)
        self.keys = tuple(keys)


class MissingKeyError(TemplateKeyError):
    """A parameter sheet key has no matching assignment in the template."""

    def __init__(self, keys: Iterable[str], template_path: Path | None = None) -> None:
        keys = tuple(keys)
        where = f" in {template_path}" if template_path else ""
        super().__init__(f"No assignment found{where} for: {', '.join(keys)}", keys)


class DuplicateKeyError(TemplateKeyError):
    """A parameter sheet key matches more than one template assignment."""

    def __init__(self, keys: Iterable[str], template_path: Path | None = None) -> None:
        keys = tuple(keys)
        where = f" in {template_path}" if template_path else ""
        super().__init__(
            f"Multiple assignments found{where} for: {', '.join(keys)}", keys
        )


class UnreadableTemplateError(RomsConfError):
    """The template file cannot be opened or decoded."""


class UnwritableOutputError(RomsConfError):
    """The rendered configuration cannot be written to its destination."""
