"""Domain models for parameter sheets and rendering configuration."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Iterator, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Order matters: pydantic tries exact type matches first, so bools stay bools.
SheetValue = Union[bool, int, float, str, tuple[str, ...]]

_INVALID_KEY = re.compile(r"[\s=!]")


class ContinuationStyle(BaseModel):
    """How a list of file names is joined into a continued value block."""

    model_config = ConfigDict(frozen=True)

    marker: str = Field(default=" \\", description="Text appended to continued lines")
    indent: str | None = Field(
        default=None,
        description="Prefix of continuation lines (None aligns under the value)",
    )


class ParameterSheet(BaseModel):
    """Ordered, immutable mapping of configuration key to value."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[tuple[str, SheetValue], ...] = Field(
        default=(), description="Key/value pairs in insertion order"
    )

    @field_validator("entries")
    @classmethod
    def _check_keys(
        cls, entries: tuple[tuple[str, SheetValue], ...]
    ) -> tuple[tuple[str, SheetValue], ...]:
        seen: set[str] = set()
        for key, _ in entries:
            if not key or _INVALID_KEY.search(key):
                raise ValueError(f"Invalid configuration key: {key!r}")
            if key in seen:
                raise ValueError(f"Duplicate configuration key: {key!r}")
            seen.add(key)
        return entries

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ParameterSheet:
        """Build a sheet from a mapping, keeping its iteration order."""
        return cls(entries=tuple(mapping.items()))

    def with_updates(self, updates: Mapping[str, Any]) -> ParameterSheet:
        """Return a new sheet with *updates* applied; new keys are appended."""
        merged = dict(self.entries)
        merged.update(updates)
        return ParameterSheet.from_mapping(merged)

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]

    def items(self) -> Iterator[tuple[str, SheetValue]]:
        return iter(self.entries)

    def get(self, key: str, default: Any = None) -> Any:
        for name, value in self.entries:
            if name == key:
                return value
        return default

    def __getitem__(self, key: str) -> SheetValue:
        for name, value in self.entries:
            if name == key:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)


class RenderTask(BaseModel):
    """A single template rendering task."""

    template_path: Path = Field(..., description="Template file path")
    output_path: Path = Field(..., description="Output file path")
    sheet: ParameterSheet = Field(..., description="Values to substitute")
    continuation: ContinuationStyle = Field(
        default_factory=ContinuationStyle, description="File list join format"
    )


class RenderConfig(BaseModel):
    """Configuration for the rendering process."""

    tasks: list[RenderTask] = Field(..., min_length=1, description="Render tasks")
    dest_root: Path = Field(
        default_factory=Path.cwd, description="Base output directory"
    )
    file_mode: int = Field(default=0o644, description="File permissions (octal)")
