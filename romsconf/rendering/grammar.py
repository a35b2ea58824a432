"""Line grammar of ``KEY == value`` model configuration files.

An assignment is an optionally indented key, ``==`` (or ``=``), and a value
that runs to the end of the line or to a trailing ``!`` comment. A value
ending in a backslash continues on the next line, so one assignment may span
several lines.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

_ASSIGNMENT = re.compile(
    r"^(?P<lead>[ \t]*)(?P<key>[^\s=!]+)(?P<gap>[ \t]*)(?P<op>==|=)"
    r"(?P<pad>[ \t]*)(?P<value>.*?)(?P<tail>[ \t]*(?:!.*)?)$"
)
_CONTINUATION = "\\"


@dataclass(frozen=True)
class Line:
    """A template line split into content and terminator."""

    content: str
    ending: str


@dataclass(frozen=True)
class Assignment:
    """A (possibly continued) assignment found in a template."""

    key: str
    start: int
    end: int
    lead: str
    gap: str
    op: str
    pad: str
    value: str
    tail: str

    @property
    def prefix(self) -> str:
        """Everything on the first line that precedes the value."""
        return f"{self.lead}{self.key}{self.gap}{self.op}{self.pad}"

    @property
    def value_indent(self) -> str:
        """Whitespace that lines text up under the first character of the value."""
        return re.sub(r"[^\t]", " ", self.prefix)

    @property
    def line_count(self) -> int:
        return self.end - self.start


def split_lines(text: str) -> list[Line]:
    """Split *text* into lines, keeping each line's terminator."""
    lines = []
    for raw in text.splitlines(keepends=True):
        content = raw.rstrip("\r\n")
        lines.append(Line(content=content, ending=raw[len(content) :]))
    return lines


def _continues(text: str) -> bool:
    return text.rstrip().endswith(_CONTINUATION)


def scan_assignments(lines: list[Line]) -> list[Assignment]:
    """Return every assignment in *lines*, in file order.

    Continuation lines belong to the assignment that opened them and are
    never parsed as assignments of their own.
    """
    found: list[Assignment] = []
    index = 0
    while index < len(lines):
        match = _ASSIGNMENT.match(lines[index].content)
        if match is None:
            index += 1
            continue

        value = match.group("value")
        end = index + 1
        continued = _continues(value)
        while continued and end < len(lines):
            value += "\n" + lines[end].content
            continued = _continues(lines[end].content)
            end += 1

        found.append(
            Assignment(
                key=match.group("key"),
                start=index,
                end=end,
                lead=match.group("lead"),
                gap=match.group("gap"),
                op=match.group("op"),
                pad=match.group("pad"),
                value=value,
                tail=match.group("tail"),
            )
        )
        index = end
    return found


def index_assignments(
    assignments: Iterable[Assignment], keys: Iterable[str]
) -> dict[str, list[Assignment]]:
    """Group assignments by key, limited to *keys* (every key is present)."""
    wanted: dict[str, list[Assignment]] = {key: [] for key in keys}
    for assignment in assignments:
        if assignment.key in wanted:
            wanted[assignment.key].append(assignment)
    return wanted
