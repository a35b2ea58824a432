"""Template rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import DuplicateKeyError, MissingKeyError
from ..core.models import (
    ContinuationStyle,
    ParameterSheet,
    RenderConfig,
    RenderTask,
    SheetValue,
)
from ..sheet.formatting import format_value
from .grammar import Assignment, Line, index_assignments, scan_assignments, split_lines
from .io import atomic_write_text, read_template_text

logger = logging.getLogger(__name__)


def _match_keys(
    lines: list[Line], sheet: ParameterSheet, template_path: Path | None
) -> dict[int, tuple[Assignment, str]]:
    """Map the first line of each targeted assignment to its key.

    Raises:
        MissingKeyError: A sheet key has no assignment
        DuplicateKeyError: A sheet key has several assignments
    """
    matches = index_assignments(scan_assignments(lines), sheet.keys())

    missing = [key for key, found in matches.items() if not found]
    if missing:
        raise MissingKeyError(missing, template_path)
    duplicated = [key for key, found in matches.items() if len(found) > 1]
    if duplicated:
        raise DuplicateKeyError(duplicated, template_path)

    return {found[0].start: (found[0], key) for key, found in matches.items()}


def _substitute(
    assignment: Assignment,
    lines: list[Line],
    value: SheetValue,
    style: ContinuationStyle | None,
) -> str:
    first, last = lines[assignment.start], lines[assignment.end - 1]
    text = format_value(
        value,
        style,
        indent=assignment.value_indent,
        newline=first.ending or last.ending or "\n",
    )
    logger.debug(f"{assignment.key}: {assignment.value!r} -> {text!r}")
    return f"{assignment.prefix}{text}{assignment.tail}{last.ending}"


def render_text(
    text: str,
    sheet: ParameterSheet,
    style: ContinuationStyle | None = None,
    template_path: Path | None = None,
) -> str:
    """Substitute sheet values into template text.

    Args:
        text: Template text
        sheet: Values to substitute, one assignment per key
        style: Join format of file list values
        template_path: Template location, used in error messages

    Returns:
        Rendered text; lines outside the substituted assignments are unchanged
    """
    lines = split_lines(text)
    targets = _match_keys(lines, sheet, template_path)

    out: list[str] = []
    index = 0
    while index < len(lines):
        if index not in targets:
            out.append(lines[index].content + lines[index].ending)
            index += 1
            continue

        assignment, key = targets[index]
        out.append(_substitute(assignment, lines, sheet[key], style))
        index = assignment.end

    return "".join(out)


def render(
    template_path: Path,
    sheet: ParameterSheet,
    style: ContinuationStyle | None = None,
) -> str:
    """Render a template file with a parameter sheet.

    Args:
        template_path: Path to the template file
        sheet: Values to substitute
        style: Join format of file list values

    Returns:
        Rendered configuration text
    """
    text = read_template_text(template_path)
    return render_text(text, sheet, style, template_path)


def render_to_file(
    template_path: Path,
    sheet: ParameterSheet,
    output_path: Path,
    style: ContinuationStyle | None = None,
    file_mode: int = 0o644,
) -> Path:
    """Render a template and atomically write the result to *output_path*."""
    rendered_text = render(template_path, sheet, style)
    atomic_write_text(output_path, rendered_text, mode=file_mode)
    return output_path


def render_task(task: RenderTask, dest_root: Path, file_mode: int) -> Path:
    """Render a single template task.

    Args:
        task: Render task to execute
        dest_root: Base directory for relative paths
        file_mode: File permissions

    Returns:
        Output file path
    """
    logger.debug(f"Rendering template: {task.template_path}")

    output_path = task.output_path
    if not output_path.is_absolute():
        output_path = dest_root / output_path

    render_to_file(
        task.template_path, task.sheet, output_path, task.continuation, file_mode
    )
    logger.info(
        f"Rendered {task.template_path} → {output_path} ({len(task.sheet)} key(s))"
    )

    return output_path


def render_all(config: RenderConfig) -> list[Path]:
    """Render all configured templates.

    Args:
        config: Render configuration

    Returns:
        List of output file paths
    """
    logger.info(f"Rendering {len(config.tasks)} template(s)")

    outputs = [
        render_task(task, config.dest_root, config.file_mode) for task in config.tasks
    ]

    logger.info(f"Successfully rendered {len(outputs)} file(s)")
    return outputs
