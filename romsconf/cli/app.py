"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import typer
from typing_extensions import Annotated

from ..core.errors import RomsConfError
from ..core.models import ContinuationStyle, ParameterSheet, RenderConfig, RenderTask
from ..rendering import engine
from ..rendering.grammar import scan_assignments, split_lines
from ..rendering.io import read_template_text
from ..settings import Settings
from ..sheet import loader
from .parsers import parse_file_mode, parse_literal_pairs, parse_pairs

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="romsconf",
    help="Render KEY == value model configuration files from parameter sheets.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def _parse_file_lists(values: list[str]) -> dict[str, list[str]]:
    lists: dict[str, list[str]] = {}
    for key, raw in parse_literal_pairs(values, "--file-list").items():
        files = [item.strip() for item in raw.split(",") if item.strip()]
        if not files:
            raise typer.BadParameter(f"--file-list: {key} has no file names")
        lists[key] = files
    return lists


@app.command()
def render(
    template: Annotated[
        Path,
        typer.Option("--template", "-t", help="Configuration template.", metavar="FILE"),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Rendered configuration file.", metavar="FILE"),
    ],
    sheet_path: Annotated[
        Optional[Path],
        typer.Option("--sheet", "-s", help="YAML parameter sheet.", metavar="FILE"),
    ] = None,
    assignments: Annotated[
        list[str],
        typer.Option(
            "--set",
            help="Set configuration KEY to the literal text VALUE (after the sheet). Repeatable.",
            metavar="KEY=VALUE",
        ),
    ] = [],
    file_lists: Annotated[
        list[str],
        typer.Option(
            "--file-list",
            help="Set KEY to a continued list of files (comma separated). Repeatable.",
            metavar="KEY=FILE,...",
        ),
    ] = [],
    variables: Annotated[
        list[str],
        typer.Option(
            "--var",
            help="Override a sheet variable. Repeatable.",
            metavar="NAME=VALUE",
        ),
    ] = [],
    dest_root: Annotated[
        str,
        typer.Option(
            "--dest-root",
            help="Base directory for a relative output path (default: cwd).",
            metavar="DIR",
        ),
    ] = "",
    file_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="File permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = "",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render a configuration template with a parameter sheet."""
    _configure_logging(verbose)
    settings = Settings()

    overrides = parse_pairs(variables, "--var")
    updates: dict[str, Any] = parse_literal_pairs(assignments, "--set")
    updates.update(_parse_file_lists(file_lists))
    mode = parse_file_mode(file_mode or settings.file_mode)

    if dest_root:
        dest_path = Path(dest_root)
    else:
        dest_path = settings.dest_root or Path.cwd()

    try:
        if sheet_path is not None:
            sheet = loader.load_sheet(sheet_path, overrides)
        else:
            sheet = ParameterSheet()
        sheet = sheet.with_updates(updates)
    except (RomsConfError, ValueError) as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    if len(sheet) == 0:
        logger.warning("Parameter sheet is empty; template is copied unchanged")

    config = RenderConfig(
        tasks=[
            RenderTask(
                template_path=template,
                output_path=output,
                sheet=sheet,
                continuation=settings.continuation_style(),
            )
        ],
        dest_root=dest_path,
        file_mode=mode,
    )

    try:
        outputs = engine.render_all(config)
    except RomsConfError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    logger.debug(f"Completed: {len(outputs)} file(s) rendered")


@app.command()
def keys(
    template: Annotated[
        Path,
        typer.Option("--template", "-t", help="Configuration template.", metavar="FILE"),
    ],
) -> None:
    """List the assignments found in a configuration template."""
    try:
        text = read_template_text(template)
    except RomsConfError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e

    for assignment in scan_assignments(split_lines(text)):
        value = " ".join(
            part.strip().rstrip("\\").strip() for part in assignment.value.split("\n")
        )
        typer.echo(f"{assignment.key} {assignment.op} {value}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
