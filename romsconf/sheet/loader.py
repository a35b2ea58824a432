"""Assembly of parameter sheets from YAML documents.

A sheet document has two mappings::

    variables:
      case: benguela
      dt: 300.0
      days: 30
    parameters:
      TITLE: "{{ case }} hindcast"
      DT: "{{ dt }}"
      NTIMES: "{{ (days * 86400 / dt) | int }}"
      FRCNAME:
        - "{{ case }}_frc.nc"
        - "{{ case }}_bulk.nc"

Strings holding Jinja2 expressions are evaluated with native types, so
``NTIMES`` above becomes an int. Other strings are kept verbatim.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml
from jinja2 import StrictUndefined, TemplateError
from jinja2.nativetypes import NativeEnvironment
from pydantic import ValidationError

from ..core.errors import SheetError
from ..core.models import ParameterSheet
from .context import build_context

logger = logging.getLogger(__name__)

_MARKERS = ("{{", "{%")

_environment = NativeEnvironment(undefined=StrictUndefined, autoescape=False)


def _is_expression(value: Any) -> bool:
    return isinstance(value, str) and any(marker in value for marker in _MARKERS)


def evaluate(value: Any, context: Mapping[str, Any]) -> Any:
    """Evaluate Jinja2 expressions in *value*, recursing into lists.

    Raises:
        SheetError: The expression is invalid or uses an undefined name
    """
    if isinstance(value, list):
        return [evaluate(item, context) for item in value]
    if not _is_expression(value):
        return value
    try:
        return _environment.from_string(value).render(**context)
    except TemplateError as e:
        raise SheetError(f"Cannot evaluate {value!r}: {e}") from e


def build_sheet(
    parameters: Mapping[str, Any],
    variables: Mapping[str, Any] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ParameterSheet:
    """Evaluate variables and parameters into a parameter sheet.

    Variables are evaluated in order, each seeing the ones before it. Entries
    of *overrides* replace same-named variables before evaluation.

    Args:
        parameters: Configuration keys and raw values
        variables: Named values available to expressions
        overrides: Caller-supplied variables that win over *variables*

    Returns:
        Immutable parameter sheet in the order of *parameters*
    """
    overrides = dict(overrides or {})
    context = build_context(overrides)
    for name, raw in (variables or {}).items():
        if name in overrides:
            continue
        context[name] = evaluate(raw, context)

    values = {key: evaluate(raw, context) for key, raw in parameters.items()}
    try:
        sheet = ParameterSheet.from_mapping(values)
    except ValidationError as e:
        raise SheetError(f"Invalid parameter sheet: {e}") from e

    logger.debug(f"Built parameter sheet with {len(sheet)} key(s)")
    return sheet


def load_sheet(
    path: Path, overrides: Mapping[str, Any] | None = None
) -> ParameterSheet:
    """Load a parameter sheet document from a YAML file.

    Args:
        path: YAML sheet document
        overrides: Variables that replace those defined in the document

    Returns:
        Evaluated parameter sheet
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise SheetError(f"Cannot read parameter sheet {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SheetError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise SheetError(f"Parameter sheet {path} must be a mapping")

    parameters = data.get("parameters")
    if not isinstance(parameters, dict):
        raise SheetError(f"Parameter sheet {path} is missing 'parameters' mapping")

    variables = data.get("variables") or {}
    if not isinstance(variables, dict):
        raise SheetError(f"'variables' in {path} must be a mapping")

    logger.info(f"Loading parameter sheet {path}")
    return build_sheet(parameters, variables, overrides)
