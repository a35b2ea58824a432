"""romsconf - parameter-sheet renderer for KEY == value model configuration files."""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core.errors import (
    DuplicateKeyError,
    MissingKeyError,
    RomsConfError,
    UnreadableTemplateError,
    UnwritableOutputError,
)
from .core.models import ContinuationStyle, ParameterSheet
from .rendering.engine import render, render_to_file

# Re-export main CLI entry point
from .cli import main

__all__ = [
    "ContinuationStyle",
    "DuplicateKeyError",
    "MissingKeyError",
    "ParameterSheet",
    "RomsConfError",
    "UnreadableTemplateError",
    "UnwritableOutputError",
    "main",
    "render",
    "render_to_file",
]
