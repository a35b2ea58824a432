"""Core models and errors."""

from .errors import (
    DuplicateKeyError,
    MissingKeyError,
    RomsConfError,
    SheetError,
    TemplateKeyError,
    UnreadableTemplateError,
    UnwritableOutputError,
)
from .models import ContinuationStyle, ParameterSheet, RenderConfig, RenderTask

__all__ = [
    "ContinuationStyle",
    "DuplicateKeyError",
    "MissingKeyError",
    "ParameterSheet",
    "RenderConfig",
    "RenderTask",
    "RomsConfError",
    "SheetError",
    "TemplateKeyError",
    "UnreadableTemplateError",
    "UnwritableOutputError",
]
