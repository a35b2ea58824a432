"""File I/O operations for rendering."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from ..core.errors import UnreadableTemplateError, UnwritableOutputError

logger = logging.getLogger(__name__)


def read_template_text(path: Path) -> str:
    """Read a template without translating its line endings.

    Args:
        path: Template file path

    Returns:
        Template text, byte-for-byte as UTF-8 decoded
    """
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableTemplateError(f"Cannot read template {path}: {e}") from e


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    The destination is either left untouched or fully replaced.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    try:
        ensure_parent(path)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    except OSError as e:
        raise UnwritableOutputError(f"Cannot write {path}: {e}") from e

    try:
        try:
            handle = os.fdopen(fd, "w", encoding="utf-8", newline="")
        except Exception:
            os.close(fd)
            raise
        with handle as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except OSError as e:
        raise UnwritableOutputError(f"Cannot write {path}: {e}") from e
    finally:
        if os.path.exists(tmp_name):
            try:
                os.remove(tmp_name)
            except OSError:
                logger.warning(f"Could not remove temporary file {tmp_name}")
