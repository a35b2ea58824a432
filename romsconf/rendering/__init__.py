"""Substitution of parameter sheets into configuration templates."""

from .engine import render, render_all, render_task, render_text, render_to_file

__all__ = ["render", "render_all", "render_task", "render_text", "render_to_file"]
