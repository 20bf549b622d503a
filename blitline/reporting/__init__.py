"""Tabular summaries of save directives."""

from .manifest import MANIFEST_COLUMNS, saves_to_frame

__all__ = [
    "MANIFEST_COLUMNS",
    "saves_to_frame",
]
