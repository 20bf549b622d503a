"""Summarise a batch of save directives as a pandas DataFrame."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

import pandas as pd

from ..images.saved_image import SavedImage


logger = logging.getLogger(__name__)

MANIFEST_COLUMNS = [
    "image_identifier",
    "destination",
    "target",
    "quality",
    "save_metadata",
    "exif_headers",
    "params",
]


def _target(saved: SavedImage) -> str:
    if saved.s3_destination is not None:
        return f"{saved.s3_destination.bucket}/{saved.s3_destination.key}"
    if saved.azure_destination is not None:
        return saved.azure_destination.account_name
    return ""


def saves_to_frame(saved_images: Iterable[SavedImage]) -> pd.DataFrame:
    """
    Build one row per save directive.

    Signatures are never included; Azure rows only show the account name.

    Returns:
        DataFrame with ``MANIFEST_COLUMNS``; empty (but with columns) for no input.
    """
    rows: List[Dict[str, Any]] = []
    for saved in saved_images:
        rows.append(
            {
                "image_identifier": saved.image_identifier,
                "destination": saved.destination_kind,
                "target": _target(saved),
                "quality": saved.quality,
                "save_metadata": bool(saved.save_metadata),
                "exif_headers": len(saved.set_exif or {}),
                "params": len(saved.params or {}),
            }
        )

    if not rows:
        return pd.DataFrame(columns=MANIFEST_COLUMNS)

    df = pd.DataFrame(rows, columns=MANIFEST_COLUMNS)
    logger.info(f"Manifest covers {len(df)} save directive(s)")
    return df
