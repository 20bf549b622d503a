from __future__ import annotations

import logging
from typing import AbstractSet, Any, Dict, Mapping, MutableMapping, Optional


logger = logging.getLogger(__name__)


def compact(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``fields`` without the entries whose value is ``None``."""
    return {key: value for key, value in fields.items() if value is not None}


def hoist_params(
    payload: MutableMapping[str, Any],
    params: Optional[Mapping[str, Any]],
    *,
    reserved: AbstractSet[str] = frozenset(),
    owner: str = "payload",
) -> MutableMapping[str, Any]:
    """
    Merge pass-through params into ``payload`` as sibling fields.

    Args:
        payload: The serialized object the params are flattened into (mutated in place).
        params: Optional mapping of extra fields; ``None`` values are dropped.
        reserved: Field names params may never set, even when the field itself is absent.
        owner: Label used in log messages.

    Returns:
        The same ``payload`` mapping, for chaining.
    """
    for key, value in (params or {}).items():
        if value is None:
            continue
        if key in reserved or key in payload:
            logger.warning(f"{owner}: Ignoring param '{key}' (collides with a modeled field)")
            continue
        payload[key] = value
    return payload
