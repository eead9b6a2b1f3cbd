from __future__ import annotations
from typing import Any, Optional
from uuid import UUID


def parse_store_id(raw: Any) -> Optional[UUID]:
    """Return `raw` as a store identifier, or None when it is not a well-formed one."""
    if isinstance(raw, UUID):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return UUID(raw)
    except ValueError:
        return None
