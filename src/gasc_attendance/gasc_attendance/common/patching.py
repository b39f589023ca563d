from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, TypeVar

T = TypeVar("T")


def apply_patch(entity: T, patch: Any) -> T:
    """Return a copy of ``entity`` with every non-None field of ``patch`` applied.

    Pure: neither argument is mutated. Patch fields that the entity does not
    have are ignored.
    """

    entity_fields = {f.name for f in fields(entity)}
    changes = {}
    for f in fields(patch):
        value = getattr(patch, f.name)
        if value is not None and f.name in entity_fields:
            changes[f.name] = value
    return replace(entity, **changes) if changes else entity
