from __future__ import annotations

import uuid
from typing import Callable

IdFactory = Callable[[], str]


def new_id() -> str:
    """Unique opaque identifier for newly created entities."""
    return uuid.uuid4().hex
