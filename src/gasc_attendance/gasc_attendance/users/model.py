from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Signed-in profile kept in the ``users`` slot (at most one entry)."""

    id: str
    name: str
    email: str
    role: Role
    phone_number: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
        }
        if self.phone_number is not None:
            data["phoneNumber"] = self.phone_number
        return data

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "User":
        return cls(
            id=str(raw["id"]),
            name=raw.get("name", ""),
            email=raw.get("email", ""),
            role=Role(raw.get("role", Role.ADMIN.value)),
            phone_number=raw.get("phoneNumber"),
        )
