from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class MemberRole(str, Enum):
    ADMIN = "admin"
    MEMBER = "member"

    @classmethod
    def parse(cls, value: Any) -> "MemberRole":
        if isinstance(value, cls):
            return value
        normalized = str(value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"unknown member role: {value!r}") from None


@dataclass(frozen=True)
class Member:
    id: str
    name: str
    email: str
    role: MemberRole

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Member":
        return cls(
            id=str(payload["id"]),
            name=str(payload["name"]),
            email=str(payload["email"]),
            role=MemberRole.parse(payload["role"]),
        )

    def to_row(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "email": self.email, "role": self.role.value}

    def matches(self, query_text: str) -> bool:
        needle = query_text.lower()
        return needle in self.name.lower() or needle in self.email.lower()


@dataclass
class MemberDraft:
    """Editable copy of a member's mutable fields."""

    name: str
    email: str
    role: MemberRole

    EDITABLE_FIELDS = ("name", "email", "role")

    @classmethod
    def from_member(cls, member: Member) -> "MemberDraft":
        return cls(name=member.name, email=member.email, role=member.role)

    def set_field(self, field_name: str, value: Any) -> None:
        if field_name not in self.EDITABLE_FIELDS:
            raise ValueError(f"field {field_name!r} is not editable")
        if field_name == "role":
            self.role = MemberRole.parse(value)
            return
        setattr(self, field_name, str(value))
