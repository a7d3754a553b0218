from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from admin_panel.app.domain.models.member import MemberDraft, MemberRole

EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MAX_TEXT_LENGTH = 255


@dataclass
class FormResult:
    values: dict[str, Any]
    field_errors: dict[str, str]

    @property
    def first_invalid_field(self) -> str | None:
        return next(iter(self.field_errors), None)

    @property
    def is_valid(self) -> bool:
        return len(self.field_errors) == 0


def _normalize_required_text(value: str | None) -> str:
    return (value or "").strip()


def validate_member_draft(draft: MemberDraft) -> FormResult:
    name = _normalize_required_text(draft.name)
    email = _normalize_required_text(draft.email)
    field_errors: dict[str, str] = {}

    if not name:
        field_errors["name"] = "Name is required."
    elif len(name) > MAX_TEXT_LENGTH:
        field_errors["name"] = f"Name cannot exceed {MAX_TEXT_LENGTH} characters."

    if not email:
        field_errors["email"] = "Email is required."
    elif not EMAIL_REGEX.match(email):
        field_errors["email"] = "Email format is invalid."

    try:
        role = MemberRole.parse(draft.role)
    except ValueError:
        role = None
        field_errors["role"] = "Role must be admin or member."

    return FormResult(values={"name": name, "email": email, "role": role}, field_errors=field_errors)
