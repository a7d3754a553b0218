from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from admin_panel.app.domain.models.member import MemberDraft

if TYPE_CHECKING:
    from admin_panel.app.application.state.directory_store import DirectoryStore


class EditStatus(str, Enum):
    IDLE = "idle"
    EDITING = "editing"


class EditSession:
    """Inline edit of at most one member, addressed by id.

    Starting an edit on another member drops the current draft without
    saving. ``save`` commits the draft to the store once and returns to idle.
    """

    def __init__(self) -> None:
        self.target_id: str | None = None
        self.draft: MemberDraft | None = None

    @property
    def status(self) -> EditStatus:
        return EditStatus.IDLE if self.target_id is None else EditStatus.EDITING

    @property
    def is_active(self) -> bool:
        return self.target_id is not None

    def is_editing(self, member_id: str) -> bool:
        return self.target_id is not None and self.target_id == member_id

    def begin_edit(self, member_id: str, initial: MemberDraft) -> str | None:
        """Enter edit mode for ``member_id``; returns the id whose draft was discarded."""
        discarded = self.target_id if self.target_id not in (None, member_id) else None
        self.target_id = member_id
        self.draft = replace(initial)
        return discarded

    def field_change(self, field_name: str, value: Any) -> bool:
        if self.draft is None:
            return False
        self.draft.set_field(field_name, value)
        return True

    def save(self, store: DirectoryStore) -> bool:
        if self.target_id is None or self.draft is None:
            return False
        committed = store.edit_commit(self.target_id, self.draft)
        self.reset()
        return committed

    def cancel(self) -> bool:
        was_active = self.is_active
        self.reset()
        return was_active

    def reset(self) -> None:
        self.target_id = None
        self.draft = None
