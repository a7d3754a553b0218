from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from admin_panel.app.domain.models.member import Member, MemberDraft, MemberRole
from admin_panel.app.domain.pagination.page_window import PageToken, compute_page_window
from admin_panel.app.domain.pagination.partition import slice_page
from admin_panel.app.infrastructure.logging.logger import get_logger, log_action
from admin_panel.app.ui import pagination
from admin_panel.app.ui.pagination import PaginationState

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class DirectoryRow:
    member: Member
    selected: bool


@dataclass(frozen=True)
class DirectoryView:
    rows: list[DirectoryRow]
    page: int
    page_size: int
    total_pages: int
    total_items: int
    query_text: str
    page_window: list[PageToken]
    selected_count: int

    @property
    def page_selected(self) -> bool:
        return bool(self.rows) and all(row.selected for row in self.rows)

    @property
    def is_empty_result(self) -> bool:
        return bool(self.query_text) and self.total_items == 0

    @property
    def can_go_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def can_go_previous(self) -> bool:
        return self.page > 1

    @property
    def can_go_first(self) -> bool:
        return self.can_go_previous

    @property
    def can_go_last(self) -> bool:
        return self.can_go_next


class DirectoryStore:
    """Single owner of the member list and every state derived from it.

    The canonical list is only changed through ``initialize``, ``delete_one``,
    ``delete_selected`` and ``edit_commit``. The filtered list, the page slice
    and the page window are recomputed from it on demand, and the current page
    is clamped after every change so it never points past the last page.
    Selected ids always refer to members present in the canonical list.
    """

    def __init__(
        self,
        page_size: int = DEFAULT_PAGE_SIZE,
        boundary_count: int = 1,
        sibling_count: int = 1,
        logger: logging.Logger | None = None,
    ) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be > 0")
        if boundary_count < 0 or sibling_count < 0:
            raise ValueError("boundary_count and sibling_count must be >= 0")
        self.boundary_count = boundary_count
        self.sibling_count = sibling_count
        self._logger = logger or get_logger(__name__)
        self._members: list[Member] = []
        self._query_text = ""
        self._selected_ids: set[str] = set()
        self._pagination = PaginationState(page=1, page_size=page_size)

    @property
    def members(self) -> tuple[Member, ...]:
        return tuple(self._members)

    @property
    def query_text(self) -> str:
        return self._query_text

    @property
    def page(self) -> int:
        return self._pagination.page

    @property
    def page_size(self) -> int:
        return self._pagination.page_size

    @property
    def total_pages(self) -> int:
        return self._pagination.total_pages

    @property
    def selected_ids(self) -> frozenset[str]:
        return frozenset(self._selected_ids)

    @property
    def selected_count(self) -> int:
        return len(self._selected_ids)

    @property
    def can_delete_selected(self) -> bool:
        return self.selected_count > 0

    @property
    def filtered_members(self) -> list[Member]:
        if not self._query_text:
            return list(self._members)
        return [member for member in self._members if member.matches(self._query_text)]

    def get(self, member_id: str) -> Member | None:
        return next((member for member in self._members if member.id == member_id), None)

    def initialize(self, members: Iterable[Member]) -> None:
        self._members = list(members)
        self._query_text = ""
        self._selected_ids.clear()
        self._pagination.page = 1
        self._resize()

    def search(self, query_text: str) -> int:
        self._query_text = query_text or ""
        return self._resize()

    def page_members(self) -> list[Member]:
        filtered = self.filtered_members
        pagination.resize(self._pagination, len(filtered))
        return slice_page(filtered, self._pagination.page - 1, self._pagination.page_size)

    def page_ids(self) -> list[str]:
        return [member.id for member in self.page_members()]

    def page_window(self) -> list[PageToken]:
        return compute_page_window(
            self._pagination.page,
            self._pagination.total_pages,
            boundary_count=self.boundary_count,
            sibling_count=self.sibling_count,
        )

    def current_view(self) -> DirectoryView:
        filtered = self.filtered_members
        pagination.resize(self._pagination, len(filtered))
        visible = slice_page(filtered, self._pagination.page - 1, self._pagination.page_size)
        return DirectoryView(
            rows=[DirectoryRow(member=member, selected=member.id in self._selected_ids) for member in visible],
            page=self._pagination.page,
            page_size=self._pagination.page_size,
            total_pages=self._pagination.total_pages,
            total_items=len(filtered),
            query_text=self._query_text,
            page_window=self.page_window(),
            selected_count=len(self._selected_ids),
        )

    def go_to_page(self, page: int) -> int:
        self._resize()
        return pagination.goto_page(self._pagination, page).page

    def next_page(self) -> int:
        self._resize()
        return pagination.next_page(self._pagination).page

    def previous_page(self) -> int:
        self._resize()
        return pagination.prev_page(self._pagination).page

    def first_page(self) -> int:
        return pagination.first_page(self._pagination).page

    def last_page(self) -> int:
        self._resize()
        return pagination.last_page(self._pagination).page

    def toggle_selection(self, member_id: str) -> bool:
        if not any(member.id == member_id for member in self.filtered_members):
            self._stale("toggle_selection", member_id)
            return False
        if member_id in self._selected_ids:
            self._selected_ids.discard(member_id)
        else:
            self._selected_ids.add(member_id)
        return True

    def toggle_select_page(self) -> bool:
        """Select every row on the current page, or clear them if all are selected.

        Returns whether the page rows end up selected.
        """
        ids = self.page_ids()
        if not ids:
            return False
        if all(member_id in self._selected_ids for member_id in ids):
            self._selected_ids.difference_update(ids)
            return False
        self._selected_ids.update(ids)
        return True

    def delete_selected(self) -> int:
        if not self._selected_ids:
            return 0
        before = len(self._members)
        self._members = [member for member in self._members if member.id not in self._selected_ids]
        self._selected_ids.clear()
        self._resize()
        return before - len(self._members)

    def delete_one(self, member_id: str) -> bool:
        index = self._index_of(member_id)
        if index is None:
            self._stale("delete_one", member_id)
            return False
        del self._members[index]
        self._selected_ids.discard(member_id)
        self._resize()
        return True

    def edit_commit(self, member_id: str, draft: MemberDraft) -> bool:
        index = self._index_of(member_id)
        if index is None:
            self._stale("edit_commit", member_id)
            return False
        self._members[index] = replace(
            self._members[index],
            name=draft.name,
            email=draft.email,
            role=MemberRole.parse(draft.role),
        )
        # An edit can move the member in or out of the active search.
        self._resize()
        return True

    def _index_of(self, member_id: str) -> int | None:
        return next((index for index, member in enumerate(self._members) if member.id == member_id), None)

    def _resize(self) -> int:
        filtered_count = len(self.filtered_members)
        pagination.resize(self._pagination, filtered_count)
        return filtered_count

    def _stale(self, action: str, member_id: str) -> None:
        log_action(self._logger, "directory", action, "stale_reference", member_id=member_id)
