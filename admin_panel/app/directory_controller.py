from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from clients.members_sdk.config import SDKConfig
from clients.members_sdk.http_client import HttpClient
from clients.members_sdk.members_client import MembersClient

from admin_panel.app.application.state.directory_store import DirectoryStore, DirectoryView
from admin_panel.app.application.state.edit_session import EditSession
from admin_panel.app.application.use_cases.load_members_use_case import LoadMembersUseCase
from admin_panel.app.config import AppConfig
from admin_panel.app.domain.models.member import MemberDraft
from admin_panel.app.infrastructure.logging.logger import get_logger, log_action
from admin_panel.app.ui.forms import FormResult, validate_member_draft

LOADING_MESSAGE = "Loading"
EMPTY_RESULT_MESSAGE = "No results based on the search"


@dataclass(frozen=True)
class PanelStatus:
    loading: bool
    error: str | None
    empty_result: bool
    selected_count: int

    @property
    def message(self) -> str | None:
        if self.loading:
            return LOADING_MESSAGE
        if self.error:
            return self.error
        if self.empty_result:
            return EMPTY_RESULT_MESSAGE
        return None


class DirectoryController:
    def __init__(
        self,
        *,
        config: AppConfig | None = None,
        sdk_config: SDKConfig | None = None,
        http_client: HttpClient | None = None,
        members_client: MembersClient | None = None,
        store: DirectoryStore | None = None,
        edit_session: EditSession | None = None,
        loader: LoadMembersUseCase | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or AppConfig.from_env()
        self._logger = logger or get_logger("admin_panel.directory", self.config.logging_level)
        self.store = store or DirectoryStore(
            page_size=self.config.page_size,
            boundary_count=self.config.boundary_count,
            sibling_count=self.config.sibling_count,
            logger=self._logger,
        )
        self.edit_session = edit_session or EditSession()
        if loader is None:
            if members_client is None:
                members_client = MembersClient(http_client or HttpClient(config=sdk_config))
            loader = LoadMembersUseCase(members_client, self.store, logger=self._logger)
        self.loader = loader

    async def load(self) -> PanelStatus:
        await self.loader.execute()
        self._reconcile_edit()
        return self.status()

    def trigger_load(self) -> asyncio.Task:
        self.edit_session.reset()
        return self.loader.trigger()

    def abort_load(self) -> bool:
        return self.loader.abort()

    async def aclose(self) -> None:
        await self.loader.client.http_client.aclose()

    def unmount(self) -> None:
        self.loader.abort()
        self.edit_session.reset()
        self.store.initialize([])
        self._log("unmount", "success")

    def view(self) -> DirectoryView:
        return self.store.current_view()

    def status(self) -> PanelStatus:
        view = self.store.current_view()
        return PanelStatus(
            loading=self.loader.state.loading,
            error=self.loader.state.error,
            empty_result=view.is_empty_result,
            selected_count=view.selected_count,
        )

    def status_snapshot(self) -> dict[str, Any]:
        view = self.store.current_view()
        return {
            "loading": self.loader.state.loading,
            "error": self.loader.state.error,
            "query": view.query_text,
            "page": view.page,
            "total_pages": view.total_pages,
            "total_items": view.total_items,
            "selected": view.selected_count,
            "editing": self.edit_session.target_id,
        }

    def search(self, query_text: str) -> int:
        matches = self.store.search(query_text)
        self._reconcile_edit()
        self._log("search", "success", count=matches, page=self.store.page)
        return matches

    def select_one(self, member_id: str) -> bool:
        toggled = self.store.toggle_selection(member_id)
        self._log("select_one", "success" if toggled else "stale_reference", member_id=member_id)
        return toggled

    def select_page(self) -> bool:
        selected = self.store.toggle_select_page()
        self._log("select_page", "selected" if selected else "cleared", page=self.store.page)
        return selected

    def delete_one(self, member_id: str) -> bool:
        deleted = self.store.delete_one(member_id)
        self._reconcile_edit()
        self._log("delete_one", "success" if deleted else "stale_reference", member_id=member_id)
        return deleted

    def delete_selected(self) -> int:
        removed = self.store.delete_selected()
        self._reconcile_edit()
        self._log("delete_selected", "success" if removed else "noop", count=removed, page=self.store.page)
        return removed

    def begin_edit(self, member_id: str) -> bool:
        member = self.store.get(member_id)
        if member is None or member_id not in self.store.page_ids():
            self._log("begin_edit", "stale_reference", member_id=member_id)
            return False
        discarded = self.edit_session.begin_edit(member_id, MemberDraft.from_member(member))
        self._log("begin_edit", "success", member_id=member_id, discarded_id=discarded)
        return True

    def edit_field(self, field_name: str, value: Any) -> bool:
        return self.edit_session.field_change(field_name, value)

    def validate_edit(self) -> FormResult | None:
        if self.edit_session.draft is None:
            return None
        return validate_member_draft(self.edit_session.draft)

    def save_edit(self) -> bool:
        member_id = self.edit_session.target_id
        if member_id is None:
            return False
        saved = self.edit_session.save(self.store)
        self._reconcile_edit()
        self._log("save_edit", "success" if saved else "stale_reference", member_id=member_id)
        return saved

    def cancel_edit(self) -> bool:
        return self.edit_session.cancel()

    def go_to_page(self, page: int) -> int:
        return self._navigate("go_to_page", self.store.go_to_page, page)

    def next_page(self) -> int:
        return self._navigate("next_page", self.store.next_page)

    def previous_page(self) -> int:
        return self._navigate("previous_page", self.store.previous_page)

    def first_page(self) -> int:
        return self._navigate("first_page", self.store.first_page)

    def last_page(self) -> int:
        return self._navigate("last_page", self.store.last_page)

    def _navigate(self, action: str, move, *args: int) -> int:
        page = move(*args)
        self._reconcile_edit()
        self._log(action, "success", page=page)
        return page

    def _reconcile_edit(self) -> None:
        target_id = self.edit_session.target_id
        if target_id is None or target_id in self.store.page_ids():
            return
        self.edit_session.reset()
        self._log("edit_discarded", "left_page", member_id=target_id)

    def _log(self, action: str, outcome: str, **fields: Any) -> None:
        log_action(self._logger, "directory", action, outcome, **fields)
