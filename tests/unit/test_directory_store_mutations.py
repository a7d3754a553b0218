import logging

from admin_panel.app.application.state.directory_store import DirectoryStore
from admin_panel.app.domain.models.member import MemberDraft, MemberRole


class CaptureHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def _store(members, logger=None) -> DirectoryStore:
    store = DirectoryStore(page_size=10, logger=logger)
    store.initialize(members)
    return store


def test_delete_selected_across_pages_clamps_current_page(members_25) -> None:
    store = _store(members_25)
    store.toggle_selection("1")
    store.go_to_page(3)
    store.toggle_select_page()
    selected = set(store.selected_ids)

    removed = store.delete_selected()

    assert removed == 6
    assert store.total_pages == 2
    assert store.page == 2
    assert store.selected_count == 0
    assert not selected & {member.id for member in store.members}
    assert len(store.members) == 19


def test_delete_selected_includes_rows_hidden_by_search(members_25) -> None:
    store = _store(members_25)
    store.toggle_selection("3")
    store.search("user2")
    store.toggle_select_page()

    removed = store.delete_selected()

    assert removed == 7
    assert store.get("3") is None
    assert store.filtered_members == []
    assert store.current_view().is_empty_result is True


def test_delete_selected_without_selection_is_noop(members_25) -> None:
    store = _store(members_25)

    assert store.delete_selected() == 0
    assert len(store.members) == 25


def test_delete_one_drops_selection_and_clamps(member_factory) -> None:
    store = _store(member_factory(11))
    store.toggle_selection("11")
    store.go_to_page(2)

    assert store.delete_one("11") is True

    assert store.selected_count == 0
    assert store.total_pages == 1
    assert store.page == 1
    assert store.get("11") is None


def test_delete_one_keeps_order_of_remaining(member_factory) -> None:
    store = _store(member_factory(4))

    store.delete_one("2")

    assert [member.id for member in store.members] == ["1", "3", "4"]


def test_edit_commit_replaces_fields_by_id(members_25) -> None:
    store = _store(members_25)

    committed = store.edit_commit("14", MemberDraft(name="Renamed", email="renamed@example.com", role=MemberRole.ADMIN))

    assert committed is True
    edited = store.get("14")
    assert edited.id == "14"
    assert edited.name == "Renamed"
    assert edited.email == "renamed@example.com"
    assert edited.role is MemberRole.ADMIN
    assert [member.id for member in store.members].index("14") == 13


def test_edit_commit_can_move_member_out_of_search(members_25) -> None:
    store = _store(members_25)
    store.search("user2")

    store.edit_commit("20", MemberDraft(name="Zed", email="zed@example.com", role=MemberRole.MEMBER))

    assert [member.id for member in store.filtered_members] == ["21", "22", "23", "24", "25"]


def test_stale_references_are_tolerated_and_logged(members_25) -> None:
    logger = logging.getLogger("admin_panel.test.store")
    logger.handlers = []
    logger.setLevel(logging.INFO)
    handler = CaptureHandler()
    logger.addHandler(handler)
    store = _store(members_25, logger=logger)
    store.delete_one("7")

    assert store.delete_one("7") is False
    assert store.edit_commit("7", MemberDraft(name="x", email="x@example.com", role=MemberRole.MEMBER)) is False
    assert store.toggle_selection("7") is False

    assert len(store.members) == 24
    assert len(handler.messages) == 3
    assert all('"outcome": "stale_reference"' in message for message in handler.messages)
