from admin_panel.app.application.state.directory_store import DirectoryStore


def _store(members) -> DirectoryStore:
    store = DirectoryStore(page_size=10)
    store.initialize(members)
    return store


def test_toggle_selection_flips_membership(members_25) -> None:
    store = _store(members_25)

    assert store.toggle_selection("3") is True
    assert store.selected_ids == {"3"}
    assert store.can_delete_selected is True

    assert store.toggle_selection("3") is True
    assert store.selected_count == 0
    assert store.can_delete_selected is False


def test_toggle_selection_ignores_ids_outside_filtered_list(members_25) -> None:
    store = _store(members_25)
    store.search("user2")

    assert store.toggle_selection("5") is False
    assert store.toggle_selection("missing") is False
    assert store.selected_count == 0


def test_select_page_is_scoped_to_visible_rows(members_25) -> None:
    store = _store(members_25)
    store.go_to_page(2)

    assert store.toggle_select_page() is True

    assert store.selected_ids == {str(index) for index in range(11, 21)}
    assert store.current_view().page_selected is True


def test_select_page_on_partial_page_selects_all_then_clears(members_25) -> None:
    store = _store(members_25)
    store.toggle_selection("2")
    store.toggle_selection("5")

    assert store.toggle_select_page() is True
    assert [row.selected for row in store.current_view().rows] == [True] * 10

    assert store.toggle_select_page() is False
    assert [row.selected for row in store.current_view().rows] == [False] * 10


def test_select_page_twice_from_fully_selected_page_round_trips(members_25) -> None:
    store = _store(members_25)
    store.toggle_select_page()
    before = [row.selected for row in store.current_view().rows]

    store.toggle_select_page()
    store.toggle_select_page()

    assert [row.selected for row in store.current_view().rows] == before == [True] * 10


def test_select_page_from_clean_state_round_trips(members_25) -> None:
    store = _store(members_25)
    before = [row.selected for row in store.current_view().rows]

    store.toggle_select_page()
    store.toggle_select_page()

    assert [row.selected for row in store.current_view().rows] == before


def test_select_page_on_empty_page_is_noop(members_25) -> None:
    store = _store(members_25)
    store.search("nobody")

    assert store.toggle_select_page() is False
    assert store.selected_count == 0


def test_selection_survives_page_change_and_search(members_25) -> None:
    store = _store(members_25)
    store.toggle_selection("1")

    store.go_to_page(3)
    store.search("user2")

    assert store.selected_ids == {"1"}
    assert store.selected_count == 1


def test_initialize_clears_selection(members_25, member_factory) -> None:
    store = _store(members_25)
    store.toggle_select_page()

    store.initialize(member_factory(3))

    assert store.selected_count == 0
