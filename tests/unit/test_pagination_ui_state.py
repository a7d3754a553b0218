import pytest

from admin_panel.app.ui.pagination import (
    PaginationState,
    first_page,
    goto_page,
    last_page,
    next_page,
    prev_page,
    resize,
    total_pages_for,
)


def test_pagination_next_prev_goto_bounds() -> None:
    state = resize(PaginationState(page=1, page_size=10), item_count=25)
    assert state.total_pages == 3

    next_page(state)
    assert state.page == 2

    prev_page(state)
    assert state.page == 1

    prev_page(state)
    assert state.page == 1

    goto_page(state, 0)
    assert state.page == 1

    goto_page(state, 99)
    assert state.page == 3

    next_page(state)
    assert state.page == 3


def test_first_and_last_page() -> None:
    state = resize(PaginationState(page=2, page_size=10), item_count=45)

    assert last_page(state).page == 5
    assert first_page(state).page == 1


def test_resize_clamps_current_page_when_total_shrinks() -> None:
    state = resize(PaginationState(page=3, page_size=10), item_count=25)

    resize(state, item_count=19)

    assert state.total_pages == 2
    assert state.page == 2


def test_total_pages_is_at_least_one() -> None:
    assert total_pages_for(0, 10) == 1
    assert total_pages_for(10, 10) == 1
    assert total_pages_for(11, 10) == 2

    with pytest.raises(ValueError):
        total_pages_for(5, 0)
