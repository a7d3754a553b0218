from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class PaginationState:
    page: int = 1
    page_size: int = 10
    total_pages: int = 1

    @property
    def can_go_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def can_go_previous(self) -> bool:
        return self.page > 1


def total_pages_for(item_count: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be > 0")
    return max(math.ceil(item_count / page_size), 1)


def resize(state: PaginationState, item_count: int) -> PaginationState:
    state.total_pages = total_pages_for(item_count, state.page_size)
    state.page = max(1, min(state.page, state.total_pages))
    return state


def next_page(state: PaginationState) -> PaginationState:
    if state.can_go_next:
        state.page += 1
    return state


def prev_page(state: PaginationState) -> PaginationState:
    state.page = max(1, state.page - 1)
    return state


def goto_page(state: PaginationState, page: int) -> PaginationState:
    state.page = max(1, min(page, state.total_pages))
    return state


def first_page(state: PaginationState) -> PaginationState:
    state.page = 1
    return state


def last_page(state: PaginationState) -> PaginationState:
    state.page = state.total_pages
    return state
