"""Compact page-number window for the pagination bar.

The window always shows ``boundary_count`` pages at each end and a block of
``sibling_count`` pages on each side of the current page. Skipped runs of two
or more pages collapse into a single gap token; a skipped run of exactly one
page is shown as that page instead, so the bar never reads ``1 ... 3``.
"""

from __future__ import annotations

from dataclasses import dataclass

GAP_LABEL = "..."


@dataclass(frozen=True)
class PageToken:
    page: int | None
    selected: bool = False

    @property
    def is_gap(self) -> bool:
        return self.page is None

    @property
    def label(self) -> str:
        return GAP_LABEL if self.page is None else str(self.page)


GAP = PageToken(page=None)


def page_range(start: int, end: int) -> list[int]:
    if start > end:
        return []
    return list(range(start, end + 1))


def compute_page_window(
    current_page: int,
    total_pages: int,
    boundary_count: int = 1,
    sibling_count: int = 1,
) -> list[PageToken]:
    if total_pages < 1:
        raise ValueError("total_pages must be >= 1")
    if boundary_count < 0 or sibling_count < 0:
        raise ValueError("boundary_count and sibling_count must be >= 0")

    start_pages = page_range(1, min(boundary_count, total_pages))
    end_pages = page_range(max(total_pages - boundary_count + 1, boundary_count + 1), total_pages)

    # The sibling block keeps its full width near either end by shifting inward.
    siblings_start = max(
        min(current_page - sibling_count, total_pages - boundary_count - sibling_count * 2 - 1),
        boundary_count + 1,
    )
    siblings_end = min(
        max(current_page + sibling_count, boundary_count + sibling_count * 2 + 2),
        total_pages - boundary_count,
    )

    pages: list[int | None] = list(start_pages)
    if siblings_start <= siblings_end:
        pages.extend(_bridge(boundary_count, siblings_start))
        pages.extend(page_range(siblings_start, siblings_end))
        pages.extend(_bridge(siblings_end, total_pages - boundary_count + 1))
    else:
        pages.extend(_bridge(len(start_pages), end_pages[0] if end_pages else total_pages + 1))
    pages.extend(end_pages)

    return [GAP if page is None else PageToken(page=page, selected=page == current_page) for page in pages]


def _bridge(last_shown: int, next_shown: int) -> list[int | None]:
    """Fill the run strictly between two shown pages: nothing, one page, or a gap."""
    skipped = next_shown - last_shown - 1
    if skipped <= 0:
        return []
    if skipped == 1:
        return [last_shown + 1]
    return [None]
