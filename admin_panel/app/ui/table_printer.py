from __future__ import annotations

from admin_panel.app.application.state.directory_store import DirectoryRow, DirectoryView
from admin_panel.app.domain.models.member import MemberDraft

HEADERS = ("", "id", "Name", "Email", "Role")
EMPTY_VALUE = "—"


def row_cells(row: DirectoryRow, draft: MemberDraft | None = None) -> tuple[str, ...]:
    """Cells for one rendered row; a draft replaces the stored values and marks the row with ``*``."""
    member = row.member
    marker = "[x]" if row.selected else "[ ]"
    name, email, role = member.name, member.email, member.role.value
    if draft is not None:
        marker = f"{marker}*"
        name, email, role = draft.name, draft.email, draft.role.value
    return (marker, member.id, name.strip() or EMPTY_VALUE, email.strip() or EMPTY_VALUE, role)


def print_directory(view: DirectoryView, editing_id: str | None = None, draft: MemberDraft | None = None) -> None:
    header = "[x]" if view.page_selected else "[ ]"
    print(f"\nAdmin Panel {header} page {view.page}/{view.total_pages}")
    if not view.rows:
        print("(no rows)")
        return

    lines = [
        row_cells(row, draft if row.member.id == editing_id else None)
        for row in view.rows
    ]
    widths = [max(len(HEADERS[idx]), *(len(cells[idx]) for cells in lines)) for idx in range(len(HEADERS))]
    print(" | ".join(title.ljust(width) for title, width in zip(HEADERS, widths)))
    print("-+-".join("-" * width for width in widths))
    for cells in lines:
        print(" | ".join(cell.ljust(width) for cell, width in zip(cells, widths)))


def format_pagination_bar(view: DirectoryView) -> str:
    parts = ["<<" if view.can_go_first else "  ", "<" if view.can_go_previous else " "]
    for token in view.page_window:
        parts.append(f"[{token.label}]" if token.selected else token.label)
    parts.append(">" if view.can_go_next else " ")
    parts.append(">>" if view.can_go_last else "  ")
    return " ".join(parts)
