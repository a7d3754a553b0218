from __future__ import annotations

import pytest

from admin_panel.app.domain.models.member import Member, MemberRole


def build_members(count: int) -> list[Member]:
    return [
        Member(
            id=str(index),
            name=f"User {index:02d}",
            email=f"user{index:02d}@example.com",
            role=MemberRole.ADMIN if index % 5 == 1 else MemberRole.MEMBER,
        )
        for index in range(1, count + 1)
    ]


@pytest.fixture
def members_25() -> list[Member]:
    return build_members(25)


@pytest.fixture
def member_factory():
    return build_members
