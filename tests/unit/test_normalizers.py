import pytest

from clients.members_sdk.errors import ApiError
from clients.members_sdk.normalizers import normalize_member_rows

ROW = {"id": "1", "name": "Aaron Miles", "email": "aaron@mailinator.com", "role": "member"}


def test_plain_list_is_accepted() -> None:
    assert normalize_member_rows([ROW]) == [ROW]


@pytest.mark.parametrize("key", ["data", "items", "rows", "members"])
def test_wrapped_lists_are_unwrapped(key: str) -> None:
    assert normalize_member_rows({key: [ROW], "total": 1}) == [ROW]


def test_values_are_coerced_to_strings() -> None:
    rows = normalize_member_rows([{**ROW, "id": 12}])

    assert rows[0]["id"] == "12"


@pytest.mark.parametrize(
    "payload",
    [
        {"message": "nope"},
        "members",
        [ROW, "not-a-row"],
        [{"id": "2", "name": "No Email", "role": "admin"}],
    ],
)
def test_unexpected_shapes_raise_invalid_payload(payload) -> None:
    with pytest.raises(ApiError) as excinfo:
        normalize_member_rows(payload)

    assert excinfo.value.code == "INVALID_PAYLOAD"
    assert excinfo.value.message == "Error while fetching the data"
