"""pagination unit tests."""

import pytest

from msigs_client import PaginationInfo, get_pagination_info


def test_first_page() -> None:
    info = get_pagination_info(offset=0, limit=10, total=50, more=True)
    assert info == PaginationInfo(
        current_page=1,
        page_size=10,
        total_results=50,
        total_pages=5,
        has_more=True,
        has_previous=False,
        next_offset=10,
        previous_offset=None,
    )


def test_middle_page() -> None:
    info = get_pagination_info(offset=10, limit=10, total=50, more=True)
    assert info.current_page == 2
    assert info.has_more is True
    assert info.has_previous is True
    assert info.next_offset == 20
    assert info.previous_offset == 0


def test_last_page() -> None:
    info = get_pagination_info(offset=40, limit=10, total=50, more=False)
    assert info.current_page == 5
    assert info.has_more is False
    assert info.has_previous is True
    assert info.next_offset is None
    assert info.previous_offset == 30


def test_unaligned_offset() -> None:
    info = get_pagination_info(offset=5, limit=10, total=23, more=True)
    assert info.current_page == 1
    assert info.total_pages == 3
    assert info.previous_offset == 0
    assert info.next_offset == 15


def test_more_is_taken_from_service() -> None:
    # offset + limit < total, but the service says there is nothing further
    info = get_pagination_info(offset=0, limit=10, total=50, more=False)
    assert info.has_more is False
    assert info.next_offset is None


def test_zero_total() -> None:
    info = get_pagination_info(offset=0, limit=10, total=0, more=False)
    assert info.total_pages == 0
    assert info.current_page == 1


def test_zero_limit_is_undefined() -> None:
    with pytest.raises(ZeroDivisionError):
        get_pagination_info(offset=0, limit=0, total=10, more=False)
