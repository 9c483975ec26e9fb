import pytest

from flashdeck.application.common.pagination import MAX_PAGE_SIZE, PaginatedResult, Pagination


def test_offset_and_limit() -> None:
    pagination = Pagination(page=3, page_size=10)

    assert pagination.offset == 20
    assert pagination.limit == 10


@pytest.mark.parametrize(
    ("page", "page_size"), [(0, 10), (1, 0), (1, MAX_PAGE_SIZE + 1)]
)
def test_invalid_pagination(page: int, page_size: int) -> None:
    with pytest.raises(ValueError):
        Pagination(page=page, page_size=page_size)


def test_total_pages_rounds_up() -> None:
    result = PaginatedResult(items=[1, 2], total=21, pagination=Pagination(page=3, page_size=10))

    assert result.total_pages == 3
    assert not result.has_next
    assert result.has_previous
