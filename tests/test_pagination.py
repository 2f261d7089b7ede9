import pytest

from task_api.pagination import Paginate


@pytest.mark.parametrize(
    "page, limit, skip",
    [
        (1, 10, 0),
        (3, 10, 20),
        (2, 25, 25),
    ],
)
def test_skip_is_previous_pages(page, limit, skip):
    paginate = Paginate(page, limit)
    assert paginate.skip == skip
    assert paginate.limit == limit


def test_find_options():
    assert Paginate(4, 5).find_options() == {"skip": 15, "limit": 5}
