import pytest

from wodlib.predicate_bsearch import first_in_range, last_in_range


@pytest.mark.parametrize(
    "low, high, answer",
    [
        (1, 16, 8),
        (9, 16, 9),
        (1, 9, 8),
        (1, 8, None),
        (1, 5, None),
    ],
)
def test_first_in_range(low, high, answer):
    assert first_in_range(range(low, high), lambda x: x > 7) == answer


@pytest.mark.parametrize(
    "low, high, answer",
    [
        (1, 16, 6),
        (1, 6, 5),
        (6, 16, 6),
        (9, 16, None),
    ],
)
def test_last_in_range(low, high, answer):
    assert last_in_range(range(low, high), lambda x: x < 7) == answer


def test_first_in_empty_range():
    assert first_in_range(range(0, 0), lambda x: True) is None


def test_last_in_empty_range():
    assert last_in_range(range(5, 5), lambda x: True) is None


def test_single_element_range():
    assert first_in_range(range(0, 1), lambda x: True) == 0
    assert last_in_range(range(0, 1), lambda x: True) == 0


def test_large_range():
    assert first_in_range(range(0, 10**18), lambda x: x >= 123456789) == 123456789


def test_rejects_stepped_range():
    with pytest.raises(ValueError):
        first_in_range(range(0, 10, 2), lambda x: x > 3)
    with pytest.raises(ValueError):
        last_in_range(range(0, 10, 2), lambda x: x < 3)