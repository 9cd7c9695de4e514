import pytest

from drills.offsets import offset_differences


def test_offset_one():
    assert offset_differences(1, [1, 3, 5, 7]) == [2, 2, 2, -6]
    assert offset_differences(1, [1, 3, 5]) == [2, 2, -4]
    assert offset_differences(1, [1, 3]) == [2, -2]


def test_larger_offsets():
    assert offset_differences(2, [1, 3, 5, 7]) == [4, 4, -4, -4]
    assert offset_differences(3, [1, 3, 5, 7]) == [6, -2, -2, -2]
    assert offset_differences(4, [1, 3, 5, 7]) == [0, 0, 0, 0]
    assert offset_differences(5, [1, 3, 5, 7]) == [2, 2, 2, -6]


def test_custom_type():
    assert offset_differences(1, [1.0, 11.0, 5.0, 0.0]) == [10.0, -6.0, -5.0, 1.0]


def test_degenerate_cases():
    assert offset_differences(1, [0]) == [0]
    assert offset_differences(1, [1]) == [0]
    assert offset_differences(1, []) == []


@pytest.mark.parametrize("offset", [0, 1, 2, 3, 7])
def test_differences_sum_to_zero(offset):
    assert sum(offset_differences(offset, [4, -2, 9, 13, 0])) == 0


def test_accepts_any_iterable():
    assert offset_differences(1, iter([1, 3, 5, 7])) == [2, 2, 2, -6]