import pytest

from abcsolve.abc346 import (
    adjacent_products,
    keyboard_substring_exists,
    missing_sum,
    run,
)


def test_adjacent_products_sample():
    assert adjacent_products([3, 4, 6]) == [12, 24]


def test_adjacent_products_with_ones():
    assert adjacent_products([1, 17, 1]) == [17, 17]
    assert adjacent_products([5]) == []


def test_keyboard_samples():
    assert keyboard_substring_exists(3, 2)
    assert keyboard_substring_exists(92, 66)
    assert not keyboard_substring_exists(3, 0)


def test_keyboard_empty_stretch_not_found():
    assert not keyboard_substring_exists(0, 0)


@pytest.mark.parametrize("periods", range(1, 6))
def test_keyboard_full_periods(periods):
    assert keyboard_substring_exists(7 * periods, 5 * periods)


def test_missing_sum_sample():
    assert missing_sum([1, 6, 3, 1], 5) == 11


@pytest.mark.parametrize("k", [1, 10, 1000])
def test_missing_sum_all_present(k):
    assert missing_sum(range(1, k + 1), k) == 0


@pytest.mark.parametrize("k", [1, 10, 1000])
def test_missing_sum_none_present(k):
    assert missing_sum([k + 1, k + 2], k) == sum(range(1, k + 1))


def test_run():
    assert run("A", "3\n3 4 6") == "".join(f"{p} " for p in adjacent_products([3, 4, 6]))
    assert run("B", "3 2") == "Yes\n"
    assert run("B", "3 0") == "No\n"
    assert run("C", "4 5\n1 6 3 1") == f"{missing_sum([1, 6, 3, 1], 5)}\n"
    with pytest.raises(ValueError):
        run("C", "4 5\n1 6")