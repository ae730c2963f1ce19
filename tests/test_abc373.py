import random
import string

import pytest

from abcsolve.abc373 import (
    count_matching_lengths,
    keyboard_distance,
    max_pair_sum,
    run,
)


def test_matching_lengths_all():
    strings = ["x" * i for i in range(1, 13)]
    assert count_matching_lengths(strings) == len(strings)


def test_matching_lengths_none():
    strings = ["x" * (i + 1) for i in range(1, 13)]
    assert count_matching_lengths(strings) == 0


def test_keyboard_alphabetical():
    layout = string.ascii_uppercase
    assert keyboard_distance(layout) == len(layout) - 1


def test_keyboard_reversed():
    layout = string.ascii_uppercase[::-1]
    assert keyboard_distance(layout) == len(layout) - 1


@pytest.mark.parametrize("seed", range(5))
def test_keyboard_random_at_least_span(seed):
    letters = list(string.ascii_uppercase)
    random.Random(seed).shuffle(letters)
    layout = "".join(letters)
    span = abs(layout.index("Z") - layout.index("A"))
    assert keyboard_distance(layout) >= span


def test_keyboard_invalid_layout():
    with pytest.raises(ValueError):
        keyboard_distance("ABC")


@pytest.mark.parametrize("seed", range(10))
def test_max_pair_sum_is_attained_maximum(seed):
    rng = random.Random(seed)
    a = [rng.randint(-100, 100) for _ in range(6)]
    b = [rng.randint(-100, 100) for _ in range(6)]
    best = max_pair_sum(a, b)
    sums = {x + y for x in a for y in b}
    assert best in sums
    assert all(s <= best for s in sums)


def test_run_outputs():
    assert run("B", string.ascii_uppercase) == f"{len(string.ascii_uppercase) - 1}\n"
    assert run("C", "2\n-1 5\n3 -7\n") == f"{max_pair_sum([-1, 5], [3, -7])}\n"


def test_run_unknown_problem():
    with pytest.raises(ValueError):
        run("D", "")