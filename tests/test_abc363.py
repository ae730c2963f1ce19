import random
from itertools import permutations

import pytest

from abcsolve.abc363 import (
    count_palindrome_free,
    days_until,
    has_palindrome,
    is_palindrome_at,
    nth_palindrome,
    rating_gap,
    run,
)


def test_rating_gap_reaches_next_hundred():
    for r in range(300):
        gap = rating_gap(r)
        assert 1 <= gap <= 100
        assert (r + gap) % 100 == 0


def test_rating_gap_too_high():
    with pytest.raises(ValueError):
        rating_gap(300)


@pytest.mark.parametrize("seed", range(15))
def test_days_until_is_minimal(seed):
    rng = random.Random(seed)
    lengths = [rng.randint(1, 50) for _ in range(8)]
    t = rng.randint(1, 60)
    p = rng.randint(1, len(lengths))
    days = days_until(lengths, t, p)

    def enough(d):
        return sum(length + d >= t for length in lengths) >= p

    assert enough(days)
    assert days == 0 or not enough(days - 1)


def test_days_until_too_many_hairs():
    with pytest.raises(ValueError):
        days_until([1, 2], 5, 3)


def test_is_palindrome_at():
    assert is_palindrome_at("xabay", 1, 3) is True
    assert is_palindrome_at("xabay", 0, 3) is False


def test_has_palindrome_length_one():
    assert has_palindrome("abc", 1) is True


def test_has_palindrome_longer_than_string():
    assert has_palindrome("aa", 3) is False


def test_palindrome_free_with_k_one_is_zero():
    assert count_palindrome_free("abc", 1) == 0


@pytest.mark.parametrize("s,k", [("aab", 2), ("abcwxy", 4), ("aabbc", 3), ("zzyyx", 2)])
def test_palindrome_free_matches_brute_force(s, k):
    perms = {"".join(p) for p in permutations(s)}
    expected = sum(1 for p in perms if not has_palindrome(p, k))
    assert count_palindrome_free(s, k) == expected


def test_palindrome_free_all_distinct_no_constraint():
    s = "abcd"
    perms = {"".join(p) for p in permutations(s)}
    assert count_palindrome_free(s, 2) == len(perms)


def test_nth_palindrome_matches_enumeration():
    palindromes = [x for x in range(20000) if str(x) == str(x)[::-1]]
    assert [nth_palindrome(i) for i in range(1, len(palindromes) + 1)] == palindromes


def test_nth_palindrome_large_is_palindrome_and_increasing():
    values = [nth_palindrome(10**12 + i) for i in range(5)]
    assert all(str(v) == str(v)[::-1] for v in values)
    assert values == sorted(set(values))


def test_nth_palindrome_invalid():
    with pytest.raises(ValueError):
        nth_palindrome(0)


def test_run_outputs():
    assert run("D", "46") == f"{nth_palindrome(46)}\n"
    assert run("C", "3 2\naab\n") == f"{count_palindrome_free('aab', 2)}\n"


def test_run_unknown_problem():
    with pytest.raises(ValueError):
        run("E", "")