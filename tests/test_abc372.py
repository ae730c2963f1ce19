import pytest

from abcsolve.abc372 import (
    ConnectedComponents,
    process_queries,
    run,
    strip_dots,
    ternary_terms,
    visible_counts,
)


def test_strip_dots_removes_every_dot():
    result = strip_dots("a.b..c.")
    assert "." not in result
    assert result == "abc"


def test_strip_dots_keeps_text_without_dots():
    assert strip_dots("xyz") == "xyz"


@pytest.mark.parametrize("m", range(1, 200))
def test_ternary_terms_sum_to_m(m):
    terms = ternary_terms(m)
    assert sum(3**t for t in terms) == m
    assert len(terms) <= 20
    assert terms == sorted(terms, reverse=True)
    assert all(0 <= t <= 10 for t in terms)


def test_ternary_terms_of_power():
    assert ternary_terms(3**7) == [7]


def test_visible_counts_sample():
    assert visible_counts([2, 1, 4, 3, 5]) == [3, 2, 2, 1, 0]


@pytest.mark.parametrize(
    "heights",
    [[1], [5, 4, 3, 2, 1], [1, 2, 3, 4], [3, 1, 4, 1, 5, 9, 2, 6], [7, 7, 7]],
)
def test_visible_counts_invariants(heights):
    counts = visible_counts(heights)
    n = len(heights)
    assert len(counts) == n
    assert counts[-1] == 0
    for i, c in enumerate(counts):
        assert c <= n - 1 - i
        if i < n - 1:
            assert c >= 1


def test_components_single_vertex():
    comps = ConnectedComponents(3)
    assert comps.kth_largest(3, 1) == 3
    assert comps.kth_largest(3, 2) is None


def test_components_merge_orders_descending():
    comps = ConnectedComponents(3)
    comps.connect(1, 2)
    comps.connect(2, 3)
    assert [comps.kth_largest(1, k) for k in (1, 2, 3)] == [3, 2, 1]
    assert comps.kth_largest(1, 4) is None


def test_components_keep_only_ten():
    comps = ConnectedComponents(12)
    for v in range(2, 13):
        comps.connect(1, v)
    assert comps.kth_largest(5, 1) == 12
    assert comps.kth_largest(5, 10) == 3
    assert comps.kth_largest(5, 11) is None


def test_components_reject_bad_vertex():
    comps = ConnectedComponents(2)
    with pytest.raises(ValueError):
        comps.connect(1, 3)
    with pytest.raises(ValueError):
        comps.kth_largest(0, 1)


def test_process_queries():
    queries = [(1, 1, 2), (2, 1, 1), (2, 2, 2), (2, 3, 1)]
    assert process_queries(3, queries) == [2, 1, 3]


def test_process_queries_unknown_type():
    with pytest.raises(ValueError):
        process_queries(2, [(3, 1, 1)])


def test_run_b_output_is_consistent():
    lines = run("B", "100").splitlines()
    terms = [int(t) for t in lines[1].split()]
    assert int(lines[0]) == len(terms)
    assert sum(3**t for t in terms) == 100


def test_run_e():
    assert run("E", "3 3\n1 1 2\n2 1 1\n2 1 3\n") == "2\n-1\n"


def test_run_c_and_d_agree():
    text = "5\n2 1 4 3 5\n"
    assert run("C", text) == run("D", text)
    assert run("C", text) == "3 2 2 1 0\n"


def test_run_unknown_problem():
    with pytest.raises(ValueError):
        run("Z", "")