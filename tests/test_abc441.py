import pytest

from abcsolve import abc441


@pytest.mark.parametrize(
    "x, y, inside",
    [(0, 0, True), (99, 99, True), (100, 0, False), (-1, 50, False), (50, 100, False)],
)
def test_in_square(x, y, inside):
    assert abc441.in_square(0, 0, x, y) is inside


def test_classify_words():
    result = abc441.classify_words("abc", "cde", ["ab", "de", "c", "z"])
    assert result == ["Takahashi", "Aoki", "Unknown", "Unknown"]


def test_min_cards_single_card():
    assert abc441.min_cards([5], 1, 5) == 1


def test_min_cards_impossible():
    assert abc441.min_cards([1, 2, 3], 2, 100) is None
    assert abc441.min_cards([1, 2, 3], 0, 1) is None


def test_min_cards_grows_with_target():
    values = [4, 1, 7, 3, 3, 9]
    results = [abc441.min_cards(values, 3, x) for x in range(0, 30)]
    found = [r for r in results if r is not None]
    assert found == sorted(found)
    assert all(r is None for r in results[len(found):])


def test_min_cards_bad_k():
    with pytest.raises(ValueError):
        abc441.min_cards([1, 2], 3, 1)


EDGES = [(1, 2, 3), (2, 3, 4), (1, 3, 7)]


def test_reachable_ends_by_length():
    assert abc441.reachable_ends(3, EDGES, 0, 0, 100) == [1]
    assert abc441.reachable_ends(3, EDGES, 1, 0, 100) == [2, 3]
    assert abc441.reachable_ends(3, EDGES, 2, 0, 100) == [3]


def test_reachable_ends_cost_window():
    assert abc441.reachable_ends(3, EDGES, 1, 5, 100) == [3]
    assert abc441.reachable_ends(3, EDGES, 1, 0, 3) == [2]


def test_reachable_ends_bad_edge():
    with pytest.raises(ValueError):
        abc441.reachable_ends(2, [(1, 3, 1)], 1, 0, 5)


def test_count_a_majority_simple():
    assert abc441.count_a_majority_ranges("A") == 1
    assert abc441.count_a_majority_ranges("B") == 0
    assert abc441.count_a_majority_ranges("") == 0
    assert abc441.count_a_majority_ranges("CCC") == 0


def test_run_outputs():
    assert abc441.run("A", "0 0 99 99") == "Yes"
    assert abc441.run("D", "3 3 1 0 100\n1 2 3\n2 3 4\n1 3 7\n") == "2 3"
    assert abc441.run("E", "1\nA\n") == "1"
    with pytest.raises(ValueError):
        abc441.run("Z", "")