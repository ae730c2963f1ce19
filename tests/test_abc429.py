import pytest

from abcsolve import abc429


def test_request_responses_limit():
    assert abc429.request_responses(3, 1) == ["OK", "Too Many Requests", "Too Many Requests"]


def test_request_responses_under_limit():
    assert abc429.request_responses(2, 5) == ["OK", "OK"]


def test_can_drop_one():
    assert abc429.can_drop_one([1, 2, 3], 5)
    assert not abc429.can_drop_one([1, 2, 3], 6)


@pytest.mark.parametrize("values", [[1, 2, 3], [1, 1, 1], [2, 2]])
def test_count_pair_triples_zero_cases(values):
    assert abc429.count_pair_triples(values) == 0


def test_count_pair_triples_single_pair():
    assert abc429.count_pair_triples([1, 1, 2]) == 1


def test_count_pair_triples_out_of_range():
    with pytest.raises(ValueError):
        abc429.count_pair_triples([5])


def test_ring_sum_one_person_everywhere():
    assert abc429.ring_sum(5, 1, [0, 1, 2, 3, 4]) == 5


@pytest.mark.parametrize("positions", [[0, 3, 3, 7], [1, 2], [4, 4, 4]])
def test_ring_sum_needing_everyone(positions):
    m = 10
    assert abc429.ring_sum(m, len(positions), positions) == m * len(positions)


def test_ring_sum_invariant_under_rotation():
    m = 12
    positions = [0, 2, 2, 5, 9]
    shifted = [(p + 4) % m for p in positions]
    for c in range(1, len(positions) + 1):
        assert abc429.ring_sum(m, c, positions) == abc429.ring_sum(m, c, shifted)


def test_ring_sum_errors():
    with pytest.raises(ValueError):
        abc429.ring_sum(5, 1, [])
    with pytest.raises(ValueError):
        abc429.ring_sum(5, 3, [1, 2])


def test_nearest_safe_sums_path():
    assert abc429.nearest_safe_sums(3, [(1, 2), (2, 3)], "SDS") == [2]


def test_nearest_safe_sums_single_source():
    assert abc429.nearest_safe_sums(2, [(1, 2)], "SD") == [None]


def test_nearest_safe_sums_symmetric_under_relabelling():
    edges = [(1, 2), (2, 3), (3, 4), (4, 5)]
    forward = abc429.nearest_safe_sums(5, edges, "SDDDS")
    mirrored = [(6 - u, 6 - v) for u, v in edges]
    backward = abc429.nearest_safe_sums(5, mirrored, "SDDDS")
    assert forward == backward[::-1]


def test_nearest_safe_sums_label_length():
    with pytest.raises(ValueError):
        abc429.nearest_safe_sums(3, [], "SD")


def test_run_outputs():
    assert abc429.run("A", "2 1\n") == "OK\nToo Many Requests\n"
    assert abc429.run("B", "3 5\n1 2 3\n") == "Yes"
    assert abc429.run("E", "3 2\n1 2\n2 3\nSDS\n") == "2\n"
    with pytest.raises(ValueError):
        abc429.run("Z", "")