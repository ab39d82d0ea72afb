import pytest

from judgebox.searching import (
    count_pair_sums,
    count_subsequence_sums,
    cut_log,
    race_assignment,
    run_cut_log,
    run_pair_sums,
    run_race,
    run_shortest_subarray,
    run_subsequence_sums,
    shortest_subarray,
)


def test_cut_log_sample():
    assert cut_log(9, [4, 5], 1) == (5, 4)


def test_cut_log_first_cut_is_a_position():
    positions = [2, 7, 3, 11, 14]
    _, first = cut_log(20, positions, 3)
    assert first in positions


def test_cut_log_more_cuts_never_longer():
    positions = [2, 7, 3, 11, 14]
    pieces = [cut_log(20, positions, c)[0] for c in range(1, 6)]
    assert pieces == sorted(pieces, reverse=True)


def test_cut_log_no_positions_keeps_whole_log():
    assert cut_log(10, [], 0)[0] == 10


def test_run_cut_log():
    piece, first = cut_log(9, [4, 5], 1)
    assert run_cut_log("9 2 1\n4 5\n") == f"{piece} {first}"


def test_subsequence_sample():
    assert count_subsequence_sums([-7, -3, -2, 5, 8], 0) == 1


def test_subsequence_all_zero_counts_every_subset():
    n = 6
    assert count_subsequence_sums([0] * n, 0) == 2**n - 1


def test_subsequence_single_value():
    values = [5]
    assert count_subsequence_sums(values, 5) == len(values)
    assert count_subsequence_sums(values, 4) == count_subsequence_sums([4], 5)


def test_subsequence_full_sum_found():
    values = [3, 9, 27, 81]
    assert count_subsequence_sums(values, sum(values)) >= 1


def test_subsequence_empty_raises():
    with pytest.raises(ValueError):
        count_subsequence_sums([], 0)


def test_run_subsequence_sums():
    values = [-7, -3, -2, 5, 8]
    assert run_subsequence_sums("5 0\n-7 -3 -2 5 8\n") == str(count_subsequence_sums(values, 0))


def test_race_sample():
    assert race_assignment(20, 3, [2, 3, 5, 7]) == "1011"


def test_race_shape_invariants():
    locations = [0, 4, 5, 9, 12, 17, 18]
    marks = race_assignment(20, 4, locations)
    assert len(marks) == len(locations)
    assert marks[0] == "1"
    assert marks.count("1") <= 4


def test_race_empty_raises():
    with pytest.raises(ValueError):
        race_assignment(10, 2, [])


def test_run_race():
    assert run_race("20 3 4\n2 3 5 7\n") == race_assignment(20, 3, [2, 3, 5, 7])


def test_shortest_subarray_whole_sequence():
    values = [5, 1, 3, 5, 10]
    assert shortest_subarray(values, sum(values)) == len(values)


def test_shortest_subarray_single_max_element():
    values = [5, 1, 3, 5, 10, 7]
    top = max(values)
    assert shortest_subarray(values, top) == shortest_subarray([top], top)


def test_shortest_subarray_unreachable():
    values = [1, 2, 3]
    assert shortest_subarray(values, sum(values) + 1) == shortest_subarray([], 1)


def test_run_shortest_subarray():
    values = [5, 1, 3, 5, 10, 7, 4, 9, 2, 8]
    text = "10 15\n" + " ".join(map(str, values))
    assert run_shortest_subarray(text) == str(shortest_subarray(values, 15))


def test_pair_sums_symmetric():
    a, b = [1, 3, 1, 2], [1, 3, 2]
    assert count_pair_sums(5, a, b) == count_pair_sums(5, b, a)


def test_pair_sums_all_zero():
    n, m = 4, 3
    expected = (n * (n + 1) // 2) * (m * (m + 1) // 2)
    assert count_pair_sums(0, [0] * n, [0] * m) == expected


def test_run_pair_sums():
    a, b = [1, 3, 1, 2], [1, 3, 2]
    assert run_pair_sums("5\n4\n1 3 1 2\n3\n1 3 2\n") == str(count_pair_sums(5, a, b))