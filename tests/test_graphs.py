import pytest

from judgebox.graphs import (
    UnionFind,
    construction_time,
    critical_path,
    line_up,
    partition_cost,
    run_construction,
    run_critical_path,
    run_line_up,
    run_partition,
    run_subtree_queries,
    run_tunnel,
    run_workbook,
    subtree_sizes,
    tunnel_cost,
    workbook_order,
)

DURATIONS = [10, 1, 100, 10]
RULES = [(1, 2), (1, 3), (2, 4), (3, 4)]

CRITICAL_ROADS = [
    (1, 2, 4), (1, 3, 2), (1, 4, 3), (2, 6, 3), (2, 7, 5),
    (3, 5, 1), (4, 6, 4), (5, 6, 2), (6, 7, 5),
]


def test_union_find_merges_once():
    uf = UnionFind(5)
    assert uf.union(0, 1) is True
    assert uf.union(1, 0) is False
    assert uf.find(0) == uf.find(1)
    assert uf.find(2) != uf.find(0)


def test_union_find_transitive():
    uf = UnionFind(6)
    uf.union(0, 1)
    uf.union(2, 3)
    uf.union(1, 3)
    assert {uf.find(i) for i in range(4)} == {uf.find(0)}


def test_construction_sample():
    assert construction_time(DURATIONS, RULES, 4) == 120


def test_construction_without_rules_is_own_duration():
    assert construction_time(DURATIONS, [], 3) == DURATIONS[2]


def test_construction_at_least_every_path():
    result = construction_time(DURATIONS, RULES, 4)
    assert result >= DURATIONS[0] + DURATIONS[1] + DURATIONS[3]
    assert result >= DURATIONS[0] + DURATIONS[2] + DURATIONS[3]


def test_construction_cycle_raises():
    with pytest.raises(ValueError):
        construction_time([1, 1], [(1, 2), (2, 1)], 1)


def test_construction_target_out_of_range():
    with pytest.raises(ValueError):
        construction_time(DURATIONS, RULES, 9)


def test_run_construction_matches_function():
    text = "2\n4 4\n10 1 100 10\n1 2\n1 3\n2 4\n3 4\n4\n4 4\n10 1 100 10\n1 2\n1 3\n2 4\n3 4\n2\n"
    expected = (
        f"{construction_time(DURATIONS, RULES, 4)}\n"
        f"{construction_time(DURATIONS, RULES, 2)}\n"
    )
    assert run_construction(text) == expected


def test_subtree_sizes_path():
    n = 4
    sizes = subtree_sizes(n, [(1, 2), (2, 3), (3, 4)], 1)
    assert sizes == {v: n - v + 1 for v in range(1, n + 1)}


def test_subtree_sizes_path_from_other_end():
    sizes = subtree_sizes(4, [(1, 2), (2, 3), (3, 4)], 4)
    assert sizes == {v: v for v in range(1, 5)}


def test_subtree_root_holds_everything():
    n = 6
    edges = [(1, 2), (1, 3), (3, 4), (3, 5), (5, 6)]
    assert subtree_sizes(n, edges, 3)[3] == n


def test_run_subtree_queries():
    text = "5 5 3\n1 2\n2 3\n3 4\n4 5\n5\n3\n1\n"
    sizes = subtree_sizes(5, [(1, 2), (2, 3), (3, 4), (4, 5)], 5)
    assert run_subtree_queries(text) == f"{sizes[5]}\n{sizes[3]}\n{sizes[1]}\n"


def test_partition_tree_drops_dearest_road():
    roads = [(1, 2, 3), (2, 3, 5), (3, 4, 1)]
    costs = [c for _, _, c in roads]
    assert partition_cost(4, roads) == sum(costs) - max(costs)


def test_partition_ignores_expensive_cycle_road():
    roads = [(1, 2, 3), (2, 3, 5), (3, 4, 1)]
    assert partition_cost(4, roads + [(1, 4, 10)]) == partition_cost(4, roads)


def test_run_partition():
    roads = [(1, 2, 3), (2, 3, 5), (3, 4, 1), (1, 4, 10)]
    text = "4 4\n" + "".join(f"{a} {b} {c}\n" for a, b, c in roads)
    assert run_partition(text) == str(partition_cost(4, roads))


def test_workbook_sample():
    assert workbook_order(4, [(4, 2), (3, 1)]) == [3, 1, 4, 2]


def test_workbook_without_constraints_is_ascending():
    assert workbook_order(5, []) == list(range(1, 6))


def test_workbook_respects_constraints():
    constraints = [(5, 1), (4, 1), (2, 3)]
    order = workbook_order(5, constraints)
    assert sorted(order) == list(range(1, 6))
    assert all(order.index(a) < order.index(b) for a, b in constraints)


def test_run_workbook():
    order = workbook_order(4, [(4, 2), (3, 1)])
    assert run_workbook("4 2\n4 2\n3 1\n") == " ".join(map(str, order)) + " \n"


def test_critical_path_sample():
    assert critical_path(7, CRITICAL_ROADS, 1, 7) == (12, 5)


def test_critical_path_single_road():
    roads = [(1, 2, 7)]
    assert critical_path(2, roads, 1, 2) == (roads[0][2], len(roads))


def test_run_critical_path():
    text = "7\n9\n" + "".join(f"{a} {b} {w}\n" for a, b, w in CRITICAL_ROADS) + "1 7\n"
    time, count = critical_path(7, CRITICAL_ROADS, 1, 7)
    assert run_critical_path(text) == f"{time}\n{count}"


def test_line_up_respects_comparisons():
    comparisons = [(1, 3), (2, 3), (4, 2)]
    order = line_up(4, comparisons)
    assert sorted(order) == [1, 2, 3, 4]
    assert all(order.index(a) < order.index(b) for a, b in comparisons)


def test_line_up_cycle_raises():
    with pytest.raises(ValueError):
        line_up(3, [(1, 2), (2, 3), (3, 1)])


def test_run_line_up():
    order = line_up(3, [(1, 3), (2, 3)])
    assert run_line_up("3 2\n1 3\n2 3\n") == "".join(f"{x} " for x in order)


def test_tunnel_two_planets_uses_smallest_gap():
    a, b = (1, 10, 30), (4, 2, 31)
    assert tunnel_cost([a, b]) == min(abs(x - y) for x, y in zip(a, b))


def test_tunnel_diagonal_planets():
    planets = [(0, 0, 0), (3, 3, 3), (7, 7, 7)]
    assert tunnel_cost(planets) == planets[-1][0] - planets[0][0]


def test_tunnel_order_does_not_matter():
    planets = [(11, -15, -15), (14, -5, -15), (-1, -1, -5), (10, -4, -1), (19, -4, 19)]
    assert tunnel_cost(planets) == tunnel_cost(list(reversed(planets)))


def test_run_tunnel():
    planets = [(11, -15, -15), (14, -5, -15), (-1, -1, -5)]
    text = "3\n" + "".join(f"{x} {y} {z}\n" for x, y, z in planets)
    assert run_tunnel(text) == str(tunnel_cost(planets))