import pytest

from judgebox.connectivity_data import generate_case
from judgebox.dynamic_connectivity import (
    DynamicGraph,
    process_queries,
    run_dynamic_connectivity,
)


def test_insert_joins_components():
    graph = DynamicGraph(4)
    before = graph.components
    graph.insert(0, 1)
    assert graph.connected(0, 1)
    assert graph.connected(1, 0)
    assert graph.components == before - 1


def test_cycle_edge_removal_keeps_connection():
    graph = DynamicGraph(4)
    graph.insert(0, 1)
    graph.insert(1, 2)
    count = graph.components
    graph.insert(0, 2)
    assert graph.components == count
    graph.remove(0, 1)
    assert graph.connected(0, 1)
    assert graph.components == count
    graph.remove(1, 2)
    assert not graph.connected(0, 1)
    assert graph.connected(0, 2)
    assert graph.components == count + 1


def test_contains_and_toggle():
    graph = DynamicGraph(3)
    assert graph.toggle(2, 1) is True
    assert graph.contains(1, 2)
    assert graph.toggle(1, 2) is False
    assert not graph.contains(2, 1)
    assert graph.components == graph.size


def test_untouched_vertex_not_connected_to_itself():
    graph = DynamicGraph(3)
    assert not graph.connected(0, 0)
    graph.insert(0, 1)
    graph.remove(0, 1)
    assert graph.connected(0, 0)
    assert not graph.connected(2, 2)


def test_errors():
    graph = DynamicGraph(3)
    with pytest.raises(ValueError):
        graph.insert(1, 1)
    with pytest.raises(ValueError):
        graph.remove(0, 1)
    graph.insert(0, 1)
    with pytest.raises(ValueError):
        graph.insert(1, 0)
    with pytest.raises(ValueError):
        graph.connected(0, 3)
    with pytest.raises(ValueError):
        DynamicGraph(0)


@pytest.mark.parametrize("n, count, seed", [(4, 60, 1), (7, 200, 5), (12, 300, 9)])
def test_matches_generated_reference(n, count, seed):
    case = generate_case(n, count, seed)
    assert process_queries(n, case.queries) == case.answers


def test_run_formats_answers():
    case = generate_case(6, 80, 2)
    text = f"6 {len(case.queries)}\n" + "".join(f"{a} {b}\n" for a, b in case.queries)
    assert run_dynamic_connectivity(text) == "".join(f"{int(v)}\n" for v in case.answers)


def test_component_count_matches_removal_of_all_edges():
    graph = DynamicGraph(5)
    edges = [(0, 1), (1, 2), (2, 3), (3, 4), (0, 4), (1, 3)]
    for a, b in edges:
        graph.insert(a, b)
    assert graph.components == 1
    for a, b in edges:
        graph.remove(a, b)
    assert graph.components == graph.size