import pytest

from strutturedati.graph import MatrixGraph
from strutturedati.graph_exercises import (
    count_same,
    count_unit_paths,
    mean_n2,
    reachable,
    relevant_adjacent,
    same_color_path,
    sum_path,
    uniform_color_path,
    update_adjacent,
)


def _build(capacity, labels, edges):
    graph = MatrixGraph(capacity)
    for node, label in labels.items():
        graph.add_node(node)
        graph.set_label(node, label)
    for source, target, weight in edges:
        graph.add_edge(source, target, weight)
    return graph


@pytest.fixture
def exam_graph():
    labels = {node: node for node in range(1, 9)}
    edges = [
        (1, 2, 1),
        (2, 8, 2),
        (1, 3, 3),
        (3, 4, 4),
        (3, 5, 5),
        (2, 6, 6),
        (5, 7, 7),
        (8, 7, 8),
        (4, 7, 9),
    ]
    return _build(10, labels, edges)


def test_relevant_adjacent_all_qualify(exam_graph):
    assert relevant_adjacent(exam_graph, 1, 3) == [2, 3]


def test_relevant_adjacent_threshold_excludes(exam_graph):
    assert relevant_adjacent(exam_graph, 1, 8) == [3]


def test_relevant_adjacent_leaf_never_qualifies(exam_graph):
    assert relevant_adjacent(exam_graph, 5, -100) == []


def test_update_adjacent_writes_out_weight_sums(exam_graph):
    update_adjacent(exam_graph, 1)
    assert exam_graph.label(3) == exam_graph.weight(3, 4) + exam_graph.weight(3, 5)
    assert exam_graph.label(2) == exam_graph.weight(2, 8) + exam_graph.weight(2, 6)
    assert exam_graph.label(1) == 1
    assert exam_graph.label(4) == 4


def test_reachable_one_step_order(exam_graph):
    assert reachable(exam_graph, 1, 1) == [2, 3]


def test_reachable_two_steps(exam_graph):
    result = reachable(exam_graph, 1, 2)
    assert set(result) == {2, 3, 4, 5, 6, 8}
    assert len(result) == len(set(result))


def test_reachable_unbounded_excludes_start_without_cycle(exam_graph):
    assert set(reachable(exam_graph, 1, 50)) == {2, 3, 4, 5, 6, 7, 8}


def test_reachable_zero_steps(exam_graph):
    assert reachable(exam_graph, 1, 0) == []


def test_reachable_cycle_includes_start():
    graph = _build(2, {0: "a", 1: "b"}, [(0, 1, 1), (1, 0, 1)])
    assert reachable(graph, 0, 1) == ["b"]
    assert set(reachable(graph, 0, 2)) == {"a", "b"}


def test_same_color_path_found():
    graph = _build(3, {0: "rosso", 1: "rosso", 2: "rosso"}, [(0, 1, 1), (1, 2, 1)])
    assert same_color_path(graph, 0, 2) is True


def test_same_color_path_blocked():
    graph = _build(3, {0: "rosso", 1: "verde", 2: "rosso"}, [(0, 1, 1), (1, 2, 1)])
    assert same_color_path(graph, 0, 2) is False


def test_same_color_path_alternative_route():
    graph = _build(
        4,
        {0: "rosso", 1: "verde", 2: "rosso", 3: "rosso"},
        [(0, 1, 1), (1, 2, 1), (0, 3, 1), (3, 2, 1)],
    )
    assert same_color_path(graph, 0, 2) is True


def test_same_color_path_endpoints_differ():
    graph = _build(2, {0: "verde", 1: "rosso"}, [(0, 1, 1)])
    assert same_color_path(graph, 0, 1) is False


def test_uniform_color_path_alternating():
    graph = _build(3, {0: "rosso", 1: "verde", 2: "rosso"}, [(0, 1, 1), (1, 2, 1)])
    assert uniform_color_path(graph, 0, 2) is True


def test_uniform_color_path_repeated_colour():
    graph = _build(3, {0: "rosso", 1: "rosso", 2: "verde"}, [(0, 1, 1), (1, 2, 1)])
    assert uniform_color_path(graph, 0, 2) is False


def test_uniform_color_path_same_node():
    graph = _build(1, {0: "bianco"}, [])
    assert uniform_color_path(graph, 0, 0) is True


def test_mean_n2_exam_graph(exam_graph):
    assert mean_n2(exam_graph, 1) == pytest.approx((4 + 5 + 6 + 8) / 4)


def test_mean_n2_uniform_labels():
    graph = _build(
        5,
        {0: 1, 1: 2, 2: 3, 3: 7, 4: 7},
        [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 4, 1)],
    )
    assert mean_n2(graph, 0) == pytest.approx(7)


def test_mean_n2_without_second_level():
    graph = _build(2, {0: 1, 1: 2}, [(0, 1, 1)])
    with pytest.raises(ValueError):
        mean_n2(graph, 0)


def test_count_same():
    graph = _build(
        5,
        {0: 5, 1: 5, 2: 7, 3: 5, 4: 5},
        [(0, 1, 1), (1, 2, 1), (2, 3, 1)],
    )
    assert count_same(graph, 0) == 3
    assert count_same(graph, 4) == 1


def test_count_unit_paths_skips_negative_edges():
    graph = _build(
        5,
        {0: 0, 1: 10, 2: 20, 3: 30, 4: 40},
        [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1), (0, 4, -1), (4, 3, 1)],
    )
    assert count_unit_paths(graph, 0, 3) == (2, 2.0)


def test_count_unit_paths_none_found():
    graph = _build(2, {0: 0, 1: 10}, [(0, 1, -1)])
    assert count_unit_paths(graph, 0, 1) == (0, None)


def test_sum_path_under_and_at_limit():
    graph = _build(3, {0: 1, 1: 2, 2: 3}, [(0, 1, 1), (1, 2, 1)])
    assert sum_path(graph, 6, 0, 2) is True
    assert sum_path(graph, 5, 0, 2) is False


def test_sum_path_unreachable():
    graph = _build(3, {0: 1, 1: 2, 2: 3}, [(0, 1, 1)])
    assert sum_path(graph, 100, 0, 2) is False


def test_sum_path_empty_graph():
    graph = MatrixGraph(3)
    assert sum_path(graph, 100, 0, 1) is False