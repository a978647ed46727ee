import logging

import pytest

from grafkit.graph import Edge, Graph, GraphFormatError, Matrix

TRIANGLE = ["a: b, c", "b: a, c", "c: a, b"]
MULTI = ["a: a, b, b", "b: a, a, c", "c: b"]


def test_edge_between_orders_names_and_sets_direction():
    forward = Edge.between("a", "b")
    backward = Edge.between("b", "a")
    loop = Edge.between("a", "a")
    assert (forward.first, forward.second, forward.direction) == ("a", "b", -1)
    assert (backward.first, backward.second, backward.direction) == ("a", "b", 1)
    assert loop.direction == 0


def test_edge_between_explicit_direction():
    edge = Edge.between("b", "a", 1, False, 0)
    assert edge.direction == 0
    assert edge.key == ("a", "b")


def test_edge_equality_ignores_count():
    assert Edge.between("a", "b", 3) == Edge.between("b", "a", 1)
    assert len({Edge.between("a", "b", 3), Edge.between("b", "a")}) == 1


def test_edge_ordering_by_second_then_first():
    edges = [Edge.between("b", "c"), Edge.between("a", "c"), Edge.between("a", "b")]
    assert [e.key for e in sorted(edges)] == [("a", "b"), ("a", "c"), ("b", "c")]
    assert Edge.between("a", "b") < Edge.between("a", "c")
    assert not Edge.between("a", "b") < Edge.between("b", "a")


def test_edge_str_repeats_parallel_edges():
    assert str(Edge.between("a", "b", 2)) == "a-b, a-b"
    assert str(Edge.between("a", "b", 0)) == ""


def test_matrix_str_format():
    matrix = Matrix(2, 2)
    matrix[0, 1] = 1
    matrix[1, 0] = 1
    assert str(matrix) == "|\t0\t1\t|\n|\t1\t0\t|\n"


def test_matrix_without_columns_prints_empty_rows():
    assert str(Matrix(1, 0)) == "|\t\t|\n"


def test_matrix_index_out_of_range():
    matrix = Matrix(2, 3)
    matrix[1, 2] = 5
    assert matrix[1, 2] == 5
    with pytest.raises(IndexError):
        matrix[2, 0]
    with pytest.raises(IndexError):
        matrix[0, 3] = 1
    assert [value for _, _, value in matrix.cells()] == [0, 0, 0, 0, 0, 5]


def test_matrix_cells_row_major():
    matrix = Matrix(2, 3)
    matrix[1, 2] = 7
    cells = list(matrix.cells())
    assert [(r, c) for r, c, _ in cells] == [(r, c) for r in range(2) for c in range(3)]
    assert cells[-1] == (1, 2, 7)


def test_triangle_vertices_and_edges():
    graph = Graph.from_lines(TRIANGLE)
    assert graph.vertices == ("a", "b", "c")
    assert [e.key for e in graph.edges()] == [("a", "b"), ("a", "c"), ("b", "c")]
    assert graph.rank() == len(graph.vertices)
    assert graph.size() == len(graph.edges())


def test_adjacency_matrix_is_symmetric():
    graph = Graph.from_lines(MULTI)
    for row, col, value in graph.matrix.cells():
        assert graph.matrix[col, row] == value


def test_handshake_invariant_with_loops_and_parallel_edges():
    graph = Graph.from_lines(MULTI)
    assert sum(graph.degree(v) for v in graph.vertices) == 2 * graph.size()
    assert not graph.is_simple()


def test_parallel_edges_counted_from_both_sides():
    graph = Graph.from_lines(MULTI)
    edge = next(e for e in graph.edges() if e.key == ("a", "b"))
    assert str(edge) == "a-b, a-b"


def test_open_edge_raises():
    with pytest.raises(GraphFormatError, match="niedomknieta"):
        Graph.from_lines(["a: b", "b:"])


def test_unknown_neighbour_is_dropped_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="grafkit.graph"):
        graph = Graph.from_lines(["a: z"])
    assert graph.vertices == ("a",)
    assert graph.edges() == []
    assert "0-X ta krawedz nie istnieje" in caplog.text


def test_degree_of_unknown_vertex_raises():
    graph = Graph.from_lines(TRIANGLE)
    with pytest.raises(KeyError):
        graph.degree("zz")


def test_triangle_is_simple_but_not_full():
    graph = Graph.from_lines(TRIANGLE)
    assert graph.is_simple()
    assert not graph.is_full()
    assert [e.key for e in graph.complement_edges()] == [(v, v) for v in graph.vertices]


def test_full_graph_has_empty_complement():
    graph = Graph.from_lines(["a: a, b", "b: a, b"])
    assert graph.is_full()
    assert graph.complement_edges() == []


def test_incidence_matrix_columns():
    graph = Graph.from_lines(MULTI)
    incidence = graph.incidence_matrix()
    assert (incidence.rows, incidence.cols) == (graph.rank(), graph.size())
    loops = {e.key for e in graph.edges() if e.first == e.second}
    expanded = [e for e in graph.edges() for _ in range(e.count)]
    for column, edge in enumerate(expanded):
        total = sum(incidence[row, column] for row in range(incidence.rows))
        assert total == (1 if edge.key in loops else 2)


def test_neighbors_include_loop_self():
    graph = Graph.from_lines(MULTI)
    assert graph.neighbors("a") == ["a", "b"]
    assert graph.neighbors("c") == ["b"]


def test_empty_graph():
    graph = Graph()
    assert graph.rank() == 0
    assert graph.size() == 0
    assert graph.is_simple() and graph.is_full()
    assert str(graph.matrix) == ""


def test_constructor_rejects_unsorted_vertices():
    with pytest.raises(ValueError):
        Graph(["b", "a"])
    with pytest.raises(ValueError):
        Graph(["a", "b"], Matrix(1, 1))


def test_from_file_round_trip(tmp_path):
    path = tmp_path / "graf.txt"
    path.write_text("\n".join(TRIANGLE) + "\n", encoding="utf-8")
    from_file = Graph.from_file(path)
    from_lines = Graph.from_lines(TRIANGLE)
    assert from_file.vertices == from_lines.vertices
    assert from_file.matrix == from_lines.matrix


def test_overlong_line_ends_input():
    long_name = "x" * 120
    graph = Graph.from_lines(["a: b", "b: a", long_name + ":", "c:"])
    assert graph.vertices == ("a", "b")


def test_blank_and_colon_only_lines_are_skipped():
    graph = Graph.from_lines(["", ":::", "a: a"])
    assert graph.vertices == ("a",)
    assert [e.key for e in graph.edges()] == [("a", "a")]