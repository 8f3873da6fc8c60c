import pytest

from graphalgo.graph import Graph, GraphError

SIMPLE_GRAPH = """4
0 10 0 5
10 0 15 0
0 15 0 7
5 20 7 0
"""


def _graph_examples_text():
    size = 11
    rows = [[0] * size for _ in range(size)]
    rows[0][5] = 31
    rows[5][0] = 31
    rows[0][1] = 29
    rows[1][0] = 29
    body = "\n".join(" ".join(str(v) for v in row) for row in rows)
    return f"{size}\n{body}\n"


@pytest.fixture
def simple_file(tmp_path):
    path = tmp_path / "simple_graph.txt"
    path.write_text(SIMPLE_GRAPH)
    return path


@pytest.fixture
def examples_file(tmp_path):
    path = tmp_path / "graph_examples.txt"
    path.write_text(_graph_examples_text())
    return path


def test_create_graph():
    graph = Graph(5)
    assert graph.order == 5
    assert graph.rows() == [[0] * 5 for _ in range(5)]


def test_create_empty_graph():
    assert Graph(0).order == 0


def test_negative_size_rejected():
    with pytest.raises(GraphError):
        Graph(-1)


def test_load_simple_graph(simple_file):
    graph = Graph.load(simple_file)
    assert graph.order == 4
    assert graph[3, 1] == 20


def test_load_graph_examples(examples_file):
    graph = Graph.load(examples_file)
    assert graph.order == 11
    assert graph[0, 5] == 31


def test_load_missing_file(tmp_path):
    with pytest.raises(GraphError):
        Graph.load(tmp_path / "non_existing_file.txt")


@pytest.mark.parametrize("text", ["", "0\n", "-3\n", "abc\n", "2\n1 2 3\n", "2\n1 x 3 4\n"])
def test_load_invalid_content(tmp_path, text):
    path = tmp_path / "bad.txt"
    path.write_text(text)
    with pytest.raises(GraphError):
        Graph.load(path)


def test_load_round_trip(tmp_path):
    rows = [[0, 1, -2], [3, 0, 4], [5, 6, 0]]
    path = tmp_path / "g.txt"
    path.write_text("3\n" + "\n".join(" ".join(map(str, r)) for r in rows))
    assert Graph.load(path).rows() == rows


def test_from_matrix_requires_square():
    with pytest.raises(GraphError):
        Graph.from_matrix([[0, 1], [1]])


def test_set_and_get_item():
    graph = Graph(3)
    graph[1, 2] = 7
    assert graph[1, 2] == 7
    assert graph[2, 1] == 0


@pytest.mark.parametrize("key", [(-1, 0), (0, 3), (3, 3)])
def test_index_out_of_range(key):
    with pytest.raises(IndexError):
        Graph(3)[key]


def test_rows_is_a_copy():
    graph = Graph.from_matrix([[0, 1], [1, 0]])
    rows = graph.rows()
    rows[0][1] = 99
    assert graph[0, 1] == 1


def test_to_dot_edges():
    graph = Graph.from_matrix([[0, 4, 0], [2, 0, 0], [0, 9, 0]])
    dot = graph.to_dot()
    lines = dot.splitlines()
    assert lines[0] == "digraph {"
    assert lines[-1] == "}"
    edges = [line for line in lines if "->" in line]
    assert edges == [
        '    0 -> 1 [label="4"];',
        '    1 -> 0 [label="2"];',
        '    2 -> 1 [label="9"];',
    ]


def test_export_to_dot(tmp_path, simple_file):
    graph = Graph.load(simple_file)
    out = tmp_path / "test_output1.dot"
    graph.export_to_dot(out)
    content = out.read_text()
    assert content == graph.to_dot()
    assert '    3 -> 1 [label="20"];' in content.splitlines()


def test_export_to_unwritable_path(tmp_path):
    with pytest.raises(GraphError):
        Graph(2).export_to_dot(tmp_path / "missing_dir" / "out.dot")