"""
Interchange and line-change analysis tests
"""

from src.routes.interchange import find_interchanges, get_line_changes, is_line_change
from src.routes.schemas import LineChange


class TestIsLineChange:
    """is_line_change tests"""

    def test_change_between_lines(self, reference_graph):
        assert is_line_change(reference_graph, "B", "C", "D")

    def test_same_line_continuation(self, reference_graph):
        assert not is_line_change(reference_graph, "A", "B", "C")
        assert not is_line_change(reference_graph, "C", "D", "E")

    def test_no_shared_line_counts_as_change(self, reference_graph):
        # F shares no line with C
        assert is_line_change(reference_graph, "F", "C", "D")


class TestFindInterchanges:
    """find_interchanges tests"""

    def test_reference_path(self, reference_graph):
        assert find_interchanges(reference_graph, ["A", "B", "C", "D", "E"]) == ["C"]

    def test_short_paths_have_no_interchanges(self, reference_graph):
        assert find_interchanges(reference_graph, ["C"]) == []
        assert find_interchanges(reference_graph, ["B", "C"]) == []

    def test_endpoint_interchange_is_not_recorded(self, reference_graph):
        assert find_interchanges(reference_graph, ["A", "B", "C"]) == []

    def test_passing_through_interchange_without_changing(self, graph_factory):
        graph = graph_factory([
            (1, "Red", ["A", "B", "X", "D"]),
            (2, "Blue", ["P", "X", "Q"]),
        ])

        assert graph.is_interchange_station("X")
        assert find_interchanges(graph, ["A", "B", "X", "D"]) == []

    def test_flagged_station_on_one_line_is_not_a_change(self, graph_factory):
        graph = graph_factory([(1, "Red", ["A", "B", "C"])], interchange_flags={"B"})

        assert find_interchanges(graph, ["A", "B", "C"]) == []

    def test_three_way_interchange(self, graph_factory):
        graph = graph_factory([
            (1, "Red", ["A", "X", "B"]),
            (2, "Blue", ["C", "X", "D"]),
            (3, "Green", ["E", "X", "F"]),
        ])

        assert graph.get_lines("X") == ["Red", "Blue", "Green"]
        assert find_interchanges(graph, ["A", "X", "D"]) == ["X"]
        assert find_interchanges(graph, ["C", "X", "F"]) == ["X"]

    def test_reconverging_lines_share_a_continuous_line(self, graph_factory):
        # Red and Blue share the B-C section, so a common line always continues
        graph = graph_factory([
            (1, "Red", ["A", "B", "C", "D"]),
            (2, "Blue", ["P", "B", "C", "Q"]),
        ])

        assert find_interchanges(graph, ["A", "B", "C", "D"]) == []
        assert find_interchanges(graph, ["A", "B", "C", "Q"]) == []
        assert find_interchanges(graph, ["P", "B", "C", "D"]) == []


class TestGetLineChanges:
    """get_line_changes tests"""

    def test_reference_path(self, reference_graph):
        changes = get_line_changes(reference_graph, ["A", "B", "C", "D", "E"])

        assert changes == [LineChange(from_line="Line1", to_line="Line2", at="C")]

    def test_serialized_with_short_names(self, reference_graph):
        change = get_line_changes(reference_graph, ["A", "B", "C", "D", "E"])[0]

        assert change.model_dump(by_alias=True) == {"from": "Line1", "to": "Line2", "at": "C"}

    def test_no_change_no_record(self, reference_graph):
        assert get_line_changes(reference_graph, ["A", "B", "C"]) == []

    def test_one_record_per_interchange(self, graph_factory):
        graph = graph_factory([
            (1, "Red", ["A", "X"]),
            (2, "Blue", ["X", "M", "Y"]),
            (3, "Green", ["Y", "Z"]),
        ])
        path = ["A", "X", "M", "Y", "Z"]

        changes = get_line_changes(graph, path)

        assert find_interchanges(graph, path) == ["X", "Y"]
        assert [(c.from_line, c.to_line, c.at) for c in changes] == [
            ("Red", "Blue", "X"),
            ("Blue", "Green", "Y"),
        ]

    def test_switch_inside_shared_section_is_not_reported(self, graph_factory):
        # X and Y both lie on Red and Blue
        graph = graph_factory([
            (1, "Red", ["A", "X", "Y"]),
            (2, "Blue", ["X", "Y", "B"]),
        ])
        path = ["A", "X", "Y", "B"]

        assert find_interchanges(graph, path) == []
        assert get_line_changes(graph, path) == []
