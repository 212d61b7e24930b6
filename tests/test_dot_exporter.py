"""
Tests for DOT export.
"""

from coupling_visualizer import DOTExporter, PackageGraph, sanitize_vertex_id


class TestSanitizeVertexId:
    """Tests for vertex identifier sanitization."""

    def test_dots_become_underscores(self):
        assert sanitize_vertex_id("com.example.util") == "com_example_util"
        assert sanitize_vertex_id("default") == "default"

    def test_non_bare_ids_are_quoted(self):
        assert sanitize_vertex_id("") == '""'
        assert sanitize_vertex_id("node") == '"node"'
        assert sanitize_vertex_id("ünïcode") == '"ünïcode"'


class TestDOTExporter:
    """Tests for DOTExporter."""

    def test_export_lists_vertices_and_edges(self):
        graph = PackageGraph()
        graph.add_edge("a", "b")
        graph.add_edge("a", "b")
        graph.add_edge("b", "a")

        dot = DOTExporter().export(graph)

        assert dot.splitlines() == [
            "digraph G {",
            '  a [ label="a" ];',
            '  b [ label="b" ];',
            "  a -> b;",
            "  a -> b;",
            "  b -> a;",
            "}",
        ]

    def test_labels_keep_dotted_names(self):
        graph = PackageGraph()
        graph.add_edge("com.example.orders", "com.example.billing")

        dot = DOTExporter().export(graph)

        assert 'com_example_orders [ label="com.example.orders" ];' in dot
        assert "com_example_orders -> com_example_billing;" in dot

    def test_identifiers_never_contain_dots(self):
        graph = PackageGraph()
        graph.add_edge("x.y.z", "p.q")

        for line in DOTExporter().export(graph).splitlines():
            identifier_part = line.split("[")[0]
            assert "." not in identifier_part

    def test_empty_graph(self):
        assert DOTExporter().export(PackageGraph()) == "digraph G {\n}\n"

    def test_empty_package_name(self):
        graph = PackageGraph()
        graph.add_edge("a", "")

        dot = DOTExporter().export(graph)

        assert '  "" [ label="" ];' in dot
        assert '  a -> "";' in dot
