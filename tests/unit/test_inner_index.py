"""Unit tests for decorator and abstract collection."""

from __future__ import annotations

from decograph.enrichers.inner_index import collect_decorators
from decograph.graph import build_graph


class TestCollectDecorators:
    """Tests for collect_decorators."""

    def test_classifies_objects(self, make_program, at_line) -> None:
        program = make_program(
            [
                {"name": "A", "abstract": True, "line": 1, "children": [{"name": "x", "line": 2}]},
                {
                    "name": "E",
                    "abstract": True,
                    "line": 3,
                    "children": [{"name": "@", "base": "A", "line": 4}, {"base": "y", "line": 5}],
                },
            ]
        )
        graph = build_graph([program])
        index = collect_decorators(graph, "@")

        assert [entry.node.body for entry in index.decorators] == [at_line(program, 4)]
        assert all(entry.resolved is False for entry in index.decorators)
        assert set(index.abstracts) == {"A", "E"}
        assert index.abstracts_count == 2

    def test_reuses_registered_graph_nodes(self, make_program, at_line) -> None:
        program = make_program([{"name": "A", "abstract": True, "line": 1}])
        graph = build_graph([program])
        index = collect_decorators(graph, "@")

        assert index.abstracts["A"] == {graph.find_node(at_line(program, 1))}

    def test_decorators_are_not_registered(self, make_program) -> None:
        program = make_program([{"name": "E", "abstract": True, "children": [{"name": "@", "base": "$"}]}])
        graph = build_graph([program])
        before = len(graph.nodes)
        collect_decorators(graph, "@")
        assert len(graph.nodes) == before

    def test_same_name_abstracts_retained(self, make_program) -> None:
        first = make_program([{"name": "int", "abstract": True}], package="a")
        second = make_program([{"name": "int", "abstract": True}], package="b")
        graph = build_graph([first, second])
        index = collect_decorators(graph, "@")

        assert len(index.abstracts["int"]) == 2
        assert {node.package for node in index.abstracts["int"]} == {"a", "b"}

    def test_abstract_decorator_in_both(self, make_program) -> None:
        program = make_program([{"name": "E", "abstract": True, "children": [{"name": "@", "abstract": True}]}])
        index = collect_decorators(build_graph([program]), "@")

        assert len(index.decorators) == 1
        assert index.decorators[0].node in index.abstracts["@"]

    def test_custom_decorator_name(self, make_program) -> None:
        program = make_program([{"name": "E", "abstract": True, "children": [{"name": "phi", "base": "$"}]}])
        index = collect_decorators(build_graph([program]), "phi")

        assert len(index.decorators) == 1
