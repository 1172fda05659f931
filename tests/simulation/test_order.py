"""Tests for execution order resolution."""

from hrflow.schema.models import Workflow
from hrflow.schema.loader import parse_workflow
from hrflow.simulation.order import resolve_order

from ..conftest import make_workflow


def ids(nodes):
    return [n.id for n in nodes]


class TestResolveOrder:
    def test_linear(self, review_workflow):
        assert ids(resolve_order(review_workflow)) == ["s1", "t1", "e1"]

    def test_diamond_visits_join_once(self, diamond_workflow):
        order = ids(resolve_order(diamond_workflow))

        # Depth-first: End is first discovered through A, before B
        assert order == ["start", "a", "end", "b"]
        assert order.count("end") == 1

    def test_branch_order_follows_edge_declaration(self):
        workflow = make_workflow(
            [("s", "start"), ("a", "task"), ("b", "task"), ("e", "end")],
            [("s", "b"), ("s", "a"), ("a", "e"), ("b", "e")],
        )

        assert ids(resolve_order(workflow)) == ["s", "b", "e", "a"]

    def test_is_deterministic(self, diamond_workflow):
        assert ids(resolve_order(diamond_workflow)) == ids(resolve_order(diamond_workflow))

    def test_disconnected_nodes_appended_in_collection_order(self):
        workflow = make_workflow(
            [("z", "task"), ("s", "start"), ("e", "end"), ("y", "task")],
            [("s", "e")],
        )

        assert ids(resolve_order(workflow)) == ["s", "e", "z", "y"]

    def test_no_start_returns_collection_order(self):
        workflow = make_workflow(
            [("b", "task"), ("a", "task"), ("e", "end")],
            [("a", "b"), ("b", "e")],
        )

        assert ids(resolve_order(workflow)) == ["b", "a", "e"]

    def test_multiple_starts_in_collection_order(self):
        workflow = make_workflow(
            [("s2", "start"), ("s1", "start"), ("a", "task"), ("b", "task"), ("e", "end")],
            [("s1", "a"), ("s2", "b"), ("a", "e"), ("b", "a")],
        )

        assert ids(resolve_order(workflow)) == ["s2", "b", "a", "e", "s1"]

    def test_cycle_terminates(self):
        workflow = make_workflow(
            [("s", "start"), ("a", "task"), ("b", "task")],
            [("s", "a"), ("a", "b"), ("b", "a")],
        )

        assert ids(resolve_order(workflow)) == ["s", "a", "b"]

    def test_dangling_targets_skipped(self):
        workflow = make_workflow(
            [("s", "start"), ("e", "end")],
            [("s", "gone"), ("s", "e")],
        )

        assert ids(resolve_order(workflow)) == ["s", "e"]

    def test_empty_workflow(self):
        assert resolve_order(Workflow()) == []

    def test_deep_chain(self):
        size = 5000
        nodes = [("n0", "start")] + [(f"n{i}", "task") for i in range(1, size)]
        edges = [(f"n{i}", f"n{i + 1}") for i in range(size - 1)]

        order = resolve_order(make_workflow(nodes, edges))

        assert ids(order) == [f"n{i}" for i in range(size)]

    def test_example_file(self, examples_dir):
        workflow = parse_workflow(examples_dir / "onboarding.json")

        assert ids(resolve_order(workflow)) == [
            "start-1",
            "task-1",
            "approval-1",
            "auto-1",
            "end-1",
            "auto-2",
        ]
