"""Shared fixtures for tests."""

import random
from datetime import datetime, timezone
from pathlib import Path

import pytest

from hrflow.graph.builder import build_graph
from hrflow.schema.models import Workflow
from hrflow.simulation.settings import SimulationSettings
from hrflow.simulation.simulator import Simulator

FIXED_TIME = datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)


def make_workflow(nodes: list[tuple[str, str]], edges: list[tuple[str, str]]) -> Workflow:
    """Build a workflow from (id, type) pairs and (source, target) pairs.

    Node labels are the ids upper-cased; edge ids are ``source->target``.
    """
    return Workflow(
        nodes=[
            {"id": node_id, "type": node_type, "data": {"label": node_id.upper()}}
            for node_id, node_type in nodes
        ],
        edges=[
            {"id": f"{source}->{target}", "source": source, "target": target}
            for source, target in edges
        ],
    )


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def review_nodes() -> list[dict]:
    """Start -> Review task -> End, as plain dicts."""
    return [
        {"id": "s1", "type": "start", "data": {"label": "Begin"}},
        {"id": "t1", "type": "task", "data": {"label": "Review", "assignee": "Alice"}},
        {"id": "e1", "type": "end", "data": {"label": "Done"}},
    ]


@pytest.fixture
def review_edges() -> list[dict]:
    return [
        {"id": "e-s1-t1", "source": "s1", "target": "t1"},
        {"id": "e-t1-e1", "source": "t1", "target": "e1"},
    ]


@pytest.fixture
def review_workflow(review_nodes, review_edges) -> Workflow:
    return Workflow(name="Review", nodes=review_nodes, edges=review_edges)


@pytest.fixture
def diamond_workflow() -> Workflow:
    """Start branches to A and B, which both lead to End."""
    return make_workflow(
        [("start", "start"), ("a", "task"), ("b", "task"), ("end", "end")],
        [("start", "a"), ("start", "b"), ("a", "end"), ("b", "end")],
    )


@pytest.fixture
def diamond_graph(diamond_workflow):
    return build_graph(diamond_workflow)


@pytest.fixture
def simulator() -> Simulator:
    """A simulator with no latency, a fixed clock and a seeded random source."""
    return Simulator(
        settings=SimulationSettings(latency=0),
        clock=lambda: FIXED_TIME,
        rng=random.Random(42),
    )
