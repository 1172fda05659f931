"""Validation runner that orchestrates all validators."""

from pathlib import Path
from typing import Any, Iterable

from ..graph.builder import build_graph
from ..graph.workflow_graph import WorkflowGraph
from ..schema.errors import WorkflowSchemaError
from ..schema.loader import parse_workflow
from ..schema.models import Edge, Node
from ..schema.serializer import to_workflow
from .base import ValidationResult
from .connectivity import check_dangling_edges, check_node_connections
from .cycles import check_cycles
from .node_data import check_node_data
from .start_end import check_end_nodes, check_start_nodes


def run_validators(
    graph: WorkflowGraph,
    check_data: bool = False,
    check_edges: bool = False,
) -> ValidationResult:
    """Run all structural validators on a workflow graph.

    Every rule runs and all findings are collected; the order of the rules
    fixes the order of the messages.

    Args:
        graph: The workflow graph.
        check_data: Also check each node's configuration fields.
        check_edges: Also warn about edges that point at missing nodes.

    Returns:
        Combined ValidationResult from all validators.
    """
    result = ValidationResult()

    result.merge(check_start_nodes(graph))
    result.merge(check_end_nodes(graph))
    result.merge(check_node_connections(graph))
    result.merge(check_cycles(graph))

    if check_edges:
        result.merge(check_dangling_edges(graph))

    if check_data:
        result.merge(check_node_data(graph))

    return result


def validate_workflow(
    nodes: Iterable[Node | dict[str, Any]],
    edges: Iterable[Edge | dict[str, Any]],
) -> ValidationResult:
    """Validate a workflow given as nodes and edges.

    Nodes and edges may be models or plain dicts in the document shape.
    Use ``.as_dict()`` on the result for the plain error/warning strings.
    Nodes or edges missing their id, type or endpoints are reported as
    ``INVALID_WORKFLOW_DATA`` errors instead of raising.
    """
    try:
        workflow = to_workflow({"nodes": list(nodes), "edges": list(edges)})
    except WorkflowSchemaError as e:
        result = ValidationResult()
        for err, line in zip(e.errors, e.describe()):
            result.add_error(
                code="INVALID_WORKFLOW_DATA",
                message=f"Invalid workflow data: {line}",
                location=err["loc"],
            )
        return result

    return run_validators(build_graph(workflow))


def validate_workflow_file(
    path: str | Path,
    check_data: bool = False,
    check_edges: bool = False,
) -> ValidationResult:
    """Load and validate a workflow document file.

    Args:
        path: Path to the JSON or YAML document.
        check_data: Also check each node's configuration fields.
        check_edges: Also warn about edges that point at missing nodes.

    Returns:
        ValidationResult from all validators.

    Raises:
        WorkflowLoadError: If the file cannot be loaded.
        WorkflowSchemaError: If the document fails schema validation.
    """
    workflow = parse_workflow(path)
    return run_validators(
        build_graph(workflow), check_data=check_data, check_edges=check_edges
    )
