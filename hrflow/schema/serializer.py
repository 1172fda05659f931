"""Conversion between workflow graphs and the exported document format.

The exported document looks like::

    {
      "name": "Onboarding",
      "nodes": [{"id": ..., "type": ..., "data": {...}, "position": {"x": 0, "y": 0}}],
      "edges": [{"id": ..., "source": ..., "target": ..., "type": "default"}],
      "exportedAt": "2025-01-01T09:00:00.000Z"
    }
"""

import json
import logging
from datetime import date, datetime, timezone
from typing import Any, Iterable

from pydantic import ValidationError

from .errors import WorkflowSchemaError
from .models import Edge, Node, Workflow

logger = logging.getLogger(__name__)

DEFAULT_WORKFLOW_NAME = "Untitled Workflow"


def serialize(
    nodes: Iterable[Node | dict[str, Any]],
    edges: Iterable[Edge | dict[str, Any]],
    name: str = DEFAULT_WORKFLOW_NAME,
    exported_at: datetime | None = None,
) -> dict[str, Any]:
    """Convert nodes and edges into a JSON-compatible workflow document.

    Presentation fields added by the canvas are dropped: unknown envelope keys
    are ignored by the models and callables are stripped from node data.

    Args:
        nodes: Nodes as models or plain dicts.
        edges: Edges as models or plain dicts.
        name: Workflow name stored in the document.
        exported_at: Export timestamp, defaults to now (UTC).

    Returns:
        The workflow document.
    """
    if exported_at is None:
        exported_at = datetime.now(timezone.utc)

    return {
        "name": name,
        "nodes": [_node_document(_as_node(node)) for node in nodes],
        "edges": [_edge_document(_as_edge(edge)) for edge in edges],
        "exportedAt": format_timestamp(exported_at),
    }


def serialize_workflow(
    workflow: Workflow, exported_at: datetime | None = None
) -> dict[str, Any]:
    """Serialize a Workflow model, keeping its name."""
    return serialize(
        workflow.nodes, workflow.edges, name=workflow.name, exported_at=exported_at
    )


def deserialize(document: dict[str, Any]) -> tuple[list[Node], list[Edge]]:
    """Convert a workflow document back into nodes and edges.

    Raises:
        WorkflowSchemaError: If the document does not have the expected shape.
    """
    workflow = to_workflow(document)
    return workflow.nodes, workflow.edges


def to_workflow(document: dict[str, Any]) -> Workflow:
    """Convert a workflow document into a Workflow model.

    Raises:
        WorkflowSchemaError: If the document does not have the expected shape.
    """
    if not isinstance(document, dict):
        raise WorkflowSchemaError(
            f"Expected a mapping at the document root, got {type(document).__name__}"
        )

    try:
        return Workflow.model_validate(document)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise WorkflowSchemaError(
            f"Workflow document failed validation with {len(errors)} error(s)", errors
        ) from e


def export_to_json(
    nodes: Iterable[Node | dict[str, Any]],
    edges: Iterable[Edge | dict[str, Any]],
    name: str = DEFAULT_WORKFLOW_NAME,
    exported_at: datetime | None = None,
) -> str:
    """Serialize nodes and edges to indented JSON text."""
    document = serialize(nodes, edges, name=name, exported_at=exported_at)
    return json.dumps(document, indent=2, default=_json_default)


def import_from_json(text: str) -> tuple[list[Node], list[Edge]] | None:
    """Parse JSON text into nodes and edges.

    Returns:
        The nodes and edges, or None if the text is not a valid workflow document.
    """
    try:
        document = json.loads(text)
    except (TypeError, ValueError) as e:
        logger.warning("Error parsing workflow JSON: %s", e)
        return None

    try:
        return deserialize(document)
    except WorkflowSchemaError as e:
        logger.warning("Error parsing workflow JSON: %s %s", e, e.errors)
        return None


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601 with millisecond precision and a Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _json_default(value: Any) -> Any:
    # YAML documents can carry unquoted dates in node data
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _as_node(node: Node | dict[str, Any]) -> Node:
    return node if isinstance(node, Node) else Node.model_validate(node)


def _as_edge(edge: Edge | dict[str, Any]) -> Edge:
    return edge if isinstance(edge, Edge) else Edge.model_validate(edge)


def _node_document(node: Node) -> dict[str, Any]:
    data = {
        key: value for key, value in node.data.to_dict().items() if not callable(value)
    }
    return {
        "id": node.id,
        "type": node.type,
        "data": data,
        "position": node.position.model_dump(),
    }


def _edge_document(edge: Edge) -> dict[str, Any]:
    return {
        "id": edge.id,
        "source": edge.source,
        "target": edge.target,
        "type": edge.type,
    }
