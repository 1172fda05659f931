"""Per-node configuration validators."""

from ..graph.workflow_graph import WorkflowGraph
from ..schema.models import Node, is_blank
from ..schema.node_types import NodeType
from .base import ValidationResult

# Fields a node must fill in beyond its title: (attribute, code, description)
REQUIRED_FIELDS: dict[str, list[tuple[str, str, str]]] = {
    NodeType.TASK.value: [("assignee", "MISSING_ASSIGNEE", "an assignee")],
    NodeType.APPROVAL.value: [
        ("approver_role", "MISSING_APPROVER_ROLE", "an approver role")
    ],
    NodeType.AUTOMATED.value: [
        ("action", "MISSING_ACTION", "an action selected")
    ],
}


def validate_node_data(node: Node) -> ValidationResult:
    """Check that a node's configuration form has been filled in.

    Every known node type needs a title; tasks need an assignee, approvals
    an approver role and automated nodes an action. Nodes of unknown types
    are not checked.

    Args:
        node: The node to check.

    Returns:
        ValidationResult with errors for missing fields.
    """
    result = ValidationResult()

    node_type = node.node_type
    if node_type is None:
        return result

    kind = node_type.value.capitalize()
    if is_blank(node.data.label):
        result.add_error(
            code="MISSING_TITLE",
            message=f"{kind} node must have a title",
            node_id=node.id,
        )

    for attribute, code, description in REQUIRED_FIELDS.get(node_type.value, []):
        if is_blank(getattr(node.data, attribute, None)):
            result.add_error(
                code=code,
                message=f"{kind} node must have {description}",
                node_id=node.id,
            )

    return result


def check_node_data(graph: WorkflowGraph) -> ValidationResult:
    """Run validate_node_data over every node in the graph."""
    result = ValidationResult()
    for node in graph.get_nodes():
        result.merge(validate_node_data(node))
    return result
