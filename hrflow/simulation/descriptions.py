"""Human-readable step text for each node type."""

from datetime import datetime
from typing import Any

from ..schema.models import (
    ApprovalData,
    AutomatedData,
    EndData,
    Node,
    StartData,
    TaskData,
)
from .automations import render_automation_output

DEFAULT_INITIATOR = "System"
DEFAULT_ASSIGNEE = "unassigned"
DEFAULT_APPROVER = "Manager"
DEFAULT_ACTION = "automation"
DEFAULT_END_MESSAGE = "All tasks completed. Workflow terminated gracefully."

# Reference numbers in outputs are 1000 + position in the order
REFERENCE_BASE = 1000


def describe_node(node: Node, step_number: int, started_at: datetime) -> tuple[str, str]:
    """Build the description and output text for a simulated step.

    The description depends only on the node. The output also uses the step
    number (for generated ids) and the step start time.

    Args:
        node: The node being simulated.
        step_number: 1-based position in the execution order.
        started_at: When the step starts.

    Returns:
        A (description, output) pair.
    """
    data = node.data
    ref = REFERENCE_BASE + step_number - 1

    if isinstance(data, StartData):
        return _describe_start(data)
    if isinstance(data, TaskData):
        return _describe_task(node, data, ref)
    if isinstance(data, ApprovalData):
        return _describe_approval(data)
    if isinstance(data, AutomatedData):
        return _describe_automated(data, ref, started_at)
    if isinstance(data, EndData):
        return _describe_end(data)

    return f"Processing {node.type} node", "Step executed successfully"


def step_metadata(node: Node) -> dict[str, Any]:
    """Pick the attributes shown alongside a step."""
    values = node.data.to_dict()
    return {
        key: values[key]
        for key in ("assignee", "action", "parameters")
        if values.get(key) is not None
    }


def _describe_start(data: StartData) -> tuple[str, str]:
    initiator = data.get("assignee", DEFAULT_INITIATOR)
    description = f"Workflow initiated by {initiator}"
    if data.description:
        description += f": {data.description}"

    output = "Workflow started successfully. All prerequisites validated."
    if data.metadata:
        output += f" Context: {_format_values(data.metadata)}."
    return description, output


def _describe_task(node: Node, data: TaskData, ref: int) -> tuple[str, str]:
    assignee = data.assignee or DEFAULT_ASSIGNEE
    description = f'Task "{node.display_name}" assigned to {assignee}'
    if data.description:
        description += f": {data.description}"

    output = f"Task created with ID: TASK-{ref}. Notification sent to {assignee}."
    if data.priority:
        output += f" Priority: {data.priority}."
    if data.due_date:
        output += f" Due: {data.due_date}."
    if data.custom_fields:
        output += f" Fields: {_format_values(data.custom_fields)}."
    return description, output


def _describe_approval(data: ApprovalData) -> tuple[str, str]:
    approver = data.approver_role or data.get("assignee", DEFAULT_APPROVER)
    description = f"Approval requested from {approver}"

    output = (
        f"Approval request sent. Response: Approved by {approver}. "
        "Comments: Looks good to proceed."
    )
    if data.auto_approve_threshold not in (None, ""):
        output += f" Auto-approve threshold: {data.auto_approve_threshold}."
    if data.requires_comment:
        output += " Comment required from approver."
    return description, output


def _describe_automated(
    data: AutomatedData, ref: int, started_at: datetime
) -> tuple[str, str]:
    action = str(data.action) if data.action else DEFAULT_ACTION
    description = f"Executing automated action: {action}"

    parameters = data.parameters if isinstance(data.parameters, dict) else {}
    values = {**data.to_dict(), **parameters}
    output = render_automation_output(
        action,
        values,
        parameters,
        ref=ref,
        time=started_at.strftime("%H:%M:%S"),
    )
    return description, output


def _describe_end(data: EndData) -> tuple[str, str]:
    message = str(data.message) if data.message else DEFAULT_END_MESSAGE
    return "Workflow completed successfully", message


def _format_values(value: Any) -> str:
    """Render a mapping as ``k=v`` pairs; anything else as its text."""
    if isinstance(value, dict):
        return ", ".join(f"{k}={v}" for k, v in value.items())
    return str(value)
