"""Output formatting for validation and simulation results."""

import json
from typing import Literal

from ..schema.models import Node
from ..simulation.models import SimulationResult
from ..validators.base import Severity, ValidationIssue, ValidationResult


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a validation result for output.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_validation_json(result)
    return _format_validation_text(result)


def format_simulation_result(
    result: SimulationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a simulation result for output."""
    if format == "json":
        return json.dumps(result.to_dict(), indent=2)
    return _format_simulation_text(result)


def format_execution_order(
    nodes: list[Node],
    format: Literal["text", "json"] = "text",
) -> str:
    """Format an execution order as a numbered list or a JSON array."""
    if format == "json":
        return json.dumps(
            [{"id": n.id, "type": n.type, "name": n.display_name} for n in nodes],
            indent=2,
        )
    return "\n".join(
        f"{index}. {node.display_name} ({node.type}) [{node.id}]"
        for index, node in enumerate(nodes, start=1)
    )


def _format_validation_text(result: ValidationResult) -> str:
    """Format result as human-readable text."""
    lines: list[str] = []

    errors = result.errors
    warnings = result.warnings

    # Errors section
    lines.append("ERRORS:")
    if errors:
        for issue in errors:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    lines.append("")

    # Warnings section
    lines.append("WARNINGS:")
    if warnings:
        for issue in warnings:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    # Summary
    lines.append("")
    if result.is_valid:
        if warnings:
            lines.append(f"Validation passed with {len(warnings)} warning(s)")
        else:
            lines.append("Validation passed")
    else:
        lines.append(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)"
        )

    return "\n".join(lines)


def _format_issue_text(issue: ValidationIssue) -> str:
    """Format a single issue as text."""
    location = f"[{issue.location}] " if issue.location else ""

    symbol = "✘" if issue.severity == Severity.ERROR else "⚠"

    return f"{symbol} {issue.code}: {location}{issue.message}"


def _format_validation_json(result: ValidationResult) -> str:
    """Format result as JSON."""
    data = {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        **result.as_dict(),
        "issues": [
            {
                "code": issue.code,
                "message": issue.message,
                "severity": issue.severity.value,
                "node_id": issue.node_id,
                "edge_id": issue.edge_id,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)


def _format_simulation_text(result: SimulationResult) -> str:
    """Format a simulation trace as human-readable text."""
    if not result.success:
        return f"Simulation failed: {result.error}"

    lines = [
        f"Workflow: {result.workflow_name}",
        f"Execution: {result.execution_id}",
        "",
    ]
    for step in result.steps:
        lines.append(
            f"{step.step_number}. {step.node_name} ({step.node_type}) "
            f"- {step.status} in {step.duration}ms"
        )
        lines.append(f"   {step.description}")
        lines.append(f"   -> {step.output}")

    lines.append("")
    lines.append(
        f"Completed {result.total_steps} step(s) in {result.total_duration}ms"
    )
    return "\n".join(lines)
