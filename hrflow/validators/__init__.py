"""Validators for structural validation of workflows."""

from .base import Severity, ValidationIssue, ValidationResult
from .connectivity import check_dangling_edges, check_node_connections
from .cycles import check_cycles
from .node_data import check_node_data, validate_node_data
from .start_end import check_end_nodes, check_start_nodes
from .runner import run_validators, validate_workflow, validate_workflow_file

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_dangling_edges",
    "check_node_connections",
    "check_cycles",
    "check_node_data",
    "validate_node_data",
    "check_end_nodes",
    "check_start_nodes",
    "run_validators",
    "validate_workflow",
    "validate_workflow_file",
]
