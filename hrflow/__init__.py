"""hrflow: validation and simulated runs of HR workflow graphs."""

from .schema import (
    Edge,
    Node,
    NodeType,
    Workflow,
    deserialize,
    export_to_json,
    import_from_json,
    serialize,
)
from .simulation import SimulationResult, Simulator, resolve_order, simulate
from .validators import ValidationResult, validate_node_data, validate_workflow

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "Node",
    "NodeType",
    "Workflow",
    "deserialize",
    "export_to_json",
    "import_from_json",
    "serialize",
    "SimulationResult",
    "Simulator",
    "resolve_order",
    "simulate",
    "ValidationResult",
    "validate_node_data",
    "validate_workflow",
]
