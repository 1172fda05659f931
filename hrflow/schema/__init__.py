"""Schema layer: workflow models, loading and serialization."""

from .errors import WorkflowError, WorkflowLoadError, WorkflowSchemaError
from .node_types import NodeType
from .models import (
    ApprovalData,
    AutomatedData,
    Edge,
    EdgeData,
    EndData,
    Node,
    NodeData,
    Position,
    StartData,
    TaskData,
    Workflow,
)
from .loader import load_document, parse_workflow, parse_workflow_from_string
from .serializer import (
    deserialize,
    export_to_json,
    import_from_json,
    serialize,
    serialize_workflow,
    to_workflow,
)

__all__ = [
    "WorkflowError",
    "WorkflowLoadError",
    "WorkflowSchemaError",
    "NodeType",
    "ApprovalData",
    "AutomatedData",
    "Edge",
    "EdgeData",
    "EndData",
    "Node",
    "NodeData",
    "Position",
    "StartData",
    "TaskData",
    "Workflow",
    "load_document",
    "parse_workflow",
    "parse_workflow_from_string",
    "deserialize",
    "export_to_json",
    "import_from_json",
    "serialize",
    "serialize_workflow",
    "to_workflow",
]
