"""Node type definitions for workflow graphs."""

from enum import Enum


class NodeType(str, Enum):
    """Types of workflow nodes known to the designer."""

    START = "start"
    TASK = "task"
    APPROVAL = "approval"
    AUTOMATED = "automated"
    END = "end"
