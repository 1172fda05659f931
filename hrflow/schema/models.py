"""Pydantic models for workflow graphs."""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializeAsAny,
    ValidationInfo,
    field_validator,
    model_validator,
)

from .node_types import NodeType


class Position(BaseModel):
    """Canvas coordinate of a node. Presentation only."""

    x: int | float = 0
    y: int | float = 0


class NodeData(BaseModel):
    """Attributes shared by every node type.

    The data bag is free-form: values are kept exactly as given, whatever
    their type, and unknown keys are kept so a document survives a load/dump
    cycle unchanged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    label: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Dump the attributes that were actually provided, with wire names."""
        return self.model_dump(by_alias=True, exclude_unset=True)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up an attribute by its wire name. Empty strings count as missing."""
        value = self.to_dict().get(key)
        return default if value is None or value == "" else value


class StartData(NodeData):
    """Data carried by a start node."""

    description: Any = None
    metadata: Any = None


class TaskData(NodeData):
    """Data carried by a human task node."""

    description: Any = None
    assignee: Any = None
    due_date: Any = Field(default=None, alias="dueDate")
    priority: Any = None
    custom_fields: Any = Field(default=None, alias="customFields")


class ApprovalData(NodeData):
    """Data carried by an approval node."""

    approver_role: Any = Field(default=None, alias="approverRole")
    auto_approve_threshold: Any = Field(default=None, alias="autoApproveThreshold")
    requires_comment: Any = Field(default=None, alias="requiresComment")


class AutomatedData(NodeData):
    """Data carried by an automated action node."""

    action: Any = None
    parameters: Any = Field(default_factory=dict)


class EndData(NodeData):
    """Data carried by an end node."""

    message: Any = None
    show_summary: Any = Field(default=None, alias="showSummary")


def is_blank(value: Any) -> bool:
    """Check for a missing value or a string of whitespace."""
    return value is None or (isinstance(value, str) and value.strip() == "")


NODE_DATA_MODELS: dict[str, type[NodeData]] = {
    NodeType.START.value: StartData,
    NodeType.TASK.value: TaskData,
    NodeType.APPROVAL.value: ApprovalData,
    NodeType.AUTOMATED.value: AutomatedData,
    NodeType.END.value: EndData,
}


class Node(BaseModel):
    """A workflow stage placed on the canvas."""

    model_config = ConfigDict(extra="ignore")

    id: str
    type: str
    data: SerializeAsAny[NodeData]
    position: Position = Field(default_factory=Position)

    @model_validator(mode="before")
    @classmethod
    def normalize_node(cls, data: Any) -> Any:
        """Treat a missing or null data bag as empty."""
        if isinstance(data, dict) and data.get("data") is None:
            data = {**data, "data": {}}
        return data

    @field_validator("data", mode="before")
    @classmethod
    def select_data_model(cls, value: Any, info: ValidationInfo) -> Any:
        """Parse the data bag into the variant matching the node type."""
        data_model = NODE_DATA_MODELS.get(info.data.get("type"), NodeData)
        if isinstance(value, data_model):
            return value
        if isinstance(value, NodeData):
            value = value.to_dict()
        return data_model.model_validate(value)

    @property
    def label(self) -> Any:
        return self.data.label

    @property
    def display_name(self) -> str:
        """The label as text, or the type name when the node has none."""
        label = self.data.label
        return str(label) if label else self.type

    @property
    def node_type(self) -> NodeType | None:
        """The known node type, or None for types the designer does not define."""
        try:
            return NodeType(self.type)
        except ValueError:
            return None

    @property
    def is_start(self) -> bool:
        return self.type == NodeType.START.value

    @property
    def is_end(self) -> bool:
        return self.type == NodeType.END.value


class EdgeData(BaseModel):
    """Annotation attached to an edge. Has no effect on validation or ordering."""

    model_config = ConfigDict(extra="allow")

    label: str | None = None


class Edge(BaseModel):
    """A directed connection from one node to another."""

    model_config = ConfigDict(extra="ignore")

    id: str
    source: str
    target: str
    type: str = "default"
    data: EdgeData = Field(default_factory=EdgeData)

    @model_validator(mode="before")
    @classmethod
    def normalize_edge(cls, data: Any) -> Any:
        """Fill in the default edge type and an empty annotation."""
        if isinstance(data, dict):
            data = dict(data)
            if not data.get("type"):
                data["type"] = "default"
            if data.get("data") is None:
                data.pop("data", None)
        return data


class Workflow(BaseModel):
    """A complete node and edge graph authored in the designer.

    The model tolerates dangling edges and any number of start or end nodes;
    structural rules are checked by the validators, not here.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = "Untitled Workflow"
    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_workflow(cls, data: Any) -> Any:
        """Drop null collections and names so the defaults apply."""
        if isinstance(data, dict):
            data = {key: value for key, value in data.items() if value is not None}
        return data

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_node(self, node_id: str) -> Node | None:
        """Get the first node with the given id."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def start_nodes(self) -> list[Node]:
        return [n for n in self.nodes if n.is_start]

    def end_nodes(self) -> list[Node]:
        return [n for n in self.nodes if n.is_end]

    def incoming_edges(self, node_id: str) -> list[Edge]:
        return [e for e in self.edges if e.target == node_id]

    def outgoing_edges(self, node_id: str) -> list[Edge]:
        """Get the edges leaving a node, in declaration order."""
        return [e for e in self.edges if e.source == node_id]

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def add_node(self, node: Node | dict[str, Any]) -> Node:
        """Append a node and return it."""
        if not isinstance(node, Node):
            node = Node.model_validate(node)
        self.nodes.append(node)
        return node

    def update_node_data(self, node_id: str, new_data: dict[str, Any]) -> Node | None:
        """Merge new attributes into a node's data.

        Returns:
            The updated node, or None if no node has that id.
        """
        node = self.get_node(node_id)
        if node is None:
            return None
        merged = {**node.data.to_dict(), **new_data}
        node.data = type(node.data).model_validate(merged)
        return node

    def remove_node(self, node_id: str) -> None:
        """Remove a node together with every edge touching it."""
        self.nodes = [n for n in self.nodes if n.id != node_id]
        self.edges = [
            e for e in self.edges if e.source != node_id and e.target != node_id
        ]

    def add_edge(self, edge: Edge | dict[str, Any]) -> Edge:
        """Append an edge and return it. Endpoints are not checked."""
        if not isinstance(edge, Edge):
            edge = Edge.model_validate(edge)
        self.edges.append(edge)
        return edge

    def remove_edge(self, edge_id: str) -> None:
        self.edges = [e for e in self.edges if e.id != edge_id]
