"""Data models for simulated workflow runs."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..schema.node_types import NodeType


class SimulationStep(BaseModel):
    """One synthesized entry of a simulated run."""

    model_config = ConfigDict(populate_by_name=True)

    step_number: int = Field(alias="stepNumber")
    node_id: str = Field(alias="nodeId")
    node_type: str = Field(alias="nodeType")
    node_name: str = Field(alias="nodeName")
    description: str
    output: str
    # Only "success" is produced today
    status: str = "success"
    duration: int  # milliseconds
    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")
    metadata: dict[str, Any] = Field(default_factory=dict)


class SimulationSummary(BaseModel):
    """Number of steps per node type."""

    model_config = ConfigDict(populate_by_name=True)

    start_nodes: int = Field(default=0, alias="startNodes")
    task_nodes: int = Field(default=0, alias="taskNodes")
    approval_nodes: int = Field(default=0, alias="approvalNodes")
    automated_nodes: int = Field(default=0, alias="automatedNodes")
    end_nodes: int = Field(default=0, alias="endNodes")
    other_nodes: int = Field(default=0, alias="otherNodes")

    @classmethod
    def from_steps(cls, steps: list[SimulationStep]) -> "SimulationSummary":
        counts = {node_type.value: 0 for node_type in NodeType}
        other = 0
        for step in steps:
            if step.node_type in counts:
                counts[step.node_type] += 1
            else:
                other += 1
        return cls(
            start_nodes=counts[NodeType.START.value],
            task_nodes=counts[NodeType.TASK.value],
            approval_nodes=counts[NodeType.APPROVAL.value],
            automated_nodes=counts[NodeType.AUTOMATED.value],
            end_nodes=counts[NodeType.END.value],
            other_nodes=other,
        )


class SimulationResult(BaseModel):
    """Outcome of a simulated run.

    A failed result carries ``error`` and no steps.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    execution_id: str | None = Field(default=None, alias="executionId")
    workflow_name: str | None = Field(default=None, alias="workflowName")
    executed_at: datetime | None = Field(default=None, alias="executedAt")
    total_duration: int = Field(default=0, alias="totalDuration")  # milliseconds
    total_steps: int = Field(default=0, alias="totalSteps")
    status: str = "completed"
    steps: list[SimulationStep] = Field(default_factory=list)
    summary: SimulationSummary | None = None
    error: str | None = None

    @classmethod
    def failure(cls, error: str) -> "SimulationResult":
        """Build a failed result."""
        return cls(success=False, status="failed", error=error)

    @property
    def node_ids(self) -> list[str]:
        return [step.node_id for step in self.steps]

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
