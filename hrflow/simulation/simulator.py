"""Simulated execution of workflows."""

import asyncio
import logging
import random
import string
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from ..schema.errors import WorkflowSchemaError
from ..schema.models import Node, Workflow
from ..schema.node_types import NodeType
from ..schema.serializer import to_workflow
from .descriptions import describe_node, step_metadata
from .models import SimulationResult, SimulationStep, SimulationSummary
from .order import resolve_order
from .settings import SimulationSettings

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

NO_NODES_ERROR = "Invalid workflow data: No nodes found"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Simulator:
    """Produces a synthetic step-by-step trace of a workflow run.

    Nothing is executed: each node in the execution order becomes a
    successful step with generated text and a made-up duration. The clock
    and random source can be injected so runs are reproducible in tests.

    Args:
        settings: Latency and duration settings.
        clock: Returns the time the run starts.
        rng: Source of durations and execution ids.
    """

    def __init__(
        self,
        settings: SimulationSettings | None = None,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ):
        self.settings = settings or SimulationSettings()
        self._clock = clock or utc_now
        self._rng = rng or random.Random()

    async def simulate(self, document: Workflow | dict[str, Any] | None) -> SimulationResult:
        """Simulate a workflow after the configured latency."""
        if self.settings.latency:
            await asyncio.sleep(self.settings.latency)
        return self.run(document)

    def run(self, document: Workflow | dict[str, Any] | None) -> SimulationResult:
        """Simulate a workflow.

        Args:
            document: A Workflow or a workflow document dict.

        Returns:
            The simulation result. Missing or unreadable nodes give a failed
            result rather than an exception.
        """
        workflow, error = self._load(document)
        if workflow is None:
            logger.warning("Simulation rejected: %s", error)
            return SimulationResult.failure(error)

        started_at = self._clock()
        current = started_at
        steps: list[SimulationStep] = []

        for step_number, node in enumerate(resolve_order(workflow), start=1):
            duration = self._duration_for(node)
            step_start = current
            current = step_start + timedelta(milliseconds=duration)
            description, output = describe_node(node, step_number, step_start)

            steps.append(
                SimulationStep(
                    step_number=step_number,
                    node_id=node.id,
                    node_type=node.type,
                    node_name=node.display_name,
                    description=description,
                    output=output,
                    duration=duration,
                    start_time=step_start,
                    end_time=current,
                    metadata=step_metadata(node),
                )
            )

        result = SimulationResult(
            success=True,
            execution_id=self._execution_id(started_at),
            workflow_name=workflow.name,
            executed_at=started_at,
            total_duration=sum(step.duration for step in steps),
            total_steps=len(steps),
            status="completed",
            steps=steps,
            summary=SimulationSummary.from_steps(steps),
        )
        logger.info(
            "Simulated workflow %r (%s): %d steps, %dms",
            result.workflow_name,
            result.execution_id,
            result.total_steps,
            result.total_duration,
        )
        return result

    def _load(
        self, document: Workflow | dict[str, Any] | None
    ) -> tuple[Workflow | None, str]:
        if isinstance(document, Workflow):
            if not document.nodes:
                return None, NO_NODES_ERROR
            return document, ""

        if document is None or not document.get("nodes"):
            return None, NO_NODES_ERROR

        try:
            return to_workflow(document), ""
        except WorkflowSchemaError as e:
            details = "; ".join(e.describe())
            return None, f"Invalid workflow data: {details or e}"

    def _duration_for(self, node: Node) -> int:
        if node.is_start or node.is_end:
            return self.settings.fixed_step_ms
        if node.type == NodeType.APPROVAL.value:
            duration_range = self.settings.approval_range
        else:
            duration_range = self.settings.default_range
        return self._rng.randint(duration_range.min_ms, duration_range.max_ms)

    def _execution_id(self, started_at: datetime) -> str:
        suffix = "".join(self._rng.choices(string.ascii_lowercase + string.digits, k=9))
        return f"exec_{int(started_at.timestamp() * 1000)}_{suffix}"


async def simulate(
    document: Workflow | dict[str, Any] | None,
    settings: SimulationSettings | None = None,
) -> SimulationResult:
    """Simulate a workflow document with a default Simulator."""
    return await Simulator(settings=settings).simulate(document)
