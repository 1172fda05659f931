"""Tests for simulated workflow runs."""

import random
from datetime import timedelta

import pytest
from pydantic import ValidationError

from hrflow.schema.loader import parse_workflow
from hrflow.schema.models import Workflow
from hrflow.simulation.settings import DurationRange, SimulationSettings
from hrflow.simulation.simulator import NO_NODES_ERROR, Simulator, simulate

from ..conftest import FIXED_TIME, make_workflow


class TestSimulatorRun:
    def test_steps_follow_execution_order(self, simulator, review_workflow):
        result = simulator.run(review_workflow)

        assert result.success is True
        assert result.status == "completed"
        assert result.node_ids == ["s1", "t1", "e1"]
        assert [s.step_number for s in result.steps] == [1, 2, 3]
        assert result.total_steps == 3

    def test_accepts_document_dict(self, simulator, review_nodes, review_edges):
        result = simulator.run({"name": "Review", "nodes": review_nodes, "edges": review_edges})

        assert result.success is True
        assert result.workflow_name == "Review"
        assert result.node_ids == ["s1", "t1", "e1"]

    def test_step_text(self, simulator, review_workflow):
        steps = simulator.run(review_workflow).steps

        assert steps[0].node_name == "Begin"
        assert steps[0].description == "Workflow initiated by System"
        assert steps[1].description == 'Task "Review" assigned to Alice'
        assert steps[1].output == "Task created with ID: TASK-1001. Notification sent to Alice."
        assert steps[1].metadata == {"assignee": "Alice"}
        assert steps[2].output == "All tasks completed. Workflow terminated gracefully."
        assert all(s.status == "success" for s in steps)

    def test_timestamps_chain(self, simulator, review_workflow):
        result = simulator.run(review_workflow)
        steps = result.steps

        assert result.executed_at == FIXED_TIME
        assert steps[0].start_time == FIXED_TIME
        for step in steps:
            assert step.end_time - step.start_time == timedelta(milliseconds=step.duration)
        for previous, following in zip(steps, steps[1:]):
            assert following.start_time == previous.end_time

    def test_durations(self, simulator, review_workflow):
        result = simulator.run(review_workflow)
        start, task, end = result.steps

        assert start.duration == 100
        assert end.duration == 100
        assert 500 <= task.duration <= 3499
        assert result.total_duration == sum(s.duration for s in result.steps)

    def test_approval_duration_range(self, simulator):
        workflow = make_workflow(
            [("s", "start"), ("a", "approval"), ("e", "end")], [("s", "a"), ("a", "e")]
        )

        for _ in range(20):
            approval = simulator.run(workflow).steps[1]
            assert 1000 <= approval.duration <= 2999

    def test_custom_duration_settings(self, review_workflow):
        settings = SimulationSettings(
            latency=0,
            fixed_step_ms=10,
            default_range=DurationRange(min_ms=7, max_ms=7),
        )
        result = Simulator(settings=settings, clock=lambda: FIXED_TIME).run(review_workflow)

        assert [s.duration for s in result.steps] == [10, 7, 10]
        assert result.total_duration == 27

    def test_execution_id(self, simulator, review_workflow):
        execution_id = simulator.run(review_workflow).execution_id

        prefix = f"exec_{int(FIXED_TIME.timestamp() * 1000)}_"
        assert execution_id.startswith(prefix)
        suffix = execution_id[len(prefix):]
        assert len(suffix) == 9
        assert suffix.isalnum()

    def test_seeded_runs_are_identical(self, review_workflow):
        def run():
            return Simulator(
                settings=SimulationSettings(latency=0),
                clock=lambda: FIXED_TIME,
                rng=random.Random(7),
            ).run(review_workflow)

        assert run().to_dict() == run().to_dict()

    def test_text_does_not_depend_on_randomness(self, review_workflow):
        first = Simulator(clock=lambda: FIXED_TIME, rng=random.Random(1)).run(review_workflow)
        second = Simulator(clock=lambda: FIXED_TIME, rng=random.Random(2)).run(review_workflow)

        assert [s.description for s in first.steps] == [s.description for s in second.steps]
        assert [s.node_id for s in first.steps] == [s.node_id for s in second.steps]

    def test_does_not_validate(self, simulator):
        # No start node: every node is simulated in collection order
        workflow = make_workflow([("b", "task"), ("a", "task")], [])

        result = simulator.run(workflow)

        assert result.success is True
        assert result.node_ids == ["b", "a"]

    def test_unknown_node_type(self, simulator):
        workflow = Workflow(nodes=[{"id": "w", "type": "webhook", "data": {}}])

        step = simulator.run(workflow).steps[0]

        assert step.node_name == "webhook"
        assert step.description == "Processing webhook node"
        assert step.output == "Step executed successfully"

    def test_summary(self, simulator, examples_dir):
        result = simulator.run(parse_workflow(examples_dir / "onboarding.json"))

        summary = result.summary
        assert summary.start_nodes == 1
        assert summary.task_nodes == 1
        assert summary.approval_nodes == 1
        assert summary.automated_nodes == 2
        assert summary.end_nodes == 1
        assert summary.other_nodes == 0

    def test_example_outputs(self, simulator, examples_dir):
        steps = simulator.run(parse_workflow(examples_dir / "onboarding.json")).steps

        assert [s.node_id for s in steps] == [
            "start-1",
            "task-1",
            "approval-1",
            "auto-1",
            "end-1",
            "auto-2",
        ]
        assert steps[3].output == (
            'Email sent successfully to new.hire@example.com. Subject: "Welcome aboard". '
            "Message ID: MSG-1003"
        )
        assert steps[4].output == "Employee onboarding complete"
        assert steps[5].output == (
            "Support ticket created in ServiceNow. Ticket ID: TICKET-1005. Priority: High"
        )


class TestSimulatorFailures:
    @pytest.mark.parametrize("document", [None, {}, {"nodes": []}, {"nodes": None}])
    def test_no_nodes(self, simulator, document):
        result = simulator.run(document)

        assert result.success is False
        assert result.status == "failed"
        assert result.error == NO_NODES_ERROR
        assert result.steps == []

    def test_empty_workflow_model(self, simulator):
        result = simulator.run(Workflow())

        assert result.error == NO_NODES_ERROR

    def test_malformed_nodes(self, simulator):
        result = simulator.run({"nodes": [{"id": "x"}]})

        assert result.success is False
        assert result.error.startswith("Invalid workflow data: nodes.0.type")

    def test_failure_logged(self, simulator, caplog):
        with caplog.at_level("WARNING", logger="hrflow.simulation.simulator"):
            simulator.run(None)

        assert "Simulation rejected" in caplog.text


class TestResultDocument:
    def test_camel_case_keys(self, simulator, review_workflow):
        document = simulator.run(review_workflow).to_dict()

        assert {
            "success",
            "executionId",
            "workflowName",
            "executedAt",
            "totalDuration",
            "totalSteps",
            "status",
            "steps",
            "summary",
        } <= set(document)
        step = document["steps"][0]
        assert step["stepNumber"] == 1
        assert step["nodeId"] == "s1"
        assert step["nodeType"] == "start"
        assert step["nodeName"] == "Begin"
        assert step["startTime"].startswith("2025-01-15T09:30:00")
        assert document["summary"]["taskNodes"] == 1

    def test_failure_document(self, simulator):
        document = simulator.run(None).to_dict()

        assert document["success"] is False
        assert document["status"] == "failed"
        assert document["error"] == NO_NODES_ERROR


class TestAsyncSimulate:
    @pytest.mark.asyncio
    async def test_simulate_method(self, simulator, review_workflow):
        result = await simulator.simulate(review_workflow)

        assert result.node_ids == ["s1", "t1", "e1"]

    @pytest.mark.asyncio
    async def test_simulate_waits_for_latency(self, review_workflow):
        settings = SimulationSettings(latency=0.01)

        result = await Simulator(settings=settings).simulate(review_workflow)

        assert result.success is True

    @pytest.mark.asyncio
    async def test_module_level_simulate(self, review_nodes, review_edges):
        result = await simulate(
            {"nodes": review_nodes, "edges": review_edges},
            settings=SimulationSettings(latency=0),
        )

        assert result.success is True
        assert result.workflow_name == "Untitled Workflow"

    @pytest.mark.asyncio
    async def test_module_level_simulate_failure(self):
        result = await simulate(None, settings=SimulationSettings(latency=0))

        assert result.error == NO_NODES_ERROR


class TestSimulationSettings:
    def test_defaults(self):
        settings = SimulationSettings()

        assert settings.latency == 0.5
        assert settings.fixed_step_ms == 100
        assert (settings.default_range.min_ms, settings.default_range.max_ms) == (500, 3499)
        assert (settings.approval_range.min_ms, settings.approval_range.max_ms) == (1000, 2999)

    def test_negative_latency_rejected(self):
        with pytest.raises(ValidationError):
            SimulationSettings(latency=-1)

    def test_inverted_range_rejected(self):
        with pytest.raises(ValidationError):
            DurationRange(min_ms=10, max_ms=5)

    def test_zero_duration_rejected(self):
        with pytest.raises(ValidationError):
            DurationRange(min_ms=0, max_ms=5)
