"""Tests for validation results."""

from hrflow.validators.base import Severity, ValidationIssue, ValidationResult


class TestValidationIssue:
    def test_str_is_message(self):
        issue = ValidationIssue("NO_END_NODE", "Workflow must have at least one End node")

        assert str(issue) == "Workflow must have at least one End node"
        assert issue.severity is Severity.ERROR

    def test_location(self):
        assert ValidationIssue("X", "m", node_id="t1").location == "t1"
        assert ValidationIssue("X", "m", edge_id="e1").location == "edge e1"
        assert ValidationIssue("X", "m").location is None


class TestValidationResult:
    def test_add_keeps_order_and_details(self):
        result = ValidationResult()
        result.add_warning("DANGLING_EDGE", "dangling", edge_id="e1", missing_nodes=["x"])
        issue = result.add_error("NO_END_NODE", "no end")

        assert [i.code for i in result.issues] == ["DANGLING_EDGE", "NO_END_NODE"]
        assert result.issues[0].details == {"missing_nodes": ["x"]}
        assert issue is result.errors[0]

    def test_validity(self):
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings

        result.add_warning("W", "warn")
        assert result.is_valid
        assert result.has_warnings

        result.add_error("E", "err")
        assert not result.is_valid

    def test_merge_and_as_dict(self):
        first = ValidationResult()
        first.add_error("A", "first error")
        second = ValidationResult()
        second.add_warning("B", "a warning")
        second.add_error("C", "second error")

        first.merge(second)

        assert first.as_dict() == {
            "errors": ["first error", "second error"],
            "warnings": ["a warning"],
        }
