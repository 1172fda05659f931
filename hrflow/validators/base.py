"""Validation findings and their collection."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ValidationIssue:
    """One finding about a workflow.

    ``str()`` gives the plain message, which is what the designer shows.
    """

    code: str
    message: str
    severity: Severity = Severity.ERROR
    node_id: str | None = None
    edge_id: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message

    @property
    def location(self) -> str | None:
        """The node id, ``edge <id>`` for edge findings, or None."""
        if self.node_id:
            return self.node_id
        if self.edge_id:
            return f"edge {self.edge_id}"
        return None


@dataclass
class ValidationResult:
    """Findings from validating a workflow, in the order they were found."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity is Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return any(i.severity is Severity.ERROR for i in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(i.severity is Severity.WARNING for i in self.issues)

    @property
    def is_valid(self) -> bool:
        """A workflow is valid when nothing error-level was found."""
        return not self.has_errors

    def add(
        self,
        severity: Severity,
        code: str,
        message: str,
        node_id: str | None = None,
        edge_id: str | None = None,
        **details: Any,
    ) -> ValidationIssue:
        """Record a finding and return it.

        Extra keyword arguments end up in the issue's ``details``.
        """
        issue = ValidationIssue(code, message, severity, node_id, edge_id, details)
        self.issues.append(issue)
        return issue

    def add_error(self, code: str, message: str, **kwargs: Any) -> ValidationIssue:
        return self.add(Severity.ERROR, code, message, **kwargs)

    def add_warning(self, code: str, message: str, **kwargs: Any) -> ValidationIssue:
        return self.add(Severity.WARNING, code, message, **kwargs)

    def merge(self, other: "ValidationResult") -> None:
        self.issues.extend(other.issues)

    def as_dict(self) -> dict[str, list[str]]:
        """Plain ``{"errors": [...], "warnings": [...]}`` form of the result."""
        return {
            "errors": [str(i) for i in self.errors],
            "warnings": [str(i) for i in self.warnings],
        }
