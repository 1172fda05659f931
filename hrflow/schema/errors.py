"""Exceptions raised when a workflow document cannot be read."""


class WorkflowError(Exception):
    """Base class for problems with a workflow document."""


class WorkflowLoadError(WorkflowError):
    """The document file could not be read or parsed."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class WorkflowSchemaError(WorkflowError):
    """The document does not have the workflow shape.

    ``errors`` holds one ``{"loc", "msg", "type"}`` entry per problem, with
    ``loc`` a dotted path such as ``nodes.0.type``.
    """

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []

    def describe(self) -> list[str]:
        """One ``loc: msg`` line per problem."""
        return [f"{err['loc']}: {err['msg']}" for err in self.errors]
