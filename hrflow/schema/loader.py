"""Loading workflow documents from JSON or YAML files."""

import json
from pathlib import Path

import yaml

from .errors import WorkflowLoadError
from .models import Workflow
from .serializer import to_workflow


def load_document(path: str | Path) -> dict:
    """Load a workflow document file and return the raw data.

    Files ending in ``.json`` are read as JSON, anything else as YAML.

    Args:
        path: Path to the document.

    Returns:
        The parsed document as a dictionary.

    Raises:
        WorkflowLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise WorkflowLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise WorkflowLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except json.JSONDecodeError as e:
        raise WorkflowLoadError(f"Invalid JSON: {e}", str(path)) from e
    except yaml.YAMLError as e:
        raise WorkflowLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise WorkflowLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise WorkflowLoadError(
            f"Expected a mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def parse_workflow(path: str | Path) -> Workflow:
    """Load and parse a workflow document file.

    Raises:
        WorkflowLoadError: If the file cannot be read or parsed.
        WorkflowSchemaError: If the data fails validation.
    """
    return to_workflow(load_document(path))


def parse_workflow_from_string(text: str) -> Workflow:
    """Parse a JSON or YAML string into a Workflow.

    Raises:
        WorkflowLoadError: If the text cannot be parsed.
        WorkflowSchemaError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise WorkflowLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise WorkflowLoadError(f"Expected a mapping at root, got {type(data).__name__}")

    return to_workflow(data)
