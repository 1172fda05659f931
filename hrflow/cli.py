"""Command-line interface for hrflow."""

import asyncio
import json
import logging
import random
import sys
from pathlib import Path

import click

from .graph.builder import build_graph
from .output.formatter import (
    format_execution_order,
    format_simulation_result,
    format_validation_result,
)
from .schema.errors import WorkflowLoadError, WorkflowSchemaError
from .schema.loader import parse_workflow
from .schema.models import Workflow
from .schema.serializer import export_to_json
from .simulation.automations import get_automations
from .simulation.order import resolve_order
from .simulation.settings import SimulationSettings
from .simulation.simulator import Simulator
from .validators.runner import run_validators

LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"

FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)


def _load_workflow(workflow_file: str) -> Workflow:
    """Load a workflow file, exiting with status 2 if it cannot be read."""
    try:
        return parse_workflow(workflow_file)
    except WorkflowLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except WorkflowSchemaError as e:
        click.echo(f"Schema validation error: {e}", err=True)
        for line in e.describe():
            click.echo(f"  - {line}", err=True)
        sys.exit(2)


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """hrflow: validate and simulate HR workflow designs."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


@main.command()
@click.argument("workflow_file", type=click.Path(exists=True))
@FORMAT_OPTION
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
@click.option(
    "--check-data",
    is_flag=True,
    default=False,
    help="Also check that every node's fields are filled in",
)
@click.option(
    "--check-edges",
    is_flag=True,
    default=False,
    help="Also warn about connections to nodes that do not exist",
)
def validate(
    workflow_file: str,
    output_format: str,
    strict: bool,
    check_data: bool,
    check_edges: bool,
):
    """Validate a workflow document.

    WORKFLOW_FILE is an exported JSON document or a YAML file of the same shape.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File or schema error
    """
    workflow = _load_workflow(workflow_file)
    result = run_validators(
        build_graph(workflow), check_data=check_data, check_edges=check_edges
    )

    click.echo(format_validation_result(result, output_format))  # type: ignore

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.argument("workflow_file", type=click.Path(exists=True))
@FORMAT_OPTION
def order(workflow_file: str, output_format: str):
    """Print the order in which a simulated run visits the nodes."""
    workflow = _load_workflow(workflow_file)
    click.echo(format_execution_order(resolve_order(workflow), output_format))  # type: ignore


@main.command()
@click.argument("workflow_file", type=click.Path(exists=True))
@FORMAT_OPTION
@click.option("--seed", type=int, default=None, help="Seed for synthetic durations")
@click.option(
    "--latency",
    type=click.FloatRange(min=0),
    default=None,
    help="Seconds to wait before the run (default 0.5)",
)
@click.option(
    "--skip-validation",
    is_flag=True,
    default=False,
    help="Simulate even if the workflow has validation errors",
)
def simulate(
    workflow_file: str,
    output_format: str,
    seed: int | None,
    latency: float | None,
    skip_validation: bool,
):
    """Run a simulated execution of a workflow.

    The workflow is validated first and not simulated if it has errors.

    Exit codes:
      0 - Simulation completed
      1 - Validation errors or failed simulation
      2 - File or schema error
    """
    workflow = _load_workflow(workflow_file)

    if not skip_validation:
        validation = run_validators(build_graph(workflow))
        if validation.has_errors:
            click.echo(format_validation_result(validation, output_format))  # type: ignore
            sys.exit(1)

    settings = SimulationSettings()
    if latency is not None:
        settings = SimulationSettings(latency=latency)
    rng = random.Random(seed) if seed is not None else None

    simulator = Simulator(settings=settings, rng=rng)
    result = asyncio.run(simulator.simulate(workflow))

    click.echo(format_simulation_result(result, output_format))  # type: ignore
    sys.exit(0 if result.success else 1)


@main.command("export")
@click.argument("workflow_file", type=click.Path(exists=True))
@click.option("--name", default=None, help="Workflow name to store in the document")
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the document here instead of stdout",
)
def export_cmd(workflow_file: str, name: str | None, output_path: str | None):
    """Re-export a workflow file as a normalized JSON document.

    Presentation-only fields are dropped and edge types filled in.
    """
    workflow = _load_workflow(workflow_file)
    if name:
        workflow.name = name

    text = export_to_json(workflow.nodes, workflow.edges, name=workflow.name)

    if output_path:
        Path(output_path).write_text(text + "\n", encoding="utf-8")
        click.echo(f"Exported: {output_path}")
    else:
        click.echo(text)


@main.command()
@FORMAT_OPTION
def automations(output_format: str):
    """List the actions available to automated nodes."""
    actions = get_automations()

    if output_format == "json":
        click.echo(
            json.dumps(
                [{"id": a.id, "label": a.label, "params": a.params} for a in actions],
                indent=2,
            )
        )
        return

    for action in actions:
        click.echo(f"{action.id}: {action.label} ({', '.join(action.params)})")


if __name__ == "__main__":
    main()
