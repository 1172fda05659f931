"""Catalog of automated actions and their simulated outputs."""

from dataclasses import dataclass, field
from string import Formatter
from typing import Any

from ..schema.models import is_blank


@dataclass
class AutomationAction:
    """An action an automated node can run.

    ``output`` is a format template over the action's parameters plus
    ``ref`` (a per-step reference number) and ``time`` (step start time).
    """

    id: str
    label: str
    params: list[str]
    output: str
    defaults: dict[str, str] = field(default_factory=dict)

    @property
    def template_fields(self) -> set[str]:
        """Names of the placeholders used by the output template."""
        return {name for _, name, _, _ in Formatter().parse(self.output) if name}

    def render(self, values: dict[str, Any], ref: int | str, time: str) -> str:
        """Fill the output template.

        Blank or missing parameters fall back to the action defaults.
        """
        filled: dict[str, Any] = {"ref": ref, "time": time}
        for name in self.template_fields - {"ref", "time"}:
            value = values.get(name)
            if is_blank(value):
                value = self.defaults.get(name, "")
            filled[name] = value
        return self.output.format(**filled)


AUTOMATIONS: list[AutomationAction] = [
    AutomationAction(
        id="send_email",
        label="Send Email",
        params=["to", "subject", "body"],
        output='Email sent successfully to {to}. Subject: "{subject}". Message ID: MSG-{ref}',
        defaults={"to": "recipients", "subject": "Workflow Notification"},
    ),
    AutomationAction(
        id="generate_doc",
        label="Generate Document",
        params=["template", "recipient", "format"],
        output=(
            'Document generated from template "{template}" for {recipient}. '
            "File: workflow_doc_{ref}.{format}"
        ),
        defaults={"template": "default", "recipient": "requester", "format": "pdf"},
    ),
    AutomationAction(
        id="create_ticket",
        label="Create Support Ticket",
        params=["system", "priority", "description"],
        output="Support ticket created in {system}. Ticket ID: TICKET-{ref}. Priority: {priority}",
        defaults={"system": "Jira", "priority": "Medium"},
    ),
    AutomationAction(
        id="update_database",
        label="Update Database Record",
        params=["table", "field", "value"],
        output=(
            "Database record updated. Table: {table}, Field: {field}, "
            "New Value: {value}. Rows affected: 1"
        ),
        defaults={"table": "employees", "field": "status", "value": "updated"},
    ),
    AutomationAction(
        id="notify_slack",
        label="Send Slack Notification",
        params=["channel", "message", "urgency"],
        output="Slack notification sent to {channel}. Message delivered at {time}.",
        defaults={"channel": "#general"},
    ),
    AutomationAction(
        id="schedule_meeting",
        label="Schedule Meeting",
        params=["attendees", "date", "duration"],
        output="Meeting scheduled with {attendees}. Calendar invite sent. Meeting ID: MTG-{ref}",
        defaults={"attendees": "5 attendees"},
    ),
    AutomationAction(
        id="assign_task",
        label="Assign Task",
        params=["assignee", "task_name", "deadline"],
        output="Task assigned to {assignee}. Task: {task_name}. Deadline: {deadline}",
        defaults={
            "assignee": "team member",
            "task_name": "Review workflow",
            "deadline": "Next week",
        },
    ),
    AutomationAction(
        id="generate_report",
        label="Generate Report",
        params=["report_type", "date_range", "format"],
        output=(
            "Report generated: {report_type}. Date range: {date_range}. "
            "Format: {format}. Ready for download."
        ),
        defaults={
            "report_type": "Summary Report",
            "date_range": "Last 30 days",
            "format": "PDF",
        },
    ),
]

# Older documents use this id for document generation
ACTION_ALIASES = {"generate_document": "generate_doc"}

_AUTOMATIONS_BY_ID = {action.id: action for action in AUTOMATIONS}


def get_automations() -> list[AutomationAction]:
    """Get every action in the catalog."""
    return list(AUTOMATIONS)


def get_automation(action_id: str) -> AutomationAction | None:
    """Look up an action by id or alias."""
    return _AUTOMATIONS_BY_ID.get(ACTION_ALIASES.get(action_id, action_id))


def render_automation_output(
    action_id: str,
    values: dict[str, Any],
    parameters: dict[str, Any],
    ref: int | str,
    time: str,
) -> str:
    """Build the simulated output line for an automated action.

    Args:
        action_id: The action id from the node.
        values: Everything the node carries; template fields are looked up here.
        parameters: The node's explicit parameters. Those the template does not
            mention are listed after the output.
        ref: Reference number for generated ids.
        time: Time of day the step started.

    Returns:
        The output text.
    """
    provided = {k: v for k, v in parameters.items() if not is_blank(v)}
    action = get_automation(action_id)

    if action is None:
        if provided:
            return (
                f'Automation "{action_id}" executed successfully. '
                f"Parameters: {_format_pairs(provided)}."
            )
        return f'Automation "{action_id}" executed successfully. All parameters processed.'

    output = action.render(values, ref=ref, time=time)
    extra = {k: v for k, v in provided.items() if k not in action.template_fields}
    if extra:
        output += f" Additional parameters: {_format_pairs(extra)}."
    return output


def _format_pairs(values: dict[str, Any]) -> str:
    return ", ".join(f"{key}={value}" for key, value in values.items())
