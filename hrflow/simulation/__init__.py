"""Execution order resolution and simulated runs of workflows."""

from .automations import AutomationAction, get_automation, get_automations
from .models import SimulationResult, SimulationStep, SimulationSummary
from .order import resolve_order
from .settings import DurationRange, SimulationSettings
from .simulator import Simulator, simulate

__all__ = [
    "AutomationAction",
    "get_automation",
    "get_automations",
    "SimulationResult",
    "SimulationStep",
    "SimulationSummary",
    "resolve_order",
    "DurationRange",
    "SimulationSettings",
    "Simulator",
    "simulate",
]
