"""Planning workflow: session record, gating rules, state machine, history."""

from clearedtoplan.workflow.history import CompletedFlight, FlightHistory
from clearedtoplan.workflow.session import (
    GatingPolicy,
    PlanningMode,
    PlanningSession,
    PlanningStep,
    UnknownStepError,
    WorkflowError,
    can_access_step,
    progress_percentage,
)

__all__ = [
    "CompletedFlight",
    "FlightHistory",
    "GatingPolicy",
    "PlanningMode",
    "PlanningSession",
    "PlanningStep",
    "UnknownStepError",
    "WorkflowError",
    "can_access_step",
    "progress_percentage",
]
