"""Events published by the workflow state machine."""

from dataclasses import dataclass

from clearedtoplan.core.event_bus import Event
from clearedtoplan.workflow.session import PlanningMode, PlanningStep


@dataclass
class WorkflowEvent(Event):
    """Base of every workflow event; subscribe to it to observe them all.

    Attributes:
        session_id: Session the event belongs to.
    """

    session_id: str = ""


@dataclass
class StepCompletedEvent(WorkflowEvent):
    step: PlanningStep | None = None


@dataclass
class StepUncompletedEvent(WorkflowEvent):
    """Carries every step that was removed, cascaded ones included."""

    steps: tuple[PlanningStep, ...] = ()


@dataclass
class FlightSetupUpdatedEvent(WorkflowEvent):
    phase1_complete: bool = False


@dataclass
class ModeChangedEvent(WorkflowEvent):
    mode: PlanningMode = PlanningMode.GUIDED


@dataclass
class SessionResetEvent(WorkflowEvent):
    """Published when a new session replaces the one in session_id's place."""

    previous_session_id: str = ""


@dataclass
class FlightArchivedEvent(WorkflowEvent):
    flight_id: str = ""
    route: str = ""
