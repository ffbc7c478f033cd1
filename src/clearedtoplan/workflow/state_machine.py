"""Planning workflow state machine.

The state machine is the only writer of its session. It marks steps
complete or incomplete, answers step access questions for the current
mode, and archives a finished flight before a new one starts.

Mutations are not locked: callers must route every change to a given
machine through one thread or task.

Typical usage:
    machine = WorkflowStateMachine(event_bus=bus, history=FlightHistory())
    machine.update_flight_setup("KPAO", "KSFO", profile.id)
    if machine.can_access_step(PlanningStep.WEIGHT_BALANCE):
        ...
        machine.complete_step(PlanningStep.WEIGHT_BALANCE)
"""

from datetime import date

from clearedtoplan.aircraft.profile import AircraftProfile
from clearedtoplan.core.config import PlanningSettings
from clearedtoplan.core.event_bus import EventBus
from clearedtoplan.core.logging_system import get_logger
from clearedtoplan.workflow import session as rules
from clearedtoplan.workflow.events import (
    FlightArchivedEvent,
    FlightSetupUpdatedEvent,
    ModeChangedEvent,
    SessionResetEvent,
    StepCompletedEvent,
    StepUncompletedEvent,
    WorkflowEvent,
)
from clearedtoplan.workflow.history import CompletedFlight, FlightHistory
from clearedtoplan.workflow.session import (
    GatingPolicy,
    PlanningMode,
    PlanningSession,
    PlanningStep,
    WorkflowError,
    validate_step,
)

logger = get_logger(__name__)


class WorkflowStateMachine:
    """Owns one planning session and all transitions on it.

    Attributes:
        session: The session being planned. Read freely; mutate only
            through this class.
        policy: Guided-mode gating rule.
        history: Archive for finished flights, if any.
    """

    def __init__(
        self,
        session: PlanningSession | None = None,
        policy: GatingPolicy = GatingPolicy.AGGREGATE,
        event_bus: EventBus | None = None,
        history: FlightHistory | None = None,
    ) -> None:
        self.session = session or PlanningSession()
        self.policy = policy
        self.history = history
        self._event_bus = event_bus

        logger.info(
            "Workflow started: session=%s, mode=%s, gating=%s",
            self.session.id,
            self.session.mode.value,
            self.policy.value,
        )

    @classmethod
    def from_settings(
        cls,
        settings: PlanningSettings,
        event_bus: EventBus | None = None,
        history: FlightHistory | None = None,
    ) -> "WorkflowStateMachine":
        """Create a machine with a fresh session configured from settings."""
        return cls(
            session=PlanningSession(mode=settings.mode),
            policy=settings.gating_policy,
            event_bus=event_bus,
            history=history,
        )

    def can_access_step(self, step: PlanningStep, mode: PlanningMode | None = None) -> bool:
        """Whether a step may be opened in the given (or session) mode.

        Raises:
            UnknownStepError: If step is not a PlanningStep.
        """
        return rules.can_access_step(self.session, step, mode, self.policy)

    def is_step_completed(self, step: PlanningStep) -> bool:
        return self.session.is_step_completed(step)

    def complete_step(self, step: PlanningStep) -> bool:
        """Mark a step complete.

        Returns:
            True if the completed set changed, False if it was already there.

        Raises:
            UnknownStepError: If step is not a PlanningStep.
        """
        step = validate_step(step)
        if step in self.session.completed_steps:
            return False

        self.session.completed_steps.add(step)
        logger.info("Step completed: %s (%.0f%%)", step.title, self.progress_percentage())
        self._publish(StepCompletedEvent(step=step, session_id=self.session.id))
        return True

    def uncomplete_step(self, step: PlanningStep) -> tuple[PlanningStep, ...]:
        """Mark a step incomplete.

        With SEQUENTIAL gating every later step is cleared as well, since
        they were only reachable through this one. AGGREGATE gating removes
        only the given step.

        Returns:
            Steps actually removed, in workflow order.

        Raises:
            UnknownStepError: If step is not a PlanningStep.
        """
        step = validate_step(step)

        targets = [step]
        if self.policy is GatingPolicy.SEQUENTIAL:
            targets.extend(later for later in PlanningStep if later > step)

        removed = tuple(s for s in sorted(targets) if s in self.session.completed_steps)
        self.session.completed_steps.difference_update(removed)

        if removed:
            logger.info("Steps marked incomplete: %s", ", ".join(s.title for s in removed))
            self._publish(StepUncompletedEvent(steps=removed, session_id=self.session.id))
        return removed

    def progress_percentage(self) -> float:
        return rules.progress_percentage(self.session)

    def next_accessible_step(self) -> PlanningStep | None:
        """First step that is open but not yet complete."""
        for step in PlanningStep:
            if step not in self.session.completed_steps and self.can_access_step(step):
                return step
        return None

    def set_mode(self, mode: PlanningMode) -> None:
        if mode is self.session.mode:
            return
        self.session.mode = mode
        logger.info("Planning mode changed to %s", mode.value)
        self._publish(ModeChangedEvent(mode=mode, session_id=self.session.id))

    def select_aircraft(self, aircraft_id: str | None) -> None:
        self.session.selected_aircraft_id = aircraft_id or None
        self._publish_setup()

    def update_flight_setup(
        self,
        departure: str,
        destination: str,
        aircraft_id: str,
        flight_date: date | None = None,
    ) -> None:
        """Set route, aircraft and date in one go (phase 1)."""
        self.session.departure = departure.strip().upper() or None
        self.session.destination = destination.strip().upper() or None
        self.session.selected_aircraft_id = aircraft_id or None
        if flight_date is not None:
            self.session.flight_date = flight_date

        logger.info(
            "Flight setup: %s, aircraft=%s, phase 1 %s",
            self.session.route_description,
            self.session.selected_aircraft_id,
            "complete" if self.session.phase1_complete else "incomplete",
        )
        self._publish_setup()

    def reset(self) -> PlanningSession:
        """Discard the session and start an empty one in the same mode."""
        previous = self.session
        self.session = PlanningSession(mode=previous.mode)
        logger.info("Session %s reset", previous.id)
        self._publish(SessionResetEvent(previous_session_id=previous.id, session_id=self.session.id))
        return self.session

    def archive(self, aircraft: AircraftProfile) -> CompletedFlight:
        """Archive the current session into history.

        Raises:
            WorkflowError: If there is no history, phase 1 is incomplete, or
                the aircraft is not the selected one.
        """
        if self.history is None:
            raise WorkflowError("No flight history configured")
        if not self.session.phase1_complete:
            raise WorkflowError("Cannot archive a flight without route and aircraft")
        if aircraft.id != self.session.selected_aircraft_id:
            raise WorkflowError(
                f"Aircraft {aircraft.id} is not the selected aircraft "
                f"{self.session.selected_aircraft_id}"
            )

        flight = CompletedFlight.from_session(self.session, aircraft)
        self.history.save(flight)
        self._publish(
            FlightArchivedEvent(
                flight_id=flight.id, route=flight.route_description, session_id=self.session.id
            )
        )
        return flight

    def start_new_flight(self, aircraft: AircraftProfile | None = None) -> PlanningSession:
        """Begin a new flight, keeping the aircraft selection.

        The current session is archived first when phase 1 is complete,
        history is configured and the selected aircraft profile is given.
        """
        if (
            aircraft is not None
            and self.history is not None
            and self.session.phase1_complete
            and aircraft.id == self.session.selected_aircraft_id
        ):
            self.archive(aircraft)

        previous = self.session
        self.session = PlanningSession(
            mode=previous.mode, selected_aircraft_id=previous.selected_aircraft_id
        )
        logger.info("New flight %s started (previous %s)", self.session.id, previous.id)
        self._publish(SessionResetEvent(previous_session_id=previous.id, session_id=self.session.id))
        return self.session

    def _publish_setup(self) -> None:
        self._publish(
            FlightSetupUpdatedEvent(
                session_id=self.session.id, phase1_complete=self.session.phase1_complete
            )
        )

    def _publish(self, event: WorkflowEvent) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event)
