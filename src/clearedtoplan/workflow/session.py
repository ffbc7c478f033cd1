"""Planning session record and step gating rules.

A session is one flight being planned. Choosing a route and an aircraft
("phase 1") unlocks the planning steps; the steps themselves are a closed,
ordered enumeration whose completion is tracked as a set.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum, IntEnum
from typing import Any


class WorkflowError(Exception):
    """Raised when a workflow operation is not allowed."""


class UnknownStepError(WorkflowError):
    """Raised when something that is not a PlanningStep is used as one."""


class PlanningStep(IntEnum):
    """Planning steps, in workflow order."""

    WEIGHT_BALANCE = 0
    PERFORMANCE = 1
    WEATHER = 2
    NAV_LOG = 3

    @property
    def title(self) -> str:
        return _STEP_TITLES[self]


_STEP_TITLES = {
    PlanningStep.WEIGHT_BALANCE: "Weight & Balance",
    PlanningStep.PERFORMANCE: "Performance",
    PlanningStep.WEATHER: "Weather Briefing",
    PlanningStep.NAV_LOG: "Navigation Log",
}


class PlanningMode(Enum):
    """Guided mode gates steps behind flight setup; advanced mode does not."""

    GUIDED = "guided"
    ADVANCED = "advanced"


class GatingPolicy(Enum):
    """How guided mode decides step access.

    AGGREGATE: every step opens once phase 1 (route + aircraft) is done.
    SEQUENTIAL: phase 1 plus every earlier step must be complete.
    """

    AGGREGATE = "aggregate"
    SEQUENTIAL = "sequential"


@dataclass
class PlanningSession:
    """Workflow state for one flight.

    Attributes:
        id: Session identifier.
        created_at: When the session was started.
        flight_date: Planned date of flight.
        departure: Departure airport identifier.
        destination: Destination airport identifier.
        selected_aircraft_id: Identifier of the chosen aircraft profile.
        completed_steps: Steps marked complete (unordered).
        mode: Operating mode.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=datetime.now)
    flight_date: date = field(default_factory=date.today)
    departure: str | None = None
    destination: str | None = None
    selected_aircraft_id: str | None = None
    completed_steps: set[PlanningStep] = field(default_factory=set)
    mode: PlanningMode = PlanningMode.GUIDED

    @property
    def phase1_complete(self) -> bool:
        """Route and aircraft are both set."""
        return bool(self.departure) and bool(self.destination) and bool(self.selected_aircraft_id)

    @property
    def route_description(self) -> str:
        if not self.departure and not self.destination:
            return "No route"
        return f"{self.departure or '?'} → {self.destination or '?'}"

    def is_step_completed(self, step: PlanningStep) -> bool:
        return validate_step(step) in self.completed_steps

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping for external stores."""
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat(),
            "flight_date": self.flight_date.isoformat(),
            "departure": self.departure,
            "destination": self.destination,
            "selected_aircraft_id": self.selected_aircraft_id,
            "completed_steps": sorted(step.name for step in self.completed_steps),
            "mode": self.mode.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlanningSession":
        """Rebuild a session from to_dict() output.

        Raises:
            UnknownStepError: If a stored step name is not a PlanningStep.
        """
        steps = set()
        for name in data.get("completed_steps", []):
            try:
                steps.add(PlanningStep[name])
            except KeyError as e:
                raise UnknownStepError(f"Unknown planning step: {name}") from e

        session = cls(
            departure=data.get("departure"),
            destination=data.get("destination"),
            selected_aircraft_id=data.get("selected_aircraft_id"),
            completed_steps=steps,
            mode=PlanningMode(data.get("mode", PlanningMode.GUIDED.value)),
        )
        if data.get("id"):
            session.id = data["id"]
        if data.get("created_at"):
            session.created_at = datetime.fromisoformat(data["created_at"])
        if data.get("flight_date"):
            session.flight_date = date.fromisoformat(data["flight_date"])
        return session


def validate_step(step: Any) -> PlanningStep:
    """Return step unchanged if it is a PlanningStep.

    Raises:
        UnknownStepError: For anything else (plain ints included).
    """
    if not isinstance(step, PlanningStep):
        raise UnknownStepError(f"Unknown planning step: {step!r}")
    return step


def can_access_step(
    session: PlanningSession,
    step: PlanningStep,
    mode: PlanningMode | None = None,
    policy: GatingPolicy = GatingPolicy.AGGREGATE,
) -> bool:
    """Decide whether a step may be opened.

    Args:
        session: Session being planned.
        step: Step to open.
        mode: Operating mode; the session's own mode when None.
        policy: Guided-mode gating rule.

    Returns:
        Always True in advanced mode. In guided mode, True once phase 1 is
        complete (AGGREGATE) or once phase 1 and every earlier step are
        complete (SEQUENTIAL).

    Raises:
        UnknownStepError: If step is not a PlanningStep.
    """
    step = validate_step(step)
    mode = mode or session.mode

    if mode is PlanningMode.ADVANCED:
        return True

    if not session.phase1_complete:
        return False

    if policy is GatingPolicy.SEQUENTIAL:
        return all(earlier in session.completed_steps for earlier in PlanningStep if earlier < step)

    return True


def progress_percentage(session: PlanningSession) -> float:
    """Share of the workflow done, counting phase 1 as one extra unit."""
    done = len(session.completed_steps) + (1 if session.phase1_complete else 0)
    return done / (len(PlanningStep) + 1) * 100.0
