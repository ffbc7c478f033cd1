"""History of planned flights.

Finished sessions are archived as CompletedFlight records, newest first.
The history is an injected in-memory store; writing it anywhere is the
caller's business.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime

from clearedtoplan.aircraft.profile import AircraftProfile
from clearedtoplan.core.logging_system import LoggerMixin
from clearedtoplan.workflow.session import PlanningMode, PlanningSession, PlanningStep


@dataclass(frozen=True)
class CompletedFlight:
    """Archived summary of a planned flight."""

    departure: str
    destination: str
    flight_date: date
    aircraft_id: str
    aircraft_name: str = ""
    aircraft_registration: str = ""
    completed_steps: frozenset[PlanningStep] = frozenset()
    completed_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def route_description(self) -> str:
        return f"{self.departure} → {self.destination}"

    @classmethod
    def from_session(cls, session: PlanningSession, aircraft: AircraftProfile) -> "CompletedFlight":
        """Archive a session flown with the given aircraft.

        The flight keeps the session's id so re-archiving replaces it.
        """
        return cls(
            id=session.id,
            departure=session.departure or "",
            destination=session.destination or "",
            flight_date=session.flight_date,
            aircraft_id=aircraft.id,
            aircraft_name=aircraft.name,
            aircraft_registration=aircraft.registration,
            completed_steps=frozenset(session.completed_steps),
        )


class FlightHistory(LoggerMixin):
    """Completed flights, newest first."""

    def __init__(self, flights: list[CompletedFlight] | None = None, recent_limit: int = 10) -> None:
        self.attach_logger(__name__)
        self._flights: list[CompletedFlight] = list(flights or [])
        self.recent_limit = recent_limit

    def save(self, flight: CompletedFlight) -> None:
        """Insert a flight at the front, replacing any with the same id."""
        self._flights = [f for f in self._flights if f.id != flight.id]
        self._flights.insert(0, flight)
        self.log_info("Archived flight %s (%s)", flight.id, flight.route_description)

    def all(self) -> list[CompletedFlight]:
        return list(self._flights)

    def recent(self, limit: int | None = None) -> list[CompletedFlight]:
        return self._flights[: self.recent_limit if limit is None else limit]

    def get(self, flight_id: str) -> CompletedFlight | None:
        return next((f for f in self._flights if f.id == flight_id), None)

    def delete(self, flight_id: str) -> bool:
        before = len(self._flights)
        self._flights = [f for f in self._flights if f.id != flight_id]
        return len(self._flights) < before

    def clear(self) -> None:
        self._flights.clear()
        self.log_debug("Flight history cleared")

    def copy_to_new_session(
        self, flight: CompletedFlight, mode: PlanningMode = PlanningMode.GUIDED
    ) -> PlanningSession:
        """Start a session with the same route and aircraft, dated today."""
        return PlanningSession(
            departure=flight.departure,
            destination=flight.destination,
            selected_aircraft_id=flight.aircraft_id,
            flight_date=date.today(),
            mode=mode,
        )

    def __len__(self) -> int:
        return len(self._flights)
