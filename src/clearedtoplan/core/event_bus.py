"""Event bus system for synchronous event dispatch.

Planning workflow transitions are announced as events. A handler subscribed
to an event class also receives every subclass of it, so subscribing to
WorkflowEvent observes the whole workflow.

Typical usage example:
    from clearedtoplan.core.event_bus import EventBus, EventPriority
    from clearedtoplan.workflow.events import StepCompletedEvent, WorkflowEvent

    bus = EventBus()
    bus.subscribe(StepCompletedEvent, on_step_completed, EventPriority.HIGH)
    bus.subscribe(WorkflowEvent, audit_trail.append, EventPriority.LOW)
"""

import itertools
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Handler = Callable[[Any], None]


class EventPriority(Enum):
    """Priority levels for event handlers, dispatched CRITICAL first."""

    CRITICAL = 1
    HIGH = 2
    NORMAL = 3
    LOW = 4


@dataclass
class Event:
    """Base class for all events.

    Attributes:
        timestamp: Unix timestamp when the event was created.
    """

    timestamp: float = field(default_factory=time.time)


@dataclass(frozen=True)
class _Subscription:
    handler: Handler
    priority: EventPriority
    # Subscription order, breaks ties between equal priorities
    sequence: int

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.priority.value, self.sequence)


class EventBus:
    """Synchronous publish/subscribe keyed by event class.

    Handlers run in the publisher's call stack, ordered by priority and then
    by subscription order. A handler exception stops dispatch and
    propagates to the publisher.

    Examples:
        >>> bus = EventBus()
        >>> bus.subscribe(StepCompletedEvent, lambda e: print(e.step.title))
        >>> bus.publish(StepCompletedEvent(step=PlanningStep.PERFORMANCE))
        Performance
    """

    def __init__(self) -> None:
        self._subscriptions: dict[type[Event], list[_Subscription]] = {}
        self._sequence = itertools.count()

    def subscribe(
        self,
        event_type: type[Event],
        handler: Handler,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> None:
        """Subscribe a handler to an event class and its subclasses.

        Args:
            event_type: Event class to listen for.
            handler: Callable taking the event as its only argument.
            priority: Dispatch priority. Defaults to NORMAL.
        """
        subscription = _Subscription(handler, priority, next(self._sequence))
        self._subscriptions.setdefault(event_type, []).append(subscription)

    def unsubscribe(self, event_type: type[Event], handler: Handler) -> None:
        """Remove a handler from an event class. Unknown handlers are ignored."""
        remaining = [s for s in self._subscriptions.get(event_type, []) if s.handler != handler]
        if remaining:
            self._subscriptions[event_type] = remaining
        else:
            self._subscriptions.pop(event_type, None)

    def publish(self, event: Event) -> None:
        """Dispatch an event to every handler of its class or a base class."""
        for subscription in self._matching(type(event)):
            subscription.handler(event)

    def clear(self) -> None:
        self._subscriptions.clear()

    def get_subscriber_count(self, event_type: type[Event]) -> int:
        """Handlers that would receive an event of this exact class."""
        return len(self._matching(event_type))

    def _matching(self, event_type: type[Event]) -> list[_Subscription]:
        matching = [
            subscription
            for cls in event_type.__mro__
            for subscription in self._subscriptions.get(cls, [])
        ]
        return sorted(matching, key=lambda s: s.sort_key)
