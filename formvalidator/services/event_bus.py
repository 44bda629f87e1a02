"""Field event bus — pub/sub for a form's aggregate fields.

Subscribers watch one field ("all_valid", "all_filled", "validation_messages")
and receive its new value. Delivery always goes through the task queue, so a
subscriber never runs inside the value mutation that caused the change.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, List

import structlog

from formvalidator.services.task_queue import TaskQueue

logger = structlog.get_logger()

# Type alias for field listeners
FieldListener = Callable[[Any], None]


class FieldEventBus:
    """In-memory pub/sub keyed by field name.

    Each field can have multiple listeners, notified in subscription order.
    If a listener fails, it's logged and removed.
    """

    def __init__(self, task_queue: TaskQueue):
        self._task_queue = task_queue
        self._listeners: Dict[str, List[FieldListener]] = defaultdict(list)

    def subscribe(self, field: str, listener: FieldListener) -> None:
        """Subscribe a listener to changes of a field."""
        self._listeners[field].append(listener)
        logger.debug("field_subscribe", field=field, total_listeners=len(self._listeners[field]))

    def unsubscribe(self, field: str, listener: FieldListener) -> None:
        """Unsubscribe a listener from a field."""
        listeners = self._listeners.get(field)
        if not listeners:
            return
        if listener in listeners:
            listeners.remove(listener)
        if not listeners:
            del self._listeners[field]

    def listener_count(self, field: str) -> int:
        return len(self._listeners.get(field, []))

    def publish(self, field: str, value: Any) -> None:
        """Queue delivery of a field's new value to all of its listeners."""
        for listener in list(self._listeners.get(field, [])):
            self._task_queue.call_soon(self._deliver, field, listener, value)

    def _deliver(self, field: str, listener: FieldListener, value: Any) -> None:
        if listener not in self._listeners.get(field, []):
            # Unsubscribed after the delivery was queued
            return
        try:
            listener(value)
        except Exception as e:
            logger.warning("form_listener_failed", field=field, error=str(e))
            self.unsubscribe(field, listener)
