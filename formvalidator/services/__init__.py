"""Deferred delivery and field publication for forms."""

from formvalidator.services.event_bus import FieldEventBus, FieldListener
from formvalidator.services.task_queue import TaskQueue

__all__ = ["FieldEventBus", "FieldListener", "TaskQueue"]
