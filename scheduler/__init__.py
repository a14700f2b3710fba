"""Task scheduling for the chat assistant."""

from .models import (
    ScheduleContext,
    ScheduledTask,
    ScheduleRequest,
    ScheduleType,
    SchedulingError,
)
from .task_scheduler import InMemoryTaskScheduler, TaskScheduler
from .tools import EXECUTE_TASK_CALLBACK, create_schedule_tools

__all__ = [
    "ScheduleContext",
    "ScheduledTask",
    "ScheduleRequest",
    "ScheduleType",
    "SchedulingError",
    "InMemoryTaskScheduler",
    "TaskScheduler",
    "EXECUTE_TASK_CALLBACK",
    "create_schedule_tools",
]
