"""Task scheduling capability and its in-memory asyncio implementation."""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Awaitable, Callable, Protocol

from croniter import croniter

from .models import (
    ScheduleContext,
    ScheduledTask,
    ScheduleRequest,
    ScheduleType,
    SchedulingError,
    parse_schedule_date,
)

logger = logging.getLogger(__name__)

TaskHandler = Callable[[ScheduledTask], Awaitable[None]]


class TaskScheduler(Protocol):
    """The scheduling primitives the tools depend on."""

    async def schedule(
        self,
        request: ScheduleRequest,
        callback: str,
        payload: Any,
        context: ScheduleContext | None = None,
    ) -> ScheduledTask:
        ...

    async def get_schedules(self) -> list[ScheduledTask]:
        ...

    async def cancel_schedule(self, task_id: str) -> bool:
        ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def next_cron_time(expression: str, after: datetime) -> datetime:
    """Next fire time of a cron expression strictly after the given instant."""
    return croniter(expression, after).get_next(datetime)


def whole_seconds(value: Any) -> int:
    """
    Validate a delay given in seconds.

    Integral floats such as 600.0 are accepted and converted to int.

    Raises:
        SchedulingError: If the value is missing, boolean or not a whole number
    """
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise SchedulingError("A delayed task needs a whole number of seconds")
    return value


class InMemoryTaskScheduler:
    """
    Scheduler that keeps tasks in memory and runs them on the event loop.

    Each pending task is an asyncio.Task that sleeps until the task is due
    and then awaits the handler registered under the task's callback name.
    One-shot tasks (scheduled, delayed) are dropped after they run; cron
    tasks re-arm for their next fire time. Nothing survives a restart.

    Usage:
        scheduler = InMemoryTaskScheduler()
        scheduler.register_handler("execute_task", run_task)
        await scheduler.schedule(ScheduleRequest(ScheduleType.DELAYED, delay_in_seconds=60),
                                 "execute_task", "Water the plants")
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or _utcnow
        self._tasks: dict[str, ScheduledTask] = {}
        self._runners: dict[str, asyncio.Task] = {}
        self._handlers: dict[str, TaskHandler] = {}

    def register_handler(self, name: str, handler: TaskHandler) -> None:
        """Register the coroutine function invoked for tasks with this callback name."""
        self._handlers[name] = handler

    def _resolve_time(self, request: ScheduleRequest) -> datetime:
        now = self._clock()

        if request.type is ScheduleType.SCHEDULED:
            if request.date is None:
                raise SchedulingError("A scheduled task needs a date")
            return parse_schedule_date(request.date)

        if request.type is ScheduleType.DELAYED:
            delay = whole_seconds(request.delay_in_seconds)
            if delay < 0:
                raise SchedulingError("Delay cannot be negative")
            return now + timedelta(seconds=delay)

        if request.type is ScheduleType.CRON:
            if not request.cron or not croniter.is_valid(request.cron):
                raise SchedulingError(f"Invalid cron expression: {request.cron!r}")
            return next_cron_time(request.cron, now)

        raise SchedulingError("Not a valid schedule input")

    async def schedule(
        self,
        request: ScheduleRequest,
        callback: str,
        payload: Any,
        context: ScheduleContext | None = None,
    ) -> ScheduledTask:
        """
        Register a task and start waiting for it.

        Args:
            request: When the task should run
            callback: Name of a registered handler
            payload: Value handed to the handler with the task
            context: Where the task was requested from

        Returns:
            The ScheduledTask record, including its generated id

        Raises:
            SchedulingError: If the request is invalid or the callback is unknown
        """
        if callback not in self._handlers:
            raise SchedulingError(f"No handler registered for '{callback}'")

        run_at = self._resolve_time(request)
        task = ScheduledTask(
            callback=callback,
            payload=payload,
            type=request.type,
            time=run_at,
            delay_in_seconds=(
                whole_seconds(request.delay_in_seconds) if request.type is ScheduleType.DELAYED else None
            ),
            cron=request.cron if request.type is ScheduleType.CRON else None,
            context=context or ScheduleContext(),
        )

        self._tasks[task.id] = task
        self._runners[task.id] = asyncio.create_task(
            self._run(task), name=f"scheduled-task-{task.id}"
        )
        logger.info("Scheduled task %s (%s) for %s", task.id, task.type.value, run_at.isoformat())
        return task

    async def get_schedules(self) -> list[ScheduledTask]:
        """Pending tasks ordered by next run time."""
        return sorted(self._tasks.values(), key=lambda t: t.time)

    async def cancel_schedule(self, task_id: str) -> bool:
        """
        Cancel a pending task.

        Returns:
            True if the task existed and was cancelled, False otherwise
        """
        task = self._tasks.pop(task_id, None)
        if task is None:
            return False

        runner = self._runners.pop(task_id, None)
        # A handler may cancel its own cron task; the run loop sees it is gone
        if runner is not None and runner is not asyncio.current_task():
            runner.cancel()

        logger.info("Cancelled scheduled task %s", task_id)
        return True

    async def shutdown(self) -> None:
        """Cancel every pending task and wait for the runners to finish."""
        runners = list(self._runners.values())
        self._runners.clear()
        self._tasks.clear()

        for runner in runners:
            runner.cancel()
        await asyncio.gather(*runners, return_exceptions=True)

    async def _run(self, task: ScheduledTask) -> None:
        try:
            while True:
                delay = (task.time - self._clock()).total_seconds()
                if delay > 0:
                    await asyncio.sleep(delay)

                await self._invoke(task)

                if task.type is not ScheduleType.CRON or task.id not in self._tasks:
                    break
                task.time = next_cron_time(task.cron, self._clock())
        finally:
            if self._runners.get(task.id) is asyncio.current_task():
                self._runners.pop(task.id, None)
                self._tasks.pop(task.id, None)

    async def _invoke(self, task: ScheduledTask) -> None:
        handler = self._handlers.get(task.callback)
        if handler is None:
            logger.error("No handler for scheduled task %s (callback '%s')", task.id, task.callback)
            return

        try:
            await handler(task)
        except Exception as e:
            logger.exception("Scheduled task %s failed: %s", task.id, e)
