"""Task scheduling tools for the chat agent.

The tools are created per conversation so every task remembers the guild,
channel and user that asked for it.
"""

import json
import logging
from typing import Any, Callable

from .models import (
    ScheduleContext,
    ScheduledTask,
    ScheduleRequest,
    ScheduleType,
    SchedulingError,
    parse_schedule_date,
)
from .task_scheduler import TaskScheduler

logger = logging.getLogger(__name__)

# Handler name the bot registers for running scheduled tasks
EXECUTE_TASK_CALLBACK = "execute_task"

INVALID_SCHEDULE_MESSAGE = "Not a valid schedule input"


def build_schedule_request(
    when_type: str,
    date: str | None = None,
    delay_in_seconds: int | None = None,
    cron: str | None = None,
) -> ScheduleRequest | None:
    """
    Turn the tool's flat arguments into a ScheduleRequest.

    Returns:
        The request, or None for "no-schedule" and unknown types

    Raises:
        SchedulingError: If a date is given but cannot be parsed
    """
    try:
        schedule_type = ScheduleType((when_type or "").strip().lower())
    except ValueError:
        return None

    if schedule_type is ScheduleType.NO_SCHEDULE:
        return None

    return ScheduleRequest(
        type=schedule_type,
        date=parse_schedule_date(date) if schedule_type is ScheduleType.SCHEDULED and date else None,
        delay_in_seconds=delay_in_seconds,
        cron=cron,
    )


def create_schedule_tools(
    scheduler: TaskScheduler,
    context: ScheduleContext | None = None,
) -> list[Callable[..., Any]]:
    """
    Create the three scheduling tools bound to a scheduler and a conversation.

    Args:
        scheduler: The scheduling capability supplied by the host
        context: Origin of the conversation, stored on every new task

    Returns:
        [schedule_task, get_scheduled_tasks, cancel_scheduled_task]
    """

    async def _visible_schedules() -> list[ScheduledTask]:
        tasks = await scheduler.get_schedules()
        if context is None or context.guild_id is None:
            return tasks
        return [task for task in tasks if task.context.guild_id == context.guild_id]

    async def schedule_task(
        when_type: str,
        description: str,
        date: str | None = None,
        delay_in_seconds: int | None = None,
        cron: str | None = None,
    ) -> str:
        """A tool to schedule a task to be executed at a later time.

        Use when_type "scheduled" with an ISO-8601 date, "delayed" with
        delay_in_seconds, or "cron" with a 5-field cron expression. Use
        "no-schedule" if the user did not say when.

        Args:
            when_type: One of "scheduled", "delayed", "cron" or "no-schedule"
            description: What the task should do when it runs
            date: ISO-8601 date and time (for "scheduled")
            delay_in_seconds: Seconds from now (for "delayed")
            cron: Cron expression such as "0 9 * * 1" (for "cron")

        Returns:
            Confirmation message or an error description
        """
        try:
            request = build_schedule_request(when_type, date, delay_in_seconds, cron)
            if request is None:
                return INVALID_SCHEDULE_MESSAGE

            task = await scheduler.schedule(request, EXECUTE_TASK_CALLBACK, description, context)
        except SchedulingError as e:
            logger.error("Error scheduling task: %s", e)
            return f"Error scheduling task: {e}"
        except Exception as e:
            logger.exception("Error scheduling task: %s", e)
            return f"Error scheduling task: {e}"

        value = task.delay_in_seconds if request.type is ScheduleType.DELAYED else request.input_value
        shown = value.isoformat() if hasattr(value, "isoformat") else value
        logger.info("Task %s scheduled: %s", task.id, description)
        return f'Task scheduled for type "{request.type.value}" : {shown}'

    async def get_scheduled_tasks() -> str:
        """List the tasks that have been scheduled from this server.

        Returns:
            JSON list of tasks with id, payload, type and next run time,
            or a message when there are none
        """
        try:
            tasks = await _visible_schedules()
        except Exception as e:
            logger.exception("Error listing scheduled tasks: %s", e)
            return f"Error listing scheduled tasks: {e}"

        if not tasks:
            return "No scheduled tasks found."
        return json.dumps([task.to_dict() for task in tasks], ensure_ascii=False)

    async def cancel_scheduled_task(task_id: str) -> str:
        """Cancel a scheduled task using its ID.

        Args:
            task_id: The ID of the task to cancel

        Returns:
            Confirmation message or an error description
        """
        try:
            visible = any(task.id == task_id for task in await _visible_schedules())
            cancelled = visible and await scheduler.cancel_schedule(task_id)
        except Exception as e:
            logger.exception("Error canceling scheduled task: %s", e)
            return f"Error canceling task {task_id}: {e}"

        if not cancelled:
            return f"Error canceling task {task_id}: no scheduled task with that ID"
        return f"Task {task_id} has been successfully canceled."

    return [schedule_task, get_scheduled_tasks, cancel_scheduled_task]
