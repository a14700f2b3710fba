"""Schedule requests and scheduled task records."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class SchedulingError(Exception):
    """Raised when a schedule request cannot be accepted."""

    pass


class ScheduleType(str, Enum):
    """How a task's run time is expressed."""

    SCHEDULED = "scheduled"
    DELAYED = "delayed"
    CRON = "cron"
    NO_SCHEDULE = "no-schedule"


@dataclass(frozen=True)
class ScheduleContext:
    """Where a task was created from, so its result can be delivered back there."""

    guild_id: int | None = None
    channel_id: int | None = None
    user_id: int | None = None


@dataclass(frozen=True)
class ScheduleRequest:
    """
    When a task should run.

    Exactly one of date / delay_in_seconds / cron is relevant, depending on type.
    """

    type: ScheduleType
    date: datetime | None = None
    delay_in_seconds: int | None = None
    cron: str | None = None

    @property
    def input_value(self) -> Any:
        """The value that drives this schedule type (for display)."""
        if self.type is ScheduleType.SCHEDULED:
            return self.date
        if self.type is ScheduleType.DELAYED:
            return self.delay_in_seconds
        if self.type is ScheduleType.CRON:
            return self.cron
        return None


def parse_schedule_date(value: str | datetime) -> datetime:
    """
    Parse an ISO-8601 date into an aware UTC datetime.

    Naive values are taken to be UTC.

    Raises:
        SchedulingError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except (AttributeError, ValueError):
            raise SchedulingError(f"Invalid date: {value!r}") from None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass
class ScheduledTask:
    """A pending task held by the scheduler."""

    callback: str
    payload: Any
    type: ScheduleType
    time: datetime
    delay_in_seconds: int | None = None
    cron: str | None = None
    context: ScheduleContext = field(default_factory=ScheduleContext)
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])

    def to_dict(self) -> dict[str, Any]:
        """Serializable view used by the listing tool."""
        data: dict[str, Any] = {
            "id": self.id,
            "callback": self.callback,
            "payload": self.payload,
            "type": self.type.value,
            "time": self.time.isoformat(),
        }
        if self.delay_in_seconds is not None:
            data["delayInSeconds"] = self.delay_in_seconds
        if self.cron is not None:
            data["cron"] = self.cron
        return data
