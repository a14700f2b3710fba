"""Shared helper functions used across command modules."""

from datetime import datetime, timezone

import discord

from game_lookup import LookupOutcome, LookupStatus, MetadataView
from scheduler import ScheduledTask

# Discord embed limits
EMBED_TITLE_LIMIT = 256
EMBED_DESCRIPTION_LIMIT = 4000

_STATUS_COLORS = {
    LookupStatus.FOUND: discord.Color.green(),
    LookupStatus.UNDETERMINED: discord.Color.gold(),
    LookupStatus.NOT_FOUND: discord.Color.light_grey(),
    LookupStatus.INVALID_INPUT: discord.Color.red(),
    LookupStatus.LOOKUP_FAILED: discord.Color.red(),
}

_VIEW_TITLES = {
    MetadataView.GENRES: "Genres",
    MetadataView.STORY: "Story",
    MetadataView.DEVELOPER: "Developer",
}


def truncate(text: str, limit: int) -> str:
    """Cut text to a Discord limit, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: limit - 3].rstrip() + "..."


def status_color(status: LookupStatus) -> discord.Color:
    """Embed color for a lookup status."""
    return _STATUS_COLORS.get(status, discord.Color.blue())


def build_lookup_embed(outcome: LookupOutcome, text: str) -> discord.Embed:
    """Build the embed shown for a direct game lookup command."""
    subject = outcome.title or outcome.game_name or "Unknown game"
    embed = discord.Embed(
        title=truncate(f"{_VIEW_TITLES[outcome.view]}: {subject}", EMBED_TITLE_LIMIT),
        description=truncate(text, EMBED_DESCRIPTION_LIMIT),
        color=status_color(outcome.status),
    )
    embed.set_footer(text="Source: Wikipedia")
    return embed


def format_relative_time(when: datetime, now: datetime | None = None) -> str:
    """Human-friendly distance to a future instant (e.g. 'in 2h 5m')."""
    now = now or datetime.now(timezone.utc)
    seconds = int((when - now).total_seconds())
    if seconds <= 0:
        return "now"

    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)
    if days:
        return f"in {days}d {hours}h"
    if hours:
        return f"in {hours}h {minutes}m"
    if minutes:
        return f"in {minutes}m {secs}s"
    return f"in {secs}s"


def format_task_line(task: ScheduledTask, now: datetime | None = None) -> str:
    """One line describing a scheduled task for the /tasks listing."""
    timestamp = int(task.time.timestamp())
    schedule = f"cron `{task.cron}`" if task.cron else task.type.value
    return (
        f"`{task.id}` **{task.payload}** - {schedule}, next run <t:{timestamp}:f> "
        f"({format_relative_time(task.time, now)})"
    )
