"""Factory for creating the configured Agno chat agent."""

from typing import Any, Callable

from agno.agent import Agent
from agno.db.sqlite import SqliteDb
from agno.models.openrouter import OpenRouter

from game_lookup import GAME_TOOLS
from scheduler import ScheduleContext, TaskScheduler, create_schedule_tools

from .config import (
    AGENT_DESCRIPTION,
    AGENT_INSTRUCTIONS,
    AGENT_NAME,
    NUM_HISTORY_RUNS,
)


def build_tools(
    scheduler: TaskScheduler,
    schedule_context: ScheduleContext,
) -> list[Callable[..., Any]]:
    """Game lookup tools plus scheduling tools bound to this conversation."""
    return [*GAME_TOOLS, *create_schedule_tools(scheduler, schedule_context)]


def create_chat_agent(
    db: SqliteDb,
    tools: list[Callable[..., Any]],
    model_id: str,
    api_key: str,
) -> Agent:
    """
    Create a configured chat assistant agent.

    Args:
        db: SQLite database for agent memory storage
        tools: Tool functions the model may call
        model_id: OpenRouter model identifier
        api_key: OpenRouter API key

    Returns:
        Configured Agent instance ready for use
    """
    return Agent(
        name=AGENT_NAME,
        description=AGENT_DESCRIPTION,
        add_datetime_to_context=True,
        model=OpenRouter(id=model_id, api_key=api_key),
        tools=tools,
        db=db,
        instructions=AGENT_INSTRUCTIONS,
        markdown=True,
        enable_user_memories=True,
        add_history_to_context=True,
        num_history_runs=NUM_HISTORY_RUNS,
    )
