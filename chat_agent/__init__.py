"""
Chat agent package for the Discord assistant.

The agent is an Agno Agent on an OpenRouter model, equipped with the
Wikipedia game lookup tools and the task scheduling tools.

Modules:
    config: Agent constants and data paths
    environment: Environment validation and API key management
    session: Session context management
    agent_factory: Agent and tool list creation
    agent: ChatAgent streaming wrapper

Usage:
    from chat_agent import ChatAgent
    from scheduler import InMemoryTaskScheduler

    agent = ChatAgent(InMemoryTaskScheduler())

    async for chunk in agent.ask(guild_id, channel_id, user_id, "Who made Hades?"):
        print(chunk, end="")
"""

from .agent import ChatAgent
from .config import AGENT_INSTRUCTIONS
from .environment import ApiKeys, MissingEnvironmentVariableError, validate_environment
from .session import SessionContext, create_session_context

__all__ = [
    "ChatAgent",
    "AGENT_INSTRUCTIONS",
    "ApiKeys",
    "MissingEnvironmentVariableError",
    "validate_environment",
    "SessionContext",
    "create_session_context",
]
