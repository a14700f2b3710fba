"""Main ChatAgent class implementation using Agno."""

from typing import AsyncGenerator

from agno.db.sqlite import SqliteDb

from scheduler import TaskScheduler
from settings import get_llm_model

from .agent_factory import build_tools, create_chat_agent
from .config import get_memory_db_path
from .environment import ApiKeys, validate_environment
from .session import create_session_context


class ChatAgent:
    """
    Chat assistant with game lookup and task scheduling tools.

    A fresh Agno agent is built for every question so the scheduling tools
    are bound to the channel the question came from; conversation history
    and user memories live in the shared SQLite database.

    Attributes:
        db: SQLite database for agent memory storage
        api_keys: Validated API keys for external services
        scheduler: Scheduling capability handed to the scheduling tools
    """

    def __init__(self, scheduler: TaskScheduler) -> None:
        """
        Initialize the chat agent.

        Args:
            scheduler: Scheduling capability supplied by the host

        Raises:
            MissingEnvironmentVariableError: If required environment variables are missing
        """
        self.api_keys: ApiKeys = validate_environment()
        self.db: SqliteDb = SqliteDb(db_file=str(get_memory_db_path()))
        self.scheduler = scheduler

    async def ask(
        self, guild_id: int, channel_id: int, user_id: int, question: str
    ) -> AsyncGenerator[str, None]:
        """
        Ask the assistant a question with streaming response.

        Args:
            guild_id: Discord guild ID for session context
            channel_id: Discord channel ID where scheduled tasks report back
            user_id: Discord user ID for per-user memory isolation
            question: The user's message

        Yields:
            Chunks of the response as they are generated

        Raises:
            ValueError: If question is empty or whitespace only
        """
        if not question or not question.strip():
            raise ValueError("Question cannot be empty")

        session = create_session_context(guild_id, channel_id, user_id)
        agent = create_chat_agent(
            self.db,
            build_tools(self.scheduler, session.schedule_context),
            get_llm_model(guild_id),
            self.api_keys.openrouter_api_key,
        )

        async for event in agent.arun(
            input=question,
            user_id=session.user_id_str,
            session_id=session.session_id,
            stream=True,
        ):
            if hasattr(event, "content") and event.content:
                yield event.content

    async def ask_simple(
        self, guild_id: int, channel_id: int, user_id: int, question: str
    ) -> str:
        """
        Ask the assistant a question and get full response.

        Returns:
            The complete response string
        """
        chunks = []
        async for chunk in self.ask(guild_id, channel_id, user_id, question):
            chunks.append(chunk)
        return "".join(chunks)
