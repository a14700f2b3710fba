"""Session and user ID management for agent conversations."""

from dataclasses import dataclass

from scheduler import ScheduleContext


@dataclass(frozen=True)
class SessionContext:
    """
    Encapsulates session identity for agent conversations.

    Attributes:
        user_id_str: String representation of Discord user ID for per-user memories
        session_id: Combined guild+user ID for per-user conversation history within guild
        schedule_context: Origin recorded on tasks scheduled during this conversation
    """

    user_id_str: str
    session_id: str
    schedule_context: ScheduleContext


def create_session_context(guild_id: int, channel_id: int, user_id: int) -> SessionContext:
    """
    Create a session context from Discord guild, channel and user IDs.

    Conversation history is kept per user within a guild, so moving to a
    different channel of the same server continues the same conversation.
    Scheduled tasks report back to the channel they were requested from.

    Args:
        guild_id: Discord guild (server) ID
        channel_id: Discord channel ID the question was asked in
        user_id: Discord user ID

    Returns:
        SessionContext with formatted identifiers
    """
    return SessionContext(
        user_id_str=str(user_id),
        session_id=f"{guild_id}_{user_id}",
        schedule_context=ScheduleContext(
            guild_id=guild_id,
            channel_id=channel_id,
            user_id=user_id,
        ),
    )
