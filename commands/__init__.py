"""Command modules for the Discord bot."""

from commands.chat import setup as setup_chat
from commands.games import setup as setup_games
from commands.tasks import setup as setup_tasks


def setup_commands(client):
    """Register all command modules with the bot client."""
    setup_chat(client)
    setup_games(client)
    setup_tasks(client)
