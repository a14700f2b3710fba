"""Discord chat assistant with video game lookups and scheduled tasks."""

import logging
import os

import discord
from discord import app_commands
from dotenv import load_dotenv

from commands import setup_commands
from scheduler import EXECUTE_TASK_CALLBACK, InMemoryTaskScheduler, ScheduledTask

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("gameinfo-bot")

TOKEN = os.getenv("DISCORD_TOKEN")


class GameInfoBot(discord.Client):
    """Discord bot client with command tree and task scheduler."""

    def __init__(self):
        intents = discord.Intents.default()
        super().__init__(intents=intents)
        self.tree = app_commands.CommandTree(self)
        self.scheduler = InMemoryTaskScheduler()
        self.scheduler.register_handler(EXECUTE_TASK_CALLBACK, self.execute_task)
        self._chat_agent = None

    async def setup_hook(self):
        """Sync commands on startup."""
        await self.tree.sync()
        print(f"Synced {len(self.tree.get_commands())} commands")

    async def close(self):
        """Cancel pending tasks before disconnecting."""
        await self.scheduler.shutdown()
        await super().close()

    def get_chat_agent(self):
        """Get or create the chat agent singleton."""
        if self._chat_agent is None:
            from chat_agent import ChatAgent

            self._chat_agent = ChatAgent(self.scheduler)
        return self._chat_agent

    async def execute_task(self, task: ScheduledTask) -> None:
        """Deliver a due task to the channel it was scheduled from."""
        channel_id = task.context.channel_id
        if channel_id is None:
            logger.warning("Scheduled task %s has no channel to report to", task.id)
            return

        channel = self.get_channel(channel_id) or await self.fetch_channel(channel_id)
        mention = f"<@{task.context.user_id}> " if task.context.user_id else ""
        await channel.send(f"{mention}Running scheduled task: {task.payload}")


client = GameInfoBot()
setup_commands(client)


# ============== Entry Point ==============


def main():
    """Run the bot."""
    if not TOKEN:
        print("Error: DISCORD_TOKEN not found in environment variables.")
        print("Create a .env file with: DISCORD_TOKEN=your_token_here")
        return

    if not os.getenv("OPENROUTER_API_KEY"):
        print("Warning: OPENROUTER_API_KEY is not set; /ask will be unavailable.")
        print()

    client.run(TOKEN, log_handler=None)


if __name__ == "__main__":
    main()
