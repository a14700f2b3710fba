"""Scheduled task slash commands (/tasks, /canceltask)."""

import discord
from discord import app_commands

from commands.helpers import EMBED_DESCRIPTION_LIMIT, format_task_line, truncate


def setup(client):
    """Register scheduled task commands on the client."""

    @client.tree.command(name="tasks", description="List tasks scheduled in this server")
    @app_commands.guild_only()
    async def tasks(interaction: discord.Interaction):
        """Show pending tasks for the current guild."""
        pending = [
            task
            for task in await client.scheduler.get_schedules()
            if task.context.guild_id == interaction.guild_id
        ]

        if not pending:
            await interaction.response.send_message("No scheduled tasks found.", ephemeral=True)
            return

        embed = discord.Embed(
            title=f"Scheduled tasks ({len(pending)})",
            description=truncate("\n".join(format_task_line(t) for t in pending), EMBED_DESCRIPTION_LIMIT),
            color=discord.Color.blue(),
        )
        await interaction.response.send_message(embed=embed)

    @client.tree.command(name="canceltask", description="Cancel a scheduled task by its ID")
    @app_commands.guild_only()
    @app_commands.describe(task_id="The ID shown by /tasks")
    async def canceltask(interaction: discord.Interaction, task_id: str):
        """Cancel one of this guild's tasks."""
        task_id = task_id.strip()
        owned = any(
            task.id == task_id and task.context.guild_id == interaction.guild_id
            for task in await client.scheduler.get_schedules()
        )

        if owned and await client.scheduler.cancel_schedule(task_id):
            await interaction.response.send_message(f"Task {task_id} has been successfully canceled.")
        else:
            await interaction.response.send_message(
                f"No scheduled task with ID `{task_id}` in this server.", ephemeral=True
            )
