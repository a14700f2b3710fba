"""Chat assistant slash commands (/ask, /model)."""

import asyncio
import logging
import time

import discord
from discord import app_commands

from chat_agent.environment import MissingEnvironmentVariableError
from commands.helpers import EMBED_DESCRIPTION_LIMIT, EMBED_TITLE_LIMIT, truncate

logger = logging.getLogger(__name__)


def setup(client):
    """Register chat assistant commands on the client."""

    @client.tree.command(name="model", description="Change the AI model used by /ask in this server")
    @app_commands.guild_only()
    @app_commands.describe(model="The LLM model to use")
    @app_commands.choices(model=[
        app_commands.Choice(name="OpenAI GPT-5.2", value="openai/gpt-5.2"),
        app_commands.Choice(name="xAI Grok 4.1 Fast", value="x-ai/grok-4.1-fast"),
        app_commands.Choice(name="Google Gemini 3 Pro", value="google/gemini-3-pro-preview"),
        app_commands.Choice(name="Anthropic Claude Sonnet 4.5", value="anthropic/claude-sonnet-4.5"),
        app_commands.Choice(name="Anthropic Claude Haiku 4.5", value="anthropic/claude-haiku-4.5"),
        app_commands.Choice(name="Google Gemini 3 Flash", value="google/gemini-3-flash-preview"),
    ])
    async def model(interaction: discord.Interaction, model: app_commands.Choice[str]):
        """Change the LLM model used by the /ask command."""
        from settings import get_llm_model, set_llm_model

        if set_llm_model(model.value, interaction.guild_id):
            await interaction.response.send_message(f"Model changed to **{model.name}**")
        else:
            current = get_llm_model(interaction.guild_id)
            await interaction.response.send_message(
                f"Invalid model. Current model: **{current}**",
                ephemeral=True
            )

    @client.tree.command(name="ask", description="Chat with the assistant (game info, scheduling)")
    @app_commands.guild_only()
    @app_commands.describe(question="Ask about a video game or schedule a task")
    async def ask(interaction: discord.Interaction, question: str):
        """Answer a message using the chat agent and its tools."""
        await interaction.response.defer()

        embed = discord.Embed(
            title=truncate(question, EMBED_TITLE_LIMIT),
            description="Thinking...",
            color=discord.Color.blue(),
        )
        embed.set_footer(text="Powered by Agno + Wikipedia")

        message = await interaction.followup.send(embed=embed)

        try:
            agent = client.get_chat_agent()
        except MissingEnvironmentVariableError as e:
            embed.description = f"Configuration error: {e}"
            embed.color = discord.Color.red()
            await message.edit(embed=embed)
            return

        try:
            response_chunks: list[str] = []
            last_update = time.monotonic()

            async for chunk in agent.ask(
                interaction.guild_id, interaction.channel_id, interaction.user.id, question
            ):
                response_chunks.append(chunk)

                # Update embed at most once per second to avoid rate limits
                if time.monotonic() - last_update >= 1.0:
                    embed.description = truncate("".join(response_chunks), EMBED_DESCRIPTION_LIMIT)
                    embed.color = discord.Color.gold()
                    await message.edit(embed=embed)
                    last_update = time.monotonic()

            full_response = "".join(response_chunks)
            embed.description = (
                truncate(full_response, EMBED_DESCRIPTION_LIMIT) if full_response else "No response generated."
            )
            embed.color = discord.Color.green()
            await message.edit(embed=embed)

        except (TimeoutError, asyncio.TimeoutError):
            embed.description = "Request timed out. Please try again."
            embed.color = discord.Color.red()
            await message.edit(embed=embed)
        except Exception as e:
            logger.exception("Error answering /ask: %s", e)
            embed.description = f"Error: {str(e)[:500]}"
            embed.color = discord.Color.red()
            await message.edit(embed=embed)
