"""Game lookup slash commands (/genres, /story, /developer)."""

import logging

import discord
from discord import app_commands

from game_lookup import LookupOutcome, LookupStatus, MetadataView, format_outcome
from game_lookup.tools import get_resolver

from commands.helpers import build_lookup_embed

logger = logging.getLogger(__name__)


async def _send_lookup(interaction: discord.Interaction, name: str, view: MetadataView):
    """Run a lookup and reply with its embed."""
    await interaction.response.defer()

    try:
        resolver = get_resolver()
    except ValueError as e:
        logger.error("Invalid Wikipedia lookup configuration: %s", e)
        outcome = LookupOutcome(LookupStatus.LOOKUP_FAILED, view, name or "", error=e)
    else:
        outcome = await resolver.lookup(name, view)

    embed = build_lookup_embed(outcome, format_outcome(outcome))
    await interaction.followup.send(embed=embed)


def setup(client):
    """Register game lookup commands on the client."""

    @client.tree.command(name="genres", description="Get the genres of a video game from Wikipedia")
    @app_commands.describe(name="The name of the video game")
    async def genres(interaction: discord.Interaction, name: str):
        """Look up a game's genres."""
        await _send_lookup(interaction, name, MetadataView.GENRES)

    @client.tree.command(name="story", description="Summarize the story of a video game from Wikipedia")
    @app_commands.describe(name="The name of the video game")
    async def story(interaction: discord.Interaction, name: str):
        """Look up a short story summary."""
        await _send_lookup(interaction, name, MetadataView.STORY)

    @client.tree.command(name="developer", description="Find the developer of a video game on Wikipedia")
    @app_commands.describe(name="The name of the video game")
    async def developer(interaction: discord.Interaction, name: str):
        """Look up a game's developer."""
        await _send_lookup(interaction, name, MetadataView.DEVELOPER)
