"""Unit tests for the slash command modules (games, tasks, chat)."""

from unittest.mock import AsyncMock, MagicMock, patch

import discord
import pytest
from discord import app_commands

from commands.chat import setup as setup_chat
from commands.games import setup as setup_games
from commands.tasks import setup as setup_tasks
from chat_agent.environment import MissingEnvironmentVariableError
import game_lookup.tools as tools_module
from scheduler import EXECUTE_TASK_CALLBACK, ScheduleContext, ScheduleRequest, ScheduleType


@pytest.fixture
def bot(scheduler):
    """A client with a command tree and scheduler, never connected."""
    client = discord.Client(intents=discord.Intents.default())
    client.tree = app_commands.CommandTree(client)
    client.scheduler = scheduler
    setup_chat(client)
    setup_games(client)
    setup_tasks(client)
    return client


def _callback(client, name):
    return client.tree.get_command(name).callback


class TestRegistration:
    """Tests for command registration."""

    @pytest.mark.asyncio
    async def test_all_commands_registered(self, bot):
        names = {command.name for command in bot.tree.get_commands()}

        assert names == {"ask", "model", "genres", "story", "developer", "tasks", "canceltask"}


class TestGameCommands:
    """Tests for /genres, /story and /developer."""

    @pytest.mark.asyncio
    async def test_genres(self, bot, mock_interaction, make_resolver, hades_wikipedia):
        with patch("commands.games.get_resolver", return_value=make_resolver(hades_wikipedia)):
            await _callback(bot, "genres")(mock_interaction, "Hades")

        mock_interaction.response.defer.assert_awaited_once()
        embed = mock_interaction.followup.send.call_args.kwargs["embed"]
        assert embed.title == "Genres: Hades (video game)"
        assert embed.description == "Hades (video game) belongs to genres: action, role-playing."

    @pytest.mark.asyncio
    async def test_developer_not_found(self, bot, mock_interaction, make_resolver, empty_wikipedia):
        with patch("commands.games.get_resolver", return_value=make_resolver(empty_wikipedia)):
            await _callback(bot, "developer")(mock_interaction, "Nonexistent Game")

        embed = mock_interaction.followup.send.call_args.kwargs["embed"]
        assert embed.description == 'No Wikipedia page found for "Nonexistent Game".'


    @pytest.mark.asyncio
    async def test_invalid_configuration_still_replies(self, bot, mock_interaction, monkeypatch):
        monkeypatch.setattr(tools_module, "_resolver", None)
        monkeypatch.setenv("WIKIPEDIA_TIMEOUT_SECONDS", "abc")

        await _callback(bot, "genres")(mock_interaction, "Hades")

        embed = mock_interaction.followup.send.call_args.kwargs["embed"]
        assert embed.description.startswith("Error fetching game genres: WIKIPEDIA_TIMEOUT_SECONDS")
        assert embed.color == discord.Color.red()


class TestTaskCommands:
    """Tests for /tasks and /canceltask."""

    @pytest.mark.asyncio
    async def test_tasks_empty(self, bot, mock_interaction):
        await _callback(bot, "tasks")(mock_interaction)

        args, kwargs = mock_interaction.response.send_message.call_args
        assert args[0] == "No scheduled tasks found."
        assert kwargs["ephemeral"] is True

    @pytest.mark.asyncio
    async def test_tasks_lists_only_this_guild(self, bot, mock_interaction, scheduler):
        request = ScheduleRequest(ScheduleType.DELAYED, delay_in_seconds=600)
        await scheduler.schedule(
            request, EXECUTE_TASK_CALLBACK, "Ours", ScheduleContext(guild_id=mock_interaction.guild_id)
        )
        await scheduler.schedule(request, EXECUTE_TASK_CALLBACK, "Theirs", ScheduleContext(guild_id=1))

        await _callback(bot, "tasks")(mock_interaction)

        embed = mock_interaction.response.send_message.call_args.kwargs["embed"]
        assert embed.title == "Scheduled tasks (1)"
        assert "Ours" in embed.description
        assert "Theirs" not in embed.description

    @pytest.mark.asyncio
    async def test_canceltask(self, bot, mock_interaction, scheduler):
        task = await scheduler.schedule(
            ScheduleRequest(ScheduleType.DELAYED, delay_in_seconds=600),
            EXECUTE_TASK_CALLBACK,
            "Ours",
            ScheduleContext(guild_id=mock_interaction.guild_id),
        )

        await _callback(bot, "canceltask")(mock_interaction, f" {task.id} ")

        mock_interaction.response.send_message.assert_awaited_once_with(
            f"Task {task.id} has been successfully canceled."
        )
        assert await scheduler.get_schedules() == []

    @pytest.mark.asyncio
    async def test_canceltask_other_guild(self, bot, mock_interaction, scheduler):
        """Test a guild cannot cancel another guild's task."""
        task = await scheduler.schedule(
            ScheduleRequest(ScheduleType.DELAYED, delay_in_seconds=600),
            EXECUTE_TASK_CALLBACK,
            "Theirs",
            ScheduleContext(guild_id=1),
        )

        await _callback(bot, "canceltask")(mock_interaction, task.id)

        assert mock_interaction.response.send_message.call_args.kwargs["ephemeral"] is True
        assert len(await scheduler.get_schedules()) == 1


class TestAskCommand:
    """Tests for /ask."""

    @pytest.fixture
    def message(self, mock_interaction):
        message = MagicMock()
        message.edit = AsyncMock()
        mock_interaction.followup.send.return_value = message
        return message

    @pytest.mark.asyncio
    async def test_streams_final_answer(self, bot, mock_interaction, message):
        async def mock_ask(guild_id, channel_id, user_id, question):
            yield "Hades was developed "
            yield "by Supergiant Games."

        agent = MagicMock()
        agent.ask = mock_ask
        bot.get_chat_agent = MagicMock(return_value=agent)

        await _callback(bot, "ask")(mock_interaction, "Who made Hades?")

        embed = message.edit.call_args.kwargs["embed"]
        assert embed.description == "Hades was developed by Supergiant Games."
        assert embed.color == discord.Color.green()

    @pytest.mark.asyncio
    async def test_missing_configuration(self, bot, mock_interaction, message):
        bot.get_chat_agent = MagicMock(
            side_effect=MissingEnvironmentVariableError("Required environment variable(s) missing: OPENROUTER_API_KEY")
        )

        await _callback(bot, "ask")(mock_interaction, "hi")

        embed = message.edit.call_args.kwargs["embed"]
        assert embed.description.startswith("Configuration error:")
        assert embed.color == discord.Color.red()

    @pytest.mark.asyncio
    async def test_agent_error(self, bot, mock_interaction, message):
        async def failing_ask(*args):
            raise RuntimeError("model unavailable")
            yield

        agent = MagicMock()
        agent.ask = failing_ask
        bot.get_chat_agent = MagicMock(return_value=agent)

        await _callback(bot, "ask")(mock_interaction, "hi")

        assert message.edit.call_args.kwargs["embed"].description == "Error: model unavailable"


class TestModelCommand:
    """Tests for /model."""

    @pytest.mark.asyncio
    async def test_sets_guild_model(self, bot, mock_interaction):
        choice = app_commands.Choice(name="xAI Grok 4.1 Fast", value="x-ai/grok-4.1-fast")

        with patch("settings.set_llm_model", return_value=True) as mock_set:
            await _callback(bot, "model")(mock_interaction, choice)

        mock_set.assert_called_once_with("x-ai/grok-4.1-fast", mock_interaction.guild_id)
        mock_interaction.response.send_message.assert_awaited_once_with(
            "Model changed to **xAI Grok 4.1 Fast**"
        )
