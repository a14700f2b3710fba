"""Configuration constants for the chat assistant agent."""

from pathlib import Path

# Data directory - absolute path relative to package location
DATA_DIR = Path(__file__).parent.parent / "data"

# Database configuration
MEMORY_DB_FILENAME = "chat_memory.db"

# Agent behavior configuration
NUM_HISTORY_RUNS = 5

AGENT_NAME = "GameInfo"
AGENT_DESCRIPTION = "A helpful assistant that knows about video games and can schedule tasks"
AGENT_INSTRUCTIONS = [
    "You are a helpful assistant in a Discord server.",
    "",
    "You can look up video games on Wikipedia:",
    "- get_game_genres: the genres of a game",
    "- summarize_game_story: a short summary of a game's story",
    "- get_developer_info: the studio that developed a game",
    "",
    "You can also manage scheduled tasks:",
    "- schedule_task: schedule a task for a date, after a delay, or on a cron schedule",
    "- get_scheduled_tasks: list scheduled tasks",
    "- cancel_scheduled_task: cancel a task by its ID",
    "",
    "When scheduling, use the current date and time from your context to turn",
    "phrases like 'tomorrow at 9' into an ISO-8601 date. If the user gives no",
    "time at all, call schedule_task with when_type 'no-schedule'.",
    "",
    "Relay tool results to the user faithfully, including error messages.",
    "Keep responses under 1500 characters to fit in Discord embeds.",
]


def ensure_data_directory() -> Path:
    """Ensure the data directory exists and return its path."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return DATA_DIR


def get_memory_db_path() -> Path:
    """Get the full path to the memory database file."""
    return ensure_data_directory() / MEMORY_DB_FILENAME
