"""SQLite settings management for the bot.

Settings are stored per guild. Guild 0 holds the bot-wide defaults that
apply when a guild has not chosen its own value.
"""

import sqlite3
from pathlib import Path

# Ensure data directory exists
DATA_DIR = Path(__file__).parent / "data"
DATA_DIR.mkdir(exist_ok=True)

DB_PATH = DATA_DIR / "settings.db"

GLOBAL_SCOPE = 0

# Available LLM models (must support tool calling)
AVAILABLE_MODELS = [
    "openai/gpt-5.2",
    "x-ai/grok-4.1-fast",
    "google/gemini-3-pro-preview",
    "anthropic/claude-sonnet-4.5",
    "anthropic/claude-haiku-4.5",
    "google/gemini-3-flash-preview",
]

DEFAULT_MODEL = "google/gemini-3-flash-preview"


def _get_connection() -> sqlite3.Connection:
    """Get a database connection."""
    return sqlite3.connect(DB_PATH)


def init_db() -> None:
    """Initialize the settings database table."""
    with _get_connection() as conn:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS guild_settings (
                guild_id INTEGER NOT NULL,
                key TEXT NOT NULL,
                value TEXT NOT NULL,
                PRIMARY KEY (guild_id, key)
            )
        """)
        conn.execute("""
            INSERT OR IGNORE INTO guild_settings (guild_id, key, value) VALUES (?, 'llm_model', ?)
        """, (GLOBAL_SCOPE, DEFAULT_MODEL))
        conn.commit()


def get_setting(key: str, guild_id: int | None = None, default: str | None = None) -> str | None:
    """
    Get a setting value, falling back to the bot-wide value.

    Args:
        key: Setting name
        guild_id: Guild to look up first (None for bot-wide only)
        default: Returned when neither scope has the key
    """
    scopes = [GLOBAL_SCOPE] if not guild_id else [guild_id, GLOBAL_SCOPE]
    with _get_connection() as conn:
        for scope in scopes:
            row = conn.execute(
                "SELECT value FROM guild_settings WHERE guild_id = ? AND key = ?",
                (scope, key),
            ).fetchone()
            if row:
                return row[0]
    return default


def set_setting(key: str, value: str, guild_id: int | None = None) -> None:
    """Set a setting value for a guild (or bot-wide when guild_id is None)."""
    with _get_connection() as conn:
        conn.execute("""
            INSERT OR REPLACE INTO guild_settings (guild_id, key, value) VALUES (?, ?, ?)
        """, (guild_id or GLOBAL_SCOPE, key, value))
        conn.commit()


def get_llm_model(guild_id: int | None = None) -> str:
    """Get the LLM model used for a guild."""
    return get_setting("llm_model", guild_id, DEFAULT_MODEL)


def set_llm_model(model: str, guild_id: int | None = None) -> bool:
    """
    Set the LLM model for a guild.

    Returns True if successful, False if model is not in the allowed list.
    """
    if model not in AVAILABLE_MODELS:
        return False
    set_setting("llm_model", model, guild_id)
    return True


# Initialize database on module import
init_db()
