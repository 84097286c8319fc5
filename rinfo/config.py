"""Configuration and process context."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


DISCORD_TOKEN = os.getenv("DISCORD_TOKEN", "")
DISCORD_GUILD_ID = _env_int("DISCORD_GUILD_ID", 0)

# Dispatcher pool sizing
WORKER_COUNT = _env_int("RINFO_WORKERS", 4)
QUEUE_SIZE = _env_int("RINFO_QUEUE_SIZE", 100)

# discord.py keeps this many recent messages in its in-memory cache
MESSAGE_CACHE_SIZE = _env_int("RINFO_MESSAGE_CACHE", 1000)


@dataclass
class BotConfig:
    """Typed configuration handed to the client at construction."""

    token: str = ""
    guild_id: int = 0
    workers: int = 4
    queue_size: int = 100
    message_cache_size: int = 1000

    @classmethod
    def from_env(cls) -> "BotConfig":
        """Create BotConfig from environment variables."""
        return cls(
            token=DISCORD_TOKEN,
            guild_id=DISCORD_GUILD_ID,
            workers=WORKER_COUNT,
            queue_size=QUEUE_SIZE,
            message_cache_size=MESSAGE_CACHE_SIZE,
        )

    def validate(self) -> None:
        if not self.token:
            raise ValueError("DISCORD_TOKEN is not set")
        if self.workers < 1:
            raise ValueError("RINFO_WORKERS must be at least 1")
        if self.queue_size < 1:
            raise ValueError("RINFO_QUEUE_SIZE must be at least 1")
