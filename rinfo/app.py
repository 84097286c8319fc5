"""Process entry point."""

import asyncio
import sys

from rinfo.adapters.discord.bot import ReactionInfoBot
from rinfo.config import BotConfig


def _log(msg: str):
    print(msg, file=sys.stderr)


async def run_bot(config: BotConfig) -> None:
    """Run the bot until the connection closes; shuts the worker pool down on exit."""
    bot = ReactionInfoBot(config)
    async with bot:
        await bot.start(config.token)


def main() -> int:
    config = BotConfig.from_env()
    try:
        config.validate()
    except ValueError as e:
        _log(f"[rinfo] configuration error: {e}")
        return 1

    try:
        asyncio.run(run_bot(config))
    except KeyboardInterrupt:
        _log("[rinfo] interrupted, shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
