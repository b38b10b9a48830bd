"""
Main entry point for flagbot.

Loads configuration from the command line or environment and starts the bot.

Usage:
    python main.py -t <bot token> -c <configuration path>
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import os
import signal
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from discord.errors import (
    ConnectionClosed,
    GatewayNotFound,
    LoginFailure,
    PrivilegedIntentsRequired,
)

from bot import FlagBot
from core.config import ConfigError, load_configuration
from core.constants import DEFAULT_CONFIG_DIR, DEFAULT_LOG_LEVEL, DEFAULT_STATUS, EnvVar
from filters import ModerationHandler

logger = logging.getLogger("flagbot")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="flagbot",
        description="Discord bot that removes CTF flags as they appear.",
    )
    parser.add_argument(
        "-t",
        "--token",
        default=os.getenv(EnvVar.TOKEN) or os.getenv(EnvVar.TOKEN_FALLBACK),
        help=f"Bot token (default: ${EnvVar.TOKEN})",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=os.getenv(EnvVar.CONFIG_DIR, DEFAULT_CONFIG_DIR),
        help="Configuration directory path (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv(EnvVar.LOG_LEVEL, DEFAULT_LOG_LEVEL),
        help="Logging level (default: %(default)s)",
    )
    return parser.parse_args(argv)


def setup_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger().setLevel(level)
    logging.getLogger("discord").setLevel(level)


def install_shutdown_handler(bot: FlagBot) -> None:
    """Close the bot on SIGTERM. SIGINT arrives as KeyboardInterrupt."""
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGTERM, lambda: asyncio.create_task(bot.close()))
    except (NotImplementedError, RuntimeError):
        logger.debug("SIGTERM handler not supported on this platform")


async def run(token: str, config_dir: str, status: str) -> int:
    try:
        config = await load_configuration(config_dir)
    except ConfigError as e:
        logger.error("Error loading configuration: %s", e)
        return 1

    bot = FlagBot(ModerationHandler(config), status=status)
    async with bot:
        install_shutdown_handler(bot)
        try:
            logger.info("Flagbot is now running. Press CTRL-C to exit.")
            await bot.start(token)
        except LoginFailure as e:
            logger.error("Error opening Discord session: %s", e)
            return 1
        except PrivilegedIntentsRequired:
            logger.error(
                "Privileged intents required. Enable the MESSAGE CONTENT intent "
                "in the Discord developer portal."
            )
            return 1
        except (GatewayNotFound, ConnectionClosed, OSError) as e:
            logger.error("Failed to connect to Discord: %s", e)
            return 1
    logger.info("Discord session closed")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(Path(__file__).parent / ".env")
    args = parse_args(argv)
    setup_logging(args.log_level)

    if not args.token:
        logger.error(
            "Missing bot token. Proper Usage: flagbot -t <bot token> -c <configuration path> "
            "(or set %s in .env or environment).",
            EnvVar.TOKEN,
        )
        return 1

    status = os.getenv(EnvVar.STATUS, DEFAULT_STATUS)
    try:
        return asyncio.run(run(args.token, args.config, status))
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
