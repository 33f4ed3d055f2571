"""Application entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Optional, Sequence

from config import Config, load_config
from core import setup_logger, ApplicationInitializer, LogDefaults


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Telegram lucky draw bot")
    parser.add_argument(
        "--messages",
        help="JSON file with message templates (default: $MESSAGES_FILE or messages.json)",
    )
    return parser.parse_args(argv)


async def main(config: Config, messages_file: Optional[str] = None) -> None:
    """Main application entry point."""
    app = ApplicationInitializer(config, messages_file=messages_file)
    await app.initialize()
    await app.run()


if __name__ == "__main__":
    args = parse_args()
    settings = load_config()

    # Configure the root logger so every module logger is captured
    logger = setup_logger(
        name="",
        level=logging.DEBUG if settings.debug else logging.INFO,
        log_file=str(Path(settings.log_folder) / LogDefaults.FILE_NAME),
        colored=True
    )

    try:
        asyncio.run(main(settings, args.messages))
    except KeyboardInterrupt:
        logger.info("Application stopped by user")
    except Exception as e:
        logger.error(f"Application failed: {e}", exc_info=True)
