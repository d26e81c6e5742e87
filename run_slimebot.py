#!/usr/bin/env python3

import asyncio
import logging
import sys

from slimebot.cogs import load_cogs
from slimebot.config import load_config
from slimebot.container import RootContainer
from slimebot.errors import ConfigNotFound, MissingToken

logger = logging.getLogger(__name__)


async def main(root):
    bot = root.bot()

    async with bot:
        logger.info("Loading cogs.")
        await load_cogs(root)
        logger.info("Finished loading cogs.")

        await root.start_bot()


if __name__ == "__main__":
    config_file_path = sys.argv[1] if len(sys.argv) >= 2 else "config.json"
    try:
        config = load_config(config_file_path)
    except ConfigNotFound:
        logging.fatal(
            "Please pass a valid path to a config file as the first command-line argument"
            ' or provide a "config.json" in the PWD.'
        )
        sys.exit(1)
    except MissingToken as e:
        logging.fatal(f"{e}. Set it in the config file or the environment.")
        sys.exit(1)

    log_level = config.get("log_level") or config.get("logging_level") or "INFO"
    try:
        logging.basicConfig(level=log_level.upper())
    except ValueError:
        logging.basicConfig(level=logging.INFO)
        logging.warning(
            '"{}" is not a valid logging level. Defaulted to "INFO".'.format(log_level)
        )

    root = RootContainer()
    root.config.from_dict(config)

    asyncio.run(main(root))
