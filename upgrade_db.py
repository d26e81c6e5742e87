#!/usr/bin/env python3
"""
Usage: upgrade_db.py [config.json] [alembic command...]

Runs an Alembic command against the database from the config file,
defaulting to "upgrade head".
"""

import json
import sys

from alembic.config import main as alembic

from slimebot.db.migrate import MIGRATIONS_DIR

if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) >= 2 else "config.json"
    alembic_command = sys.argv[2:] or ["upgrade", "head"]

    with open(path) as f:
        config = json.load(f)

    url = config["db"]["connect_string"]

    alembic_opts = [
        "-c",
        str(MIGRATIONS_DIR / "alembic.ini"),
        "-x",
        "url=" + url,
        *alembic_command,
    ]
    alembic(alembic_opts)
