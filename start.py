#!/usr/bin/env python3
"""
Apply pending migrations, then serve the roster API.

PORT and HOST come from the environment (defaults 10000 and 0.0.0.0).
"""
import os

import uvicorn
from alembic import command
from alembic.config import Config

from core.logging import logger

ALEMBIC_INI = os.path.join(os.path.dirname(os.path.abspath(__file__)), "alembic.ini")


def upgrade_database() -> bool:
    """Bring the schema to the latest revision, False if the upgrade failed"""
    logger.info("Applying migrations up to head")
    try:
        command.upgrade(Config(ALEMBIC_INI), "head")
    except Exception as e:
        logger.error(f"Migration failed: {e}")
        return False
    logger.info("Schema is up to date")
    return True


def serve():
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "10000"))
    logger.info(f"Serving roster API on {host}:{port}")
    uvicorn.run("main:app", host=host, port=port)


if __name__ == "__main__":
    # main.py still runs create_all on startup, so a failed upgrade is not fatal
    if not upgrade_database():
        logger.warning("Starting without a completed migration run")
    serve()
