#!/usr/bin/env python3
# =============================================================================
# scripts/seed_planets.py - Seed the Planets Collection
# =============================================================================
# Creates the application user and (re)loads the fixed planet dataset.
# Any existing planet records are dropped first.
#
# Usage:
#   poetry run python scripts/seed_planets.py
#
# Prerequisites:
#   - MongoDB must be running and MONGO_URI must point at it with a user
#     allowed to create users (e.g. the root user)
#   - SEED_USERNAME / SEED_PASSWORD may be set in .env; the database is
#     MONGO_DB_NAME unless SEED_DB_NAME overrides it
# =============================================================================

import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from app.config import get_settings
from core.services.seed_service import seed_planets
from lib.mongo_client import create_sync_client


def main():
    """Seed the planet database. Errors propagate and abort the script."""
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logging.getLogger("pymongo").setLevel(logging.INFO)

    client = create_sync_client(settings)
    try:
        seed_planets(
            client,
            db_name=settings.seed_db_name,
            username=settings.SEED_USERNAME,
            password=settings.SEED_PASSWORD,
            collection_name=settings.MONGO_COLLECTION,
        )
    finally:
        client.close()


if __name__ == "__main__":
    main()
