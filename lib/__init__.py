# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - mongo_client.py: MongoDB client construction and connectivity check
# =============================================================================

from lib.mongo_client import create_mongo_client, create_sync_client, ping_database

__all__ = [
    "create_mongo_client",
    "create_sync_client",
    "ping_database",
]
