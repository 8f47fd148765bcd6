# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the planet API:
# - test_planets.py: POST /planet and the planet repository
# - test_health.py: /os, /live and /ready
# - test_docs.py: Root page, /api-docs and static assets
# - test_seed.py: Database seeding
# - test_models.py: Planet model and dataset
# - test_config.py: Settings parsing
# - test_main.py: App lifespan and MongoDB client wiring
#
# Run tests with: poetry run pytest
# =============================================================================
