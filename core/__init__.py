# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the planet domain logic:
# - models/: Pydantic schemas for planet records
# - seed_data.py: The fixed planet dataset
# - services/: Planet lookup and database seeding
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
