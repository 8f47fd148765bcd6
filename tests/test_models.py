# =============================================================================
# tests/test_models.py - Planet Model Tests
# =============================================================================
# Unit tests for the planet models and the fixed dataset.
#
# Run with: poetry run pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import Planet
from core.seed_data import PLANETS, planet_documents


class TestPlanet:
    """Tests for the Planet model."""

    def test_valid_planet(self):
        planet = Planet(
            id=4,
            name="Mars",
            description="Red.",
            image="images/mars.png",
            velocity="24.13 km/s",
            distance="227.9 million km",
        )

        assert planet.id == 4
        assert planet.distance == "227.9 million km"

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            Planet(id=4, name="Mars")

    def test_negative_id_rejected(self):
        with pytest.raises(ValidationError):
            Planet(
                id=-1,
                name="Vulcan",
                description="Not real.",
                image="images/vulcan.png",
                velocity="N/A",
                distance="0",
            )


class TestDataset:
    """Tests for the fixed planet dataset."""

    def test_ten_records(self):
        assert len(PLANETS) == 10

    def test_ids_unique_and_ordered(self):
        assert [planet.id for planet in PLANETS] == list(range(10))

    def test_sun_first(self):
        sun = PLANETS[0]
        assert sun.name == "Sun"
        assert sun.velocity == "N/A"
        assert sun.distance == "0"

    def test_pluto_last(self):
        pluto = PLANETS[-1]
        assert pluto.name == "Pluto"
        assert pluto.distance == "5.9 billion km"

    def test_images_follow_names(self):
        for planet in PLANETS:
            assert planet.image == f"images/{planet.name.lower()}.png"

    def test_documents_are_fresh_copies(self):
        """insert_many adds _id in place, so each call must return new dicts."""
        first = planet_documents()
        first[0]["_id"] = "x"

        assert "_id" not in planet_documents()[0]
