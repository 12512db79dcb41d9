"""Pytest configuration and fixtures."""

import pytest

from mtg_notation.config import settings
from mtg_notation.models import CardFace


@pytest.fixture(autouse=True)
def lenient_type_lines(monkeypatch):
    """Run every test with strict type line checks off unless enabled."""
    monkeypatch.setattr(settings, "strict_type_lines", False)


@pytest.fixture
def sample_creature_data() -> dict:
    """Provide a creature card face as read from JSON."""
    return {
        "name": "Nylea, God of the Hunt",
        "mana_cost": "{3}{G}",
        "type_line": "Legendary Enchantment Creature — God",
        "power": 6,
        "toughness": 6,
    }


@pytest.fixture
def sample_creature(sample_creature_data) -> CardFace:
    """Provide a creature card face."""
    return CardFace.from_dict(sample_creature_data)


@pytest.fixture
def sample_planeswalker() -> CardFace:
    """Provide a planeswalker card face."""
    return CardFace(
        name="Karn Liberated",
        mana_cost="{7}",
        type_line="Legendary Planeswalker — Karn",
        loyalty=6,
    )
