"""
Shared fixtures: trimmed PokéAPI payloads.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

API = "https://pokeapi.co/api/v2"


def ref(endpoint, name, id_=1):
    return {"name": name, "url": f"{API}/{endpoint}/{id_}/"}


def names(en, ja=None):
    entries = []
    if ja:
        entries.append({"name": ja, "language": ref("language", "ja", 11)})
    entries.append({"name": en, "language": ref("language", "en", 9)})
    return entries


def effects(en, de=None):
    entries = []
    if de:
        entries.append({"effect": de, "short_effect": de, "language": ref("language", "de", 6)})
    entries.append({"effect": en, "short_effect": en, "language": ref("language", "en", 9)})
    return entries


@pytest.fixture
def pokemon_data():
    """Charizard, with types listed out of slot order."""
    return {
        "id": 6,
        "name": "charizard",
        "weight": 905,
        "types": [
            {"slot": 2, "type": ref("type", "flying", 3)},
            {"slot": 1, "type": ref("type", "fire", 10)},
        ],
        "species": ref("pokemon-species", "charizard", 6),
        "height": 17,
    }


@pytest.fixture
def species_data():
    return {
        "id": 6,
        "name": "charizard",
        "names": names("Charizard", ja="リザードン"),
        "generation": ref("generation", "generation-i", 1),
    }


@pytest.fixture
def generation_data():
    return {
        "id": 1,
        "name": "generation-i",
        "names": names("Generation I"),
    }


@pytest.fixture
def ability_data():
    return {
        "id": 33,
        "name": "swift-swim",
        "names": names("Swift Swim"),
        "generation": ref("generation", "generation-iii", 3),
        "effect_entries": effects(
            "This Pokémon's Speed is doubled during rain.",
            de="Verdoppelt die Initiative bei Regen.",
        ),
    }


@pytest.fixture
def move_data():
    return {
        "id": 9,
        "name": "thunder-punch",
        "names": names("Thunder Punch"),
        "generation": ref("generation", "generation-i", 1),
        "damage_class": ref("move-damage-class", "physical", 2),
        "type": ref("type", "electric", 13),
        "pp": 15,
        "power": 75,
        "accuracy": 100,
        "priority": 0,
        "target": ref("move-target", "selected-pokemon", 10),
        "effect_chance": 10,
        "effect_entries": effects(
            "Inflicts regular damage.  Has a $effect_chance% chance to paralyze the target."
        ),
    }


@pytest.fixture
def item_data():
    return {
        "id": 1,
        "name": "master-ball",
        "names": names("Master Ball"),
        "category": ref("item-category", "standard-balls", 34),
        "fling_power": None,
        "fling_effect": None,
        "effect_entries": effects("Catches a wild Pokémon every time."),
    }
