"""
Data models for PokéAPI entities and cache keys.
"""

import hashlib
from enum import Enum
from typing import Dict, Iterable, List, Optional, Type, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

from .errors import PresentationError
from .matchup import PokemonType, canonical_types


class EntityKind(str, Enum):
    """Lookup kinds offered on the command line; values are API endpoints."""

    POKEMON = "pokemon"
    ABILITY = "ability"
    MOVE = "move"
    ITEM = "item"


class CacheKey(BaseModel):
    """Stable identity of a cached response."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    identifier: str

    @classmethod
    def for_entity(cls, kind: Union[EntityKind, str], name: str) -> "CacheKey":
        """Key for an entity or linked resource looked up by normalized name."""
        namespace = kind.value if isinstance(kind, EntityKind) else str(kind)
        return cls(namespace=namespace, identifier=name)

    @classmethod
    def for_types(cls, types: Iterable[Union[PokemonType, str]]) -> "CacheKey":
        """
        Key for a set of defending types; order and duplicates do not matter.

        Uses its own ``matchup`` namespace so it never collides with a cached
        ``type`` endpoint response.
        """
        ordered = canonical_types(types)
        return cls(namespace="matchup", identifier="+".join(t.value for t in ordered))

    @property
    def value(self) -> str:
        """Filesystem-safe string form, ``<namespace>_<md5 of identifier>``."""
        return f"{self.namespace}_{hashlib.md5(self.identifier.encode()).hexdigest()}"

    def __str__(self) -> str:
        return self.value


class NamedResource(BaseModel):
    """Reference from one API object to another."""

    name: str
    url: str

    @property
    def endpoint(self) -> str:
        """Endpoint segment of the URL, e.g. ``pokemon-species``."""
        parts = [p for p in urlparse(self.url).path.split("/") if p]
        if len(parts) < 2:
            raise PresentationError(f"unexpected resource URL '{self.url}'")
        return parts[-2]


class Name(BaseModel):
    """Localized name."""

    name: str
    language: NamedResource


class EffectEntry(BaseModel):
    """Localized effect description."""

    effect: str
    short_effect: str = ""
    language: NamedResource


class PokemonTypeSlot(BaseModel):
    """One of a Pokémon's types and its slot."""

    model_config = ConfigDict(populate_by_name=True)

    slot: int
    type_: NamedResource = Field(alias="type")


class Pokemon(BaseModel):
    """Model for ``/pokemon/{name}``."""

    id: int
    name: str
    weight: int
    types: List[PokemonTypeSlot] = Field(default_factory=list)
    species: NamedResource

    @property
    def weight_kg(self) -> float:
        """Weight in kilograms (the API reports hectograms)."""
        return self.weight / 10

    @property
    def type_names(self) -> List[str]:
        """API type names in slot order."""
        return [t.type_.name for t in sorted(self.types, key=lambda t: t.slot)]


class Ability(BaseModel):
    """Model for ``/ability/{name}``."""

    id: int
    name: str
    names: List[Name] = Field(default_factory=list)
    generation: NamedResource
    effect_entries: List[EffectEntry] = Field(default_factory=list)


class Move(BaseModel):
    """Model for ``/move/{name}``."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    names: List[Name] = Field(default_factory=list)
    generation: NamedResource
    damage_class: Optional[NamedResource] = None
    type_: NamedResource = Field(alias="type")
    pp: Optional[int] = None
    power: Optional[int] = None
    accuracy: Optional[int] = None
    priority: int = 0
    target: NamedResource
    effect_chance: Optional[int] = None
    effect_entries: List[EffectEntry] = Field(default_factory=list)


class Item(BaseModel):
    """Model for ``/item/{name}``."""

    id: int
    name: str
    names: List[Name] = Field(default_factory=list)
    category: NamedResource
    fling_power: Optional[int] = None
    fling_effect: Optional[NamedResource] = None
    effect_entries: List[EffectEntry] = Field(default_factory=list)


class Resource(BaseModel):
    """Linked resource followed for display (species, generation, target, ...)."""

    id: Optional[int] = None
    name: str
    names: List[Name] = Field(default_factory=list)
    effect_entries: List[EffectEntry] = Field(default_factory=list)
    generation: Optional[NamedResource] = None


Entity = Union[Pokemon, Ability, Move, Item]

ENTITY_MODELS: Dict[EntityKind, Type[BaseModel]] = {
    EntityKind.POKEMON: Pokemon,
    EntityKind.ABILITY: Ability,
    EntityKind.MOVE: Move,
    EntityKind.ITEM: Item,
}


def english_name(names: List[Name]) -> str:
    """English localized name, falling back to the first one listed."""
    for entry in names:
        if entry.language.name == "en":
            return entry.name
    if names:
        return names[0].name
    raise PresentationError("unable to find a suitable name")


def english_effect(entries: List[EffectEntry]) -> str:
    """English effect text, falling back to the first one listed."""
    for entry in entries:
        if entry.language.name == "en":
            return entry.effect
    if entries:
        return entries[0].effect
    raise PresentationError("unable to find a suitable effect")
