"""
Type effectiveness chart and defensive matchup calculation.

Multipliers are kept as ``Fraction`` values so that combining two defending
types is exact: every result is one of 0, 1/4, 1/2, 1, 2 or 4.
"""

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from .errors import InvalidInputError

MAX_DEFENDING_TYPES = 2

IMMUNE = Fraction(0)
NOT_VERY_EFFECTIVE = Fraction(1, 2)
NEUTRAL = Fraction(1)
SUPER_EFFECTIVE = Fraction(2)


class PokemonType(str, Enum):
    """The 18 elemental types, in canonical chart order."""

    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    ELECTRIC = "electric"
    GRASS = "grass"
    ICE = "ice"
    FIGHTING = "fighting"
    POISON = "poison"
    GROUND = "ground"
    FLYING = "flying"
    PSYCHIC = "psychic"
    BUG = "bug"
    ROCK = "rock"
    GHOST = "ghost"
    DRAGON = "dragon"
    DARK = "dark"
    STEEL = "steel"
    FAIRY = "fairy"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_name(cls, name: Union["PokemonType", str]) -> "PokemonType":
        """Parse a type name case-insensitively."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise InvalidInputError(f"unknown type '{name}'") from None


_ORDER: Dict[PokemonType, int] = {t: i for i, t in enumerate(PokemonType)}

# attacking type -> (super effective against, not very effective against, no effect on)
_RELATIONS: Dict[PokemonType, Tuple[str, str, str]] = {
    PokemonType.NORMAL: ("", "rock steel", "ghost"),
    PokemonType.FIRE: ("grass ice bug steel", "fire water rock dragon", ""),
    PokemonType.WATER: ("fire ground rock", "water grass dragon", ""),
    PokemonType.ELECTRIC: ("water flying", "electric grass dragon", "ground"),
    PokemonType.GRASS: ("water ground rock", "fire grass poison flying bug dragon steel", ""),
    PokemonType.ICE: ("grass ground flying dragon", "fire water ice steel", ""),
    PokemonType.FIGHTING: ("normal ice rock dark steel", "poison flying psychic bug fairy", "ghost"),
    PokemonType.POISON: ("grass fairy", "poison ground rock ghost", "steel"),
    PokemonType.GROUND: ("fire electric poison rock steel", "grass bug", "flying"),
    PokemonType.FLYING: ("grass fighting bug", "electric rock steel", ""),
    PokemonType.PSYCHIC: ("fighting poison", "psychic steel", "dark"),
    PokemonType.BUG: ("grass psychic dark", "fire fighting poison flying ghost steel fairy", ""),
    PokemonType.ROCK: ("fire ice flying bug", "fighting ground steel", ""),
    PokemonType.GHOST: ("psychic ghost", "dark", "normal"),
    PokemonType.DRAGON: ("dragon", "steel", "fairy"),
    PokemonType.DARK: ("psychic ghost", "fighting dark fairy", ""),
    PokemonType.STEEL: ("ice rock fairy", "fire water electric steel", ""),
    PokemonType.FAIRY: ("fighting dragon dark", "fire poison steel", ""),
}


def _build_chart() -> Mapping[Tuple[PokemonType, PokemonType], Fraction]:
    chart = {(atk, dfn): NEUTRAL for atk in PokemonType for dfn in PokemonType}
    for atk, (double, half, none) in _RELATIONS.items():
        for names, multiplier in ((double, SUPER_EFFECTIVE), (half, NOT_VERY_EFFECTIVE), (none, IMMUNE)):
            for name in names.split():
                chart[(atk, PokemonType(name))] = multiplier
    return MappingProxyType(chart)


# (attacking, defending) -> multiplier
TYPE_CHART: Mapping[Tuple[PokemonType, PokemonType], Fraction] = _build_chart()


def effectiveness(attacking: PokemonType, defending: PokemonType) -> Fraction:
    """Single-type multiplier of an attack against a defender."""
    return TYPE_CHART[(attacking, defending)]


def unique_types(types: Iterable[Union[PokemonType, str]]) -> Tuple[PokemonType, ...]:
    """Parse types and drop duplicates, keeping first occurrences in order."""
    seen: List[PokemonType] = []
    for name in types:
        parsed = PokemonType.from_name(name)
        if parsed not in seen:
            seen.append(parsed)
    return tuple(seen)


def canonical_types(types: Iterable[Union[PokemonType, str]]) -> Tuple[PokemonType, ...]:
    """Deduplicated types in chart order."""
    return tuple(sorted(unique_types(types), key=_ORDER.__getitem__))


@dataclass(frozen=True)
class MatchupResult:
    """Combined multiplier of every attacking type against the defending types."""

    defending: Tuple[PokemonType, ...]
    multipliers: Mapping[PokemonType, Fraction]

    def __getitem__(self, attacking: PokemonType) -> Fraction:
        return self.multipliers[attacking]

    def grouped(self) -> List[Tuple[Fraction, List[PokemonType]]]:
        """Attacking types grouped by multiplier, strongest first, chart order within."""
        groups: Dict[Fraction, List[PokemonType]] = {}
        for attacking in PokemonType:
            groups.setdefault(self.multipliers[attacking], []).append(attacking)
        return sorted(groups.items(), key=lambda item: item[0], reverse=True)


def compute(defending_types: Iterable[Union[PokemonType, str]]) -> MatchupResult:
    """
    Combine the chart rows of one or two defending types.

    Args:
        defending_types: Types of the defender; duplicates are ignored

    Returns:
        MatchupResult covering all 18 attacking types

    Raises:
        InvalidInputError: If no types, more than two types, or an unknown type is given
    """
    defending = unique_types(defending_types)
    if not defending:
        raise InvalidInputError("at least one type is required")
    if len(defending) > MAX_DEFENDING_TYPES:
        raise InvalidInputError(
            f"at most {MAX_DEFENDING_TYPES} types can be combined, got {len(defending)}"
        )

    multipliers: Dict[PokemonType, Fraction] = {}
    for attacking in PokemonType:
        multiplier = NEUTRAL
        for dfn in defending:
            multiplier *= TYPE_CHART[(attacking, dfn)]
        multipliers[attacking] = multiplier

    return MatchupResult(defending=defending, multipliers=MappingProxyType(multipliers))
