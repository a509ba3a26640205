"""
Plain-text rendering of entities and matchups.
"""

from fractions import Fraction
from typing import List, Optional

from .matchup import MatchupResult, PokemonType
from .models import Ability, Item, Move, Pokemon, Resource, english_effect, english_name

SEPARATOR = "---"


def format_multiplier(multiplier: Fraction) -> str:
    """``Fraction(1, 4)`` -> ``"0.25"``, ``Fraction(2)`` -> ``"2"``."""
    if multiplier.denominator == 1:
        return str(multiplier.numerator)
    return f"{float(multiplier):g}"


def type_label(name: str) -> str:
    """Display name for an API type name; unknown types are capitalized as-is."""
    try:
        return PokemonType(name).display_name
    except ValueError:
        return name.capitalize()


def _or_dash(value: Optional[int]) -> str:
    return "-" if value is None else str(value)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def render_matchup(result: MatchupResult) -> str:
    """One ``×<multiplier>`` line per group of attacking types."""
    lines = []
    for multiplier, types in result.grouped():
        names = ", ".join(t.display_name for t in types)
        lines.append(f"×{format_multiplier(multiplier)}\t{names}")
    return "\n".join(lines)


def render_type_matchup(result: MatchupResult) -> str:
    header = ", ".join(t.display_name for t in result.defending)
    return f"Types:\t{header}\n\n{render_matchup(result)}"


def render_pokemon(pokemon: Pokemon, species: Resource, generation: Resource, matchup: MatchupResult) -> str:
    lines: List[str] = [
        f"{english_name(species.names)} ({english_name(generation.names)})",
        "",
        f"Types:\t{', '.join(type_label(t) for t in pokemon.type_names)}",
        f"Weight:\t{pokemon.weight_kg:g} kg",
        "",
        render_matchup(matchup),
    ]
    return "\n".join(lines)


def render_ability(ability: Ability, generation: Resource) -> str:
    return (
        f"{english_name(ability.names)} ({english_name(generation.names)})\n\n"
        f"{SEPARATOR}\n\n"
        f"{english_effect(ability.effect_entries)}"
    )


def render_move(
    move: Move,
    generation: Resource,
    damage_class: Optional[Resource],
    target: Resource,
) -> str:
    """
    Render a move with its stats and effect.

    Priority is only listed when it differs from zero. ``$effect_chance`` in the
    effect text is replaced with the move's effect chance.
    """
    move_class = _capitalize_first(english_name(damage_class.names)) if damage_class else "-"

    effect = english_effect(move.effect_entries)
    if move.effect_chance is not None:
        effect = effect.replace("$effect_chance", str(move.effect_chance))

    lines: List[str] = [
        f"{english_name(move.names)} ({english_name(generation.names)})",
        "",
        f"Class:\t\t{move_class}",
        f"Type:\t\t{type_label(move.type_.name)}",
        f"PP:\t\t{_or_dash(move.pp)}",
        f"Power:\t\t{_or_dash(move.power)}",
        f"Accuracy:\t{_or_dash(move.accuracy)}",
    ]
    if move.priority != 0:
        lines.append(f"Priority:\t{move.priority}")
    lines.append(f"Target:\t\t{english_name(target.names)}")
    lines.extend(["", SEPARATOR, "", effect])
    return "\n".join(lines)


def render_item(item: Item, category: Resource, fling_effect: Optional[Resource] = None) -> str:
    lines: List[str] = [
        f"{english_name(item.names)} ({english_name(category.names)})",
        "",
        SEPARATOR,
        "",
    ]
    if fling_effect is not None and item.fling_power is not None:
        lines.append(f"Thrown with fling ({item.fling_power} power)")
        lines.append(f":   {english_effect(fling_effect.effect_entries)}")
        lines.append("")
    lines.append(english_effect(item.effect_entries))
    return "\n".join(lines)
