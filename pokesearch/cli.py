"""
pokesearch command-line interface.

Usage
-----
pokesearch pokemon charizard
pokesearch ability "swift swim"
pokesearch move thunder punch          # multi-word names work unquoted
pokesearch item choice-scarf --cache-dir /tmp/pokecache
pokesearch type ground flying
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from core.logging_config import get_cli_logger, set_level

from . import __version__
from .api_client import PokeAPIClient
from .cache_manager import CacheManager
from .config import Config
from .errors import PokesearchError, PresentationError
from .matchup import compute
from .models import Ability, EntityKind, Item, Move, Pokemon, Resource
from .presenter import (
    render_ability,
    render_item,
    render_move,
    render_pokemon,
    render_type_matchup,
)
from .resolver import LookupResolver

logger = get_cli_logger()


# ---------------------------------------------------------------------------
# Sub-command handlers
# ---------------------------------------------------------------------------


def run_pokemon(resolver: LookupResolver, text: str) -> str:
    pokemon: Pokemon = resolver.resolve(EntityKind.POKEMON, text)
    species = resolver.follow(pokemon.species, Resource)
    if species.generation is None:
        raise PresentationError(f"species '{species.name}' has no generation")
    generation = resolver.follow(species.generation, Resource)
    matchup = compute(pokemon.type_names)
    return render_pokemon(pokemon, species, generation, matchup)


def run_ability(resolver: LookupResolver, text: str) -> str:
    ability: Ability = resolver.resolve(EntityKind.ABILITY, text)
    generation = resolver.follow(ability.generation, Resource)
    return render_ability(ability, generation)


def run_move(resolver: LookupResolver, text: str) -> str:
    move: Move = resolver.resolve(EntityKind.MOVE, text)
    generation = resolver.follow(move.generation, Resource)
    damage_class = resolver.follow(move.damage_class, Resource) if move.damage_class else None
    target = resolver.follow(move.target, Resource)
    return render_move(move, generation, damage_class, target)


def run_item(resolver: LookupResolver, text: str) -> str:
    item: Item = resolver.resolve(EntityKind.ITEM, text)
    category = resolver.follow(item.category, Resource)
    fling_effect = resolver.follow(item.fling_effect, Resource) if item.fling_effect else None
    return render_item(item, category, fling_effect)


ENTITY_HANDLERS: Dict[EntityKind, Callable[[LookupResolver, str], str]] = {
    EntityKind.POKEMON: run_pokemon,
    EntityKind.ABILITY: run_ability,
    EntityKind.MOVE: run_move,
    EntityKind.ITEM: run_item,
}


def cmd_entity(args: argparse.Namespace) -> str:
    kind = EntityKind(args.command)
    text = " ".join(args.name)

    try:
        client = PokeAPIClient()
    except ValueError as e:
        raise PokesearchError(str(e)) from e

    try:
        resolver = LookupResolver(client, CacheManager(args.cache_dir))
        return ENTITY_HANDLERS[kind](resolver, text)
    finally:
        client.close()


def cmd_type(args: argparse.Namespace) -> str:
    return render_type_matchup(compute(args.types))


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--cache-dir",
        type=Path,
        default=Config.CACHE_DIR,
        help=f"Directory for cached API responses (default: {Config.CACHE_DIR})",
    )
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(
        prog="pokesearch",
        description="Look up Pokémon, abilities, moves, items and type matchups.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", metavar="<subcommand>")
    sub.required = True

    for kind in EntityKind:
        p = sub.add_parser(kind.value, parents=[common], help=f"Look up a {kind.value}")
        p.add_argument("name", nargs="+", help=f"{kind.value.capitalize()} name")
        p.set_defaults(func=cmd_entity)

    p = sub.add_parser("type", parents=[common], help="Show the defensive matchup of one or two types")
    p.add_argument("types", nargs="+", metavar="TYPE", help="Defending type (one or two)")
    p.set_defaults(func=cmd_type)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    try:
        output = args.func(args)
    except PokesearchError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
