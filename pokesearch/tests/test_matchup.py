"""
Tests for the type chart and matchup calculation.
"""

import sys
from fractions import Fraction
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pokesearch.errors import InvalidInputError
from pokesearch.matchup import (
    TYPE_CHART,
    MatchupResult,
    PokemonType,
    canonical_types,
    compute,
    effectiveness,
)

T = PokemonType


class TestTypeChart:
    """Test suite for the static effectiveness chart."""

    def test_every_pair_has_one_entry(self):
        """Test the chart covers all 18x18 pairs."""
        assert len(PokemonType) == 18
        assert len(TYPE_CHART) == 18 * 18
        for atk in PokemonType:
            for dfn in PokemonType:
                assert TYPE_CHART[(atk, dfn)] in {Fraction(0), Fraction(1, 2), Fraction(1), Fraction(2)}

    def test_chart_is_read_only(self):
        """Test the chart cannot be modified."""
        with pytest.raises(TypeError):
            TYPE_CHART[(T.FIRE, T.GRASS)] = Fraction(1)

    @pytest.mark.parametrize("atk,dfn,expected", [
        (T.FIRE, T.GRASS, Fraction(2)),
        (T.WATER, T.FIRE, Fraction(2)),
        (T.ELECTRIC, T.GROUND, Fraction(0)),
        (T.NORMAL, T.GHOST, Fraction(0)),
        (T.DRAGON, T.FAIRY, Fraction(0)),
        (T.FIGHTING, T.FAIRY, Fraction(1, 2)),
        (T.GHOST, T.DARK, Fraction(1, 2)),
        (T.GRASS, T.NORMAL, Fraction(1)),
    ])
    def test_known_values(self, atk, dfn, expected):
        """Test a sample of well-known matchups."""
        assert effectiveness(atk, dfn) == expected

    def test_not_symmetric(self):
        """Test attacking and defending roles are distinct."""
        assert effectiveness(T.GHOST, T.NORMAL) == 0
        assert effectiveness(T.NORMAL, T.GHOST) == 0
        assert effectiveness(T.FIGHTING, T.NORMAL) == 2
        assert effectiveness(T.NORMAL, T.FIGHTING) == 1

    def test_type_order(self):
        """Test canonical declaration order."""
        order = [t.value for t in PokemonType]
        assert order[:3] == ["normal", "fire", "water"]
        assert order[-1] == "fairy"

    def test_from_name(self):
        """Test type name parsing."""
        assert PokemonType.from_name("Fire") is T.FIRE
        assert PokemonType.from_name("  GHOST ") is T.GHOST
        assert PokemonType.from_name(T.ICE) is T.ICE

    def test_from_name_unknown(self):
        """Test unknown type names are rejected."""
        with pytest.raises(InvalidInputError, match="unknown type 'shadow'"):
            PokemonType.from_name("shadow")

    def test_display_name(self):
        """Test display names."""
        assert T.PSYCHIC.display_name == "Psychic"

    def test_canonical_types(self):
        """Test deduplication and chart ordering."""
        assert canonical_types(["water", "fire", "Water"]) == (T.FIRE, T.WATER)


class TestCompute:
    """Test suite for compute."""

    def test_single_type_matches_chart(self):
        """Test a single type yields its defensive column."""
        result = compute([T.FIRE])

        assert isinstance(result, MatchupResult)
        assert result.defending == (T.FIRE,)
        for atk in PokemonType:
            assert result[atk] == TYPE_CHART[(atk, T.FIRE)]
        assert result[T.WATER] == 2
        assert result[T.GRASS] == Fraction(1, 2)

    def test_immunity_dominates(self):
        """Test Ground/Flying is immune to Electric."""
        result = compute(["ground", "flying"])

        assert result[T.ELECTRIC] == 0
        assert result[T.ICE] == 4
        assert result[T.WATER] == 2

    def test_double_weakness_and_resistance(self):
        """Test products reach 4x and 1/4x exactly."""
        result = compute([T.GRASS, T.BUG])
        assert result[T.FIRE] == 4
        assert result[T.FLYING] == 4
        assert result[T.GROUND] == Fraction(1, 4)

    def test_exact_arithmetic(self):
        """Test results are exact fractions."""
        result = compute([T.STEEL, T.FAIRY])
        for value in result.multipliers.values():
            assert isinstance(value, Fraction)
            assert value in {Fraction(0), Fraction(1, 4), Fraction(1, 2), Fraction(1), Fraction(2), Fraction(4)}

    def test_duplicates_ignored(self):
        """Test duplicate input behaves like a single type."""
        assert compute([T.FIRE, T.FIRE]).multipliers == compute([T.FIRE]).multipliers
        assert compute(["fire", "FIRE"]).defending == (T.FIRE,)

    def test_order_does_not_change_multipliers(self):
        """Test the product is independent of input order."""
        assert compute(["water", "ground"]).multipliers == compute(["ground", "water"]).multipliers

    def test_three_types_rejected(self):
        """Test more than two types is invalid."""
        with pytest.raises(InvalidInputError):
            compute([T.FIRE, T.WATER, T.GRASS])

    def test_three_names_with_duplicate_allowed(self):
        """Test deduplication happens before the count check."""
        result = compute(["fire", "water", "fire"])
        assert result.defending == (T.FIRE, T.WATER)

    def test_empty_rejected(self):
        """Test no types is invalid."""
        with pytest.raises(InvalidInputError):
            compute([])

    def test_unknown_type_rejected(self):
        """Test unknown names are invalid."""
        with pytest.raises(InvalidInputError):
            compute(["fire", "sound"])


class TestGrouped:
    """Test suite for MatchupResult.grouped."""

    def test_groups_descending(self):
        """Test groups run from strongest to weakest."""
        groups = compute(["grass", "bug"]).grouped()
        multipliers = [m for m, _ in groups]

        assert multipliers == sorted(multipliers, reverse=True)
        assert multipliers[0] == 4
        assert multipliers[-1] == Fraction(1, 4)

    def test_group_members_in_chart_order(self):
        """Test types inside a group keep declaration order."""
        groups = dict(compute(["fire"]).grouped())

        assert groups[Fraction(2)] == [T.WATER, T.GROUND, T.ROCK]
        assert groups[Fraction(1, 2)] == [T.FIRE, T.GRASS, T.ICE, T.BUG, T.STEEL, T.FAIRY]

    def test_neutral_group_included(self):
        """Test the 1x group is present."""
        groups = dict(compute(["normal"]).grouped())

        assert Fraction(1) in groups
        assert groups[Fraction(0)] == [T.GHOST]
        assert groups[Fraction(2)] == [T.FIGHTING]

    def test_empty_groups_skipped(self):
        """Test multipliers with no types do not appear."""
        groups = dict(compute(["normal"]).grouped())

        assert Fraction(4) not in groups
        assert Fraction(1, 2) not in groups

    def test_all_types_accounted_for(self):
        """Test every attacking type appears exactly once."""
        groups = compute(["water", "ground"]).grouped()
        members = [t for _, types in groups for t in types]

        assert sorted(members) == sorted(PokemonType)
        assert len(members) == 18
