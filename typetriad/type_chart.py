# ABOUTME: Type effectiveness chart for the 18 combat types.
# ABOUTME: Provides multiplier lookup, multi-type aggregation, and defensive combination ranking.

import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from itertools import combinations

from typetriad.exceptions import TableIntegrityError
from typetriad.registry import TYPE_COUNT, Type, all_types

logger = logging.getLogger(__name__)

# Effectiveness thresholds
SUPER_EFFECTIVE_THRESHOLD = 2.0
RESISTANCE_THRESHOLD = 0.5
NEUTRAL_VALUE = 1.0
IMMUNITY_VALUE = 0.0

MULTIPLIERS: frozenset[float] = frozenset(
    {IMMUNITY_VALUE, RESISTANCE_THRESHOLD, NEUTRAL_VALUE, SUPER_EFFECTIVE_THRESHOLD}
)

DEFAULT_COMBINATION_SIZE = 3

# 18x18 effectiveness table: EFFECTIVENESS[attacking_type][defending_type]
EFFECTIVENESS: dict[Type, dict[Type, float]] = {
    Type.NORMAL: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 1.0,
        Type.FLYING: 1.0,
        Type.POISON: 1.0,
        Type.GROUND: 1.0,
        Type.ROCK: 0.5,
        Type.BUG: 1.0,
        Type.GHOST: 0.0,
        Type.STEEL: 0.5,
        Type.FIRE: 1.0,
        Type.WATER: 1.0,
        Type.GRASS: 1.0,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 1.0,
        Type.ICE: 1.0,
        Type.DRAGON: 1.0,
        Type.DARK: 1.0,
        Type.FAIRY: 1.0,
    },
    Type.FIGHT: {
        Type.NORMAL: 2.0,
        Type.FIGHT: 1.0,
        Type.FLYING: 0.5,
        Type.POISON: 0.5,
        Type.GROUND: 1.0,
        Type.ROCK: 2.0,
        Type.BUG: 0.5,
        Type.GHOST: 0.0,
        Type.STEEL: 2.0,
        Type.FIRE: 1.0,
        Type.WATER: 1.0,
        Type.GRASS: 1.0,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 0.5,
        Type.ICE: 2.0,
        Type.DRAGON: 1.0,
        Type.DARK: 2.0,
        Type.FAIRY: 0.5,
    },
    Type.FLYING: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 2.0,
        Type.FLYING: 1.0,
        Type.POISON: 1.0,
        Type.GROUND: 1.0,
        Type.ROCK: 0.5,
        Type.BUG: 2.0,
        Type.GHOST: 1.0,
        Type.STEEL: 0.5,
        Type.FIRE: 1.0,
        Type.WATER: 1.0,
        Type.GRASS: 2.0,
        Type.ELECTRIC: 0.5,
        Type.PSYCHIC: 1.0,
        Type.ICE: 1.0,
        Type.DRAGON: 1.0,
        Type.DARK: 1.0,
        Type.FAIRY: 1.0,
    },
    Type.POISON: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 1.0,
        Type.FLYING: 1.0,
        Type.POISON: 0.5,
        Type.GROUND: 0.5,
        Type.ROCK: 0.5,
        Type.BUG: 1.0,
        Type.GHOST: 0.5,
        Type.STEEL: 0.0,
        Type.FIRE: 1.0,
        Type.WATER: 1.0,
        Type.GRASS: 2.0,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 1.0,
        Type.ICE: 1.0,
        Type.DRAGON: 1.0,
        Type.DARK: 1.0,
        Type.FAIRY: 2.0,
    },
    Type.GROUND: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 1.0,
        Type.FLYING: 0.0,
        Type.POISON: 2.0,
        Type.GROUND: 1.0,
        Type.ROCK: 2.0,
        Type.BUG: 0.5,
        Type.GHOST: 1.0,
        Type.STEEL: 2.0,
        Type.FIRE: 2.0,
        Type.WATER: 1.0,
        Type.GRASS: 0.5,
        Type.ELECTRIC: 2.0,
        Type.PSYCHIC: 1.0,
        Type.ICE: 1.0,
        Type.DRAGON: 1.0,
        Type.DARK: 1.0,
        Type.FAIRY: 1.0,
    },
    Type.ROCK: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 0.5,
        Type.FLYING: 2.0,
        Type.POISON: 1.0,
        Type.GROUND: 0.5,
        Type.ROCK: 1.0,
        Type.BUG: 2.0,
        Type.GHOST: 1.0,
        Type.STEEL: 0.5,
        Type.FIRE: 2.0,
        Type.WATER: 1.0,
        Type.GRASS: 1.0,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 1.0,
        Type.ICE: 2.0,
        Type.DRAGON: 1.0,
        Type.DARK: 1.0,
        Type.FAIRY: 1.0,
    },
    Type.BUG: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 0.5,
        Type.FLYING: 0.5,
        Type.POISON: 0.5,
        Type.GROUND: 1.0,
        Type.ROCK: 1.0,
        Type.BUG: 1.0,
        Type.GHOST: 0.5,
        Type.STEEL: 0.5,
        Type.FIRE: 0.5,
        Type.WATER: 1.0,
        Type.GRASS: 2.0,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 2.0,
        Type.ICE: 1.0,
        Type.DRAGON: 1.0,
        Type.DARK: 2.0,
        Type.FAIRY: 0.5,
    },
    Type.GHOST: {
        Type.NORMAL: 0.0,
        Type.FIGHT: 1.0,
        Type.FLYING: 1.0,
        Type.POISON: 1.0,
        Type.GROUND: 1.0,
        Type.ROCK: 1.0,
        Type.BUG: 1.0,
        Type.GHOST: 2.0,
        Type.STEEL: 1.0,
        Type.FIRE: 1.0,
        Type.WATER: 1.0,
        Type.GRASS: 1.0,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 2.0,
        Type.ICE: 1.0,
        Type.DRAGON: 1.0,
        Type.DARK: 0.5,
        Type.FAIRY: 1.0,
    },
    Type.STEEL: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 1.0,
        Type.FLYING: 1.0,
        Type.POISON: 1.0,
        Type.GROUND: 1.0,
        Type.ROCK: 2.0,
        Type.BUG: 1.0,
        Type.GHOST: 1.0,
        Type.STEEL: 0.5,
        Type.FIRE: 0.5,
        Type.WATER: 0.5,
        Type.GRASS: 1.0,
        Type.ELECTRIC: 0.5,
        Type.PSYCHIC: 1.0,
        Type.ICE: 2.0,
        Type.DRAGON: 1.0,
        Type.DARK: 1.0,
        Type.FAIRY: 2.0,
    },
    Type.FIRE: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 1.0,
        Type.FLYING: 1.0,
        Type.POISON: 1.0,
        Type.GROUND: 1.0,
        Type.ROCK: 0.5,
        Type.BUG: 2.0,
        Type.GHOST: 1.0,
        Type.STEEL: 2.0,
        Type.FIRE: 0.5,
        Type.WATER: 0.5,
        Type.GRASS: 2.0,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 1.0,
        Type.ICE: 2.0,
        Type.DRAGON: 0.5,
        Type.DARK: 1.0,
        Type.FAIRY: 1.0,
    },
    Type.WATER: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 1.0,
        Type.FLYING: 1.0,
        Type.POISON: 1.0,
        Type.GROUND: 2.0,
        Type.ROCK: 2.0,
        Type.BUG: 1.0,
        Type.GHOST: 1.0,
        Type.STEEL: 1.0,
        Type.FIRE: 2.0,
        Type.WATER: 0.5,
        Type.GRASS: 0.5,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 1.0,
        Type.ICE: 1.0,
        Type.DRAGON: 0.5,
        Type.DARK: 1.0,
        Type.FAIRY: 1.0,
    },
    Type.GRASS: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 1.0,
        Type.FLYING: 0.5,
        Type.POISON: 0.5,
        Type.GROUND: 2.0,
        Type.ROCK: 2.0,
        Type.BUG: 0.5,
        Type.GHOST: 1.0,
        Type.STEEL: 0.5,
        Type.FIRE: 0.5,
        Type.WATER: 2.0,
        Type.GRASS: 0.5,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 1.0,
        Type.ICE: 1.0,
        Type.DRAGON: 0.5,
        Type.DARK: 1.0,
        Type.FAIRY: 1.0,
    },
    Type.ELECTRIC: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 1.0,
        Type.FLYING: 2.0,
        Type.POISON: 1.0,
        Type.GROUND: 0.0,
        Type.ROCK: 1.0,
        Type.BUG: 1.0,
        Type.GHOST: 1.0,
        Type.STEEL: 1.0,
        Type.FIRE: 1.0,
        Type.WATER: 2.0,
        Type.GRASS: 0.5,
        Type.ELECTRIC: 0.5,
        Type.PSYCHIC: 1.0,
        Type.ICE: 1.0,
        Type.DRAGON: 0.5,
        Type.DARK: 1.0,
        Type.FAIRY: 1.0,
    },
    Type.PSYCHIC: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 2.0,
        Type.FLYING: 1.0,
        Type.POISON: 2.0,
        Type.GROUND: 1.0,
        Type.ROCK: 1.0,
        Type.BUG: 1.0,
        Type.GHOST: 1.0,
        Type.STEEL: 0.5,
        Type.FIRE: 1.0,
        Type.WATER: 1.0,
        Type.GRASS: 1.0,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 0.5,
        Type.ICE: 1.0,
        Type.DRAGON: 1.0,
        Type.DARK: 0.0,
        Type.FAIRY: 1.0,
    },
    Type.ICE: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 1.0,
        Type.FLYING: 2.0,
        Type.POISON: 1.0,
        Type.GROUND: 2.0,
        Type.ROCK: 1.0,
        Type.BUG: 1.0,
        Type.GHOST: 1.0,
        Type.STEEL: 0.5,
        Type.FIRE: 0.5,
        Type.WATER: 0.5,
        Type.GRASS: 2.0,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 1.0,
        Type.ICE: 0.5,
        Type.DRAGON: 2.0,
        Type.DARK: 1.0,
        Type.FAIRY: 1.0,
    },
    Type.DRAGON: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 1.0,
        Type.FLYING: 1.0,
        Type.POISON: 1.0,
        Type.GROUND: 1.0,
        Type.ROCK: 1.0,
        Type.BUG: 1.0,
        Type.GHOST: 1.0,
        Type.STEEL: 0.5,
        Type.FIRE: 1.0,
        Type.WATER: 1.0,
        Type.GRASS: 1.0,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 1.0,
        Type.ICE: 1.0,
        Type.DRAGON: 2.0,
        Type.DARK: 1.0,
        Type.FAIRY: 0.0,
    },
    Type.DARK: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 0.5,
        Type.FLYING: 1.0,
        Type.POISON: 1.0,
        Type.GROUND: 1.0,
        Type.ROCK: 1.0,
        Type.BUG: 1.0,
        Type.GHOST: 2.0,
        Type.STEEL: 1.0,
        Type.FIRE: 1.0,
        Type.WATER: 1.0,
        Type.GRASS: 1.0,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 2.0,
        Type.ICE: 1.0,
        Type.DRAGON: 1.0,
        Type.DARK: 0.5,
        Type.FAIRY: 0.5,
    },
    Type.FAIRY: {
        Type.NORMAL: 1.0,
        Type.FIGHT: 2.0,
        Type.FLYING: 1.0,
        Type.POISON: 0.5,
        Type.GROUND: 1.0,
        Type.ROCK: 1.0,
        Type.BUG: 1.0,
        Type.GHOST: 1.0,
        Type.STEEL: 0.5,
        Type.FIRE: 0.5,
        Type.WATER: 1.0,
        Type.GRASS: 1.0,
        Type.ELECTRIC: 1.0,
        Type.PSYCHIC: 1.0,
        Type.ICE: 1.0,
        Type.DRAGON: 2.0,
        Type.DARK: 2.0,
        Type.FAIRY: 1.0,
    },
}


@dataclass(frozen=True)
class RankedCombination:
    """A defensive type combination together with its vulnerability score.

    Attributes:
        types: The defending types, in canonical order.
        score: Sum of log2 multipliers over all attacking types (lower is better).
    """

    types: tuple[Type, ...]
    score: float


def build_matrix(chart: Mapping[Type, Mapping[Type, float]]) -> tuple[tuple[float, ...], ...]:
    """Convert an attacker -> defender -> multiplier mapping into a dense matrix.

    Args:
        chart: Effectiveness table keyed by attacking type, then defending type.

    Returns:
        Tuple of 18 rows indexed by attacker ordinal, each a tuple of 18
        multipliers indexed by defender ordinal.

    Raises:
        TableIntegrityError: If any ordered pair is missing or holds a value
            outside the canonical multipliers.
    """
    rows: list[tuple[float, ...]] = []
    for atk_type in all_types():
        if atk_type not in chart:
            raise TableIntegrityError(f"Missing attacker row for {atk_type.name}")
        row = chart[atk_type]

        values: list[float] = []
        for def_type in all_types():
            if def_type not in row:
                raise TableIntegrityError(f"Missing multiplier for {atk_type.name} -> {def_type.name}")
            value = row[def_type]
            if value not in MULTIPLIERS:
                raise TableIntegrityError(f"Invalid multiplier {value} for {atk_type.name} -> {def_type.name}")
            values.append(value)
        rows.append(tuple(values))

    logger.debug("Validated effectiveness table with %d entries", TYPE_COUNT * TYPE_COUNT)
    return tuple(rows)


_MATRIX = build_matrix(EFFECTIVENESS)


def multiplier(attacker: Type, defender: Type) -> float:
    """Return the multiplier for a single attacking type against a single defending type.

    The table is not symmetric: Water -> Fire is 2.0 while Fire -> Water is 0.5.
    """
    return _MATRIX[attacker][defender]


def aggregate_attack(attacker: Type, defenders: Iterable[Type]) -> float:
    """Calculate the combined multiplier of one attack against several defending types.

    Args:
        attacker: The attacking type.
        defenders: The defender's types. Repeated types count once.

    Returns:
        Product of the single-pair multipliers, 1.0 for no defenders.

    Note:
        A Fire/Fire defender is the same as a Fire defender
        (Water vs Fire/Fire = 2x, NOT 4x).
    """
    result = NEUTRAL_VALUE
    for def_type in dict.fromkeys(defenders):
        result *= multiplier(attacker, def_type)
    return result


def aggregate_defense_profile(defenders: Iterable[Type]) -> dict[Type, float]:
    """Return the aggregate multiplier of every attacking type against a defender set.

    Args:
        defenders: The defender's types. Repeated types count once.

    Returns:
        Dict mapping each attacking type, in canonical order, to its multiplier.
    """
    unique_defenders = tuple(dict.fromkeys(defenders))
    return {atk_type: aggregate_attack(atk_type, unique_defenders) for atk_type in all_types()}


def attack_profile(attacker: Type) -> dict[Type, float]:
    """Return the multiplier of one attacking type against every single defending type."""
    return {def_type: multiplier(attacker, def_type) for def_type in all_types()}


def defense_profile(defender: Type) -> dict[Type, float]:
    """Return the multiplier of every attacking type against a single defending type."""
    return aggregate_defense_profile((defender,))


def score_profile(profile: Mapping[Type, float]) -> float:
    """Sum the log2 multipliers of a defense profile.

    An immunity (0x) contributes 0.0 instead of -infinity, the same as a
    neutral (1x) matchup. Immunities therefore do not improve a score.

    Args:
        profile: Mapping of attacking type to aggregate multiplier.

    Returns:
        The vulnerability score; lower means less vulnerable.
    """
    return sum((math.log2(value) for value in profile.values() if value != IMMUNITY_VALUE), 0.0)


def vulnerability_score(defenders: Iterable[Type]) -> float:
    """Score a defender set by its log2-summed multipliers across all attacking types."""
    return score_profile(aggregate_defense_profile(defenders))


def get_weaknesses(defenders: Iterable[Type]) -> list[Type]:
    """Return attacking types that are super effective (>=2x) against the defender set."""
    profile = aggregate_defense_profile(defenders)
    return [atk_type for atk_type, value in profile.items() if value >= SUPER_EFFECTIVE_THRESHOLD]


def get_resistances(defenders: Iterable[Type]) -> list[Type]:
    """Return attacking types that are resisted (<=0.5x, excluding 0x) by the defender set."""
    profile = aggregate_defense_profile(defenders)
    return [atk_type for atk_type, value in profile.items() if IMMUNITY_VALUE < value <= RESISTANCE_THRESHOLD]


def get_immunities(defenders: Iterable[Type]) -> list[Type]:
    """Return attacking types that the defender set is immune to (0x)."""
    profile = aggregate_defense_profile(defenders)
    return [atk_type for atk_type, value in profile.items() if value == IMMUNITY_VALUE]


def get_neutral(defenders: Iterable[Type]) -> list[Type]:
    """Return attacking types at neutral (1x) effectiveness against the defender set."""
    profile = aggregate_defense_profile(defenders)
    return [atk_type for atk_type, value in profile.items() if value == NEUTRAL_VALUE]


def generate_type_combinations(size: int = DEFAULT_COMBINATION_SIZE) -> Iterator[tuple[Type, ...]]:
    """Lazily generate every combination of `size` distinct types.

    Combinations come out in lexicographic order of type ordinals, each one
    in canonical order (e.g. (NORMAL, FIGHT, FLYING) first).

    Raises:
        ValueError: If size is not between 1 and 18.
    """
    if not 1 <= size <= TYPE_COUNT:
        raise ValueError(f"Combination size must be between 1 and {TYPE_COUNT}, got {size}")
    return combinations(all_types(), size)


def rank_defensive_combinations(size: int = DEFAULT_COMBINATION_SIZE) -> list[RankedCombination]:
    """Score every defensive combination of `size` types and sort them.

    Args:
        size: Number of distinct types per combination.

    Returns:
        Combinations sorted ascending by vulnerability score. Equal scores
        keep their generation order.

    Raises:
        ValueError: If size is not between 1 and 18.
    """
    scored = [
        RankedCombination(types=combo, score=vulnerability_score(combo)) for combo in generate_type_combinations(size)
    ]
    ranking = sorted(scored, key=lambda entry: entry.score)
    logger.debug("Ranked %d combinations of size %d", len(ranking), size)
    return ranking


def rank_all_defensive_triples() -> list[RankedCombination]:
    """Rank all 816 three-type defensive combinations, least vulnerable first."""
    return rank_defensive_combinations(3)
