# ABOUTME: Tabular views of rankings and defense profiles as Polars DataFrames.
# ABOUTME: Resolves types to display names for the requested language.

from collections.abc import Mapping, Sequence

import polars as pl

from typetriad.type_chart import RankedCombination
from typetriad.registry import Language, Type, display_name


def ranking_frame(ranking: Sequence[RankedCombination], language: Language = Language.ENGLISH) -> pl.DataFrame:
    """Build a DataFrame from a combination ranking.

    Args:
        ranking: Ranked combinations, best first.
        language: Language for the type names.

    Returns:
        DataFrame with columns: rank (1-based), types, score.
    """
    return pl.DataFrame(
        {
            "rank": list(range(1, len(ranking) + 1)),
            "types": [", ".join(display_name(t, language) for t in entry.types) for entry in ranking],
            "score": [entry.score for entry in ranking],
        },
        schema={"rank": pl.Int64, "types": pl.Utf8, "score": pl.Float64},
    )


def profile_frame(profile: Mapping[Type, float], language: Language = Language.ENGLISH) -> pl.DataFrame:
    """Build a DataFrame from a defense profile, one row per attacking type."""
    return pl.DataFrame(
        {
            "attacker": [display_name(t, language) for t in profile],
            "multiplier": list(profile.values()),
        },
        schema={"attacker": pl.Utf8, "multiplier": pl.Float64},
    )
