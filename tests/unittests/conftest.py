"""Contains configurations for the test run."""

from pathlib import Path

import pytest

from typetriad.type_chart import RankedCombination, rank_all_defensive_triples


@pytest.fixture(scope="session")
def configs_folder() -> Path:
    """Returns the path to the project configs folder."""
    return Path(__file__).parents[2] / "configs"


@pytest.fixture(scope="session")
def triple_ranking() -> list[RankedCombination]:
    """Ranking of all three-type combinations, computed once per session."""
    return rank_all_defensive_triples()
