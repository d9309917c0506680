# ABOUTME: Tests for the Typer CLI entry point.
# ABOUTME: Covers ranking output, profile output, CSV mode, and error exits.

from pathlib import Path

import pytest
from typer.testing import CliRunner

from typetriad.cli import app
from typetriad.settings import settings

runner = CliRunner()


class TestRanking:
    """Tests for running without type arguments."""

    def test_ranks_all_triples(self) -> None:
        """No arguments ranks all 816 combinations."""
        result = runner.invoke(app, ["--top", "3"])

        assert result.exit_code == 0
        assert "Combinations: 816" in result.output
        assert "Flying, Steel, Fire" in result.output

    def test_csv(self) -> None:
        """CSV output has a header and one row per shown combination."""
        result = runner.invoke(app, ["--top", "2", "--csv"])
        lines = result.output.strip().splitlines()

        assert result.exit_code == 0
        assert lines[0] == "rank,types,score"
        assert len(lines) == 3
        assert '"Flying, Steel, Fire"' in lines[1]

    def test_size(self) -> None:
        """--size changes the combination size."""
        result = runner.invoke(app, ["--size", "1", "--csv"])
        lines = result.output.strip().splitlines()

        assert result.exit_code == 0
        assert len(lines) == 19
        assert lines[1].startswith("1,Steel,")

    def test_invalid_size(self) -> None:
        """An out-of-range size exits with an error."""
        result = runner.invoke(app, ["--size", "0"])

        assert result.exit_code == 1
        assert "between 1 and 18" in result.output


class TestProfile:
    """Tests for running with type arguments."""

    def test_profile_table(self) -> None:
        """Type names produce a per-attacker table."""
        result = runner.invoke(app, ["Ice", "Dragon", "Flying"])

        assert result.exit_code == 0
        assert "Water" in result.output
        assert "0.25" in result.output

    def test_profile_csv(self) -> None:
        """CSV output lists every attacker with its multiplier."""
        result = runner.invoke(app, ["--csv", "Ice", "Dragon", "Flying"])
        lines = result.output.strip().splitlines()

        assert result.exit_code == 0
        assert lines[0] == "attacker,multiplier"
        assert len(lines) == 19
        assert "Water,0.5" in lines
        assert "Grass,0.25" in lines

    def test_japanese(self) -> None:
        """Japanese names are accepted with --language japanese."""
        result = runner.invoke(app, ["--language", "japanese", "--csv", "氷", "ドラゴン", "飛行"])

        assert result.exit_code == 0
        assert "水,0.5" in result.output.splitlines()

    def test_unknown_type(self) -> None:
        """An unknown name exits non-zero with a message."""
        result = runner.invoke(app, ["Ice", "Metal"])

        assert result.exit_code == 1
        assert "Unknown type 'Metal'" in result.output


class TestVerbose:
    """Tests for the --verbose flag."""

    def test_missing_logging_config_warns(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A missing logging config only prints a warning."""
        monkeypatch.setattr(settings, "LOG_CONFIG", tmp_path / "missing.yml")

        result = runner.invoke(app, ["--verbose", "--top", "1"])

        assert result.exit_code == 0
        assert "Warning" in result.output
        assert "Combinations: 816" in result.output
