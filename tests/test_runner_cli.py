"""Tests for freq.runner.cli module."""

from pathlib import Path
from unittest.mock import patch

import pytest

from freq.runner.cli import main
from freq.runner.render import AXIS_CORNER, AXIS_VERTICAL, BAR_CELL


@pytest.fixture
def sample_text_file(tmp_path: Path) -> Path:
    """Create a sample text file for CLI testing."""
    path = tmp_path / "sample.txt"
    path.write_text(
        "The quick brown fox jumps over the lazy dog.\n"
        "The dog barks; the fox runs.\n",
        encoding="utf-8",
    )
    return path


def _labels(output: str) -> list[str]:
    """Extract the token labels from chart output."""
    return [line.split(AXIS_VERTICAL)[0].strip() for line in output.splitlines() if line[:1].strip()]


class TestCLIBasic:
    """Basic CLI tests."""

    def test_cli_no_inputs_returns_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that running without files reports an error."""
        with patch("sys.argv", ["freq"]):
            result = main()
            assert result == 1

        captured = capsys.readouterr()
        assert "No input files were given" in captured.err
        assert "usage:" in captured.err

    def test_cli_help_shows_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that --help shows usage information."""
        with patch("sys.argv", ["freq", "--help"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
            assert exc_info.value.code == 0

        captured = capsys.readouterr()
        assert "most frequent" in captured.out

    def test_cli_missing_file_returns_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that an unreadable input returns error code."""
        with patch("sys.argv", ["freq", str(tmp_path / "missing.txt")]):
            result = main()
            assert result == 1

        captured = capsys.readouterr()
        assert "Cannot open one or more given files" in captured.err

    def test_cli_default_chart(
        self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the default word chart."""
        with patch("sys.argv", ["freq", str(sample_text_file)]):
            result = main()
            assert result == 0

        captured = capsys.readouterr()
        labels = _labels(captured.out)
        assert labels[:3] == ["the", "fox", "dog"]
        assert len(labels) == 10
        assert "26.67%" in captured.out
        assert AXIS_CORNER in captured.out.splitlines()[-1]

    def test_cli_no_data(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that input without tokens prints a notice."""
        path = tmp_path / "blank.txt"
        path.write_text("!!! ...\n", encoding="utf-8")

        with patch("sys.argv", ["freq", str(path)]):
            result = main()
            assert result == 0

        assert "No data to process" in capsys.readouterr().out


class TestCLIOptions:
    """Tests for CLI options."""

    def test_cli_length(self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test -l limits the number of rows."""
        with patch("sys.argv", ["freq", "-l", "2", str(sample_text_file)]):
            assert main() == 0

        assert _labels(capsys.readouterr().out) == ["the", "fox"]

    def test_cli_zero_length(self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test -l 0 prints nothing."""
        with patch("sys.argv", ["freq", "-l", "0", str(sample_text_file)]):
            assert main() == 0

        assert capsys.readouterr().out == ""

    def test_cli_negative_length_rejected(self, sample_text_file: Path) -> None:
        """Test that a negative length is an argument error."""
        with patch("sys.argv", ["freq", "-l", "-3", str(sample_text_file)]):
            with pytest.raises(SystemExit) as exc_info:
                main()
            assert exc_info.value.code == 2

    def test_cli_character_mode(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test -c counts characters."""
        path = tmp_path / "chars.txt"
        path.write_text("abracadabra", encoding="utf-8")

        with patch("sys.argv", ["freq", "-c", "-l", "3", str(path)]):
            assert main() == 0

        assert _labels(capsys.readouterr().out) == ["a", "b", "r"]

    def test_cli_word_and_character_are_exclusive(self, sample_text_file: Path) -> None:
        """Test that -w and -c cannot be combined."""
        with patch("sys.argv", ["freq", "-w", "-c", str(sample_text_file)]):
            with pytest.raises(SystemExit) as exc_info:
                main()
            assert exc_info.value.code == 2

    def test_cli_scaled(self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --scaled makes the top bar fill the chart width."""
        with patch("sys.argv", ["freq", "--scaled", "-l", "1", str(sample_text_file)]):
            assert main() == 0

        first = capsys.readouterr().out.splitlines()[0]
        assert len(first) == 80
        assert BAR_CELL in first

    def test_cli_width(self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --width sets the chart width."""
        with patch("sys.argv", ["freq", "--width", "40", str(sample_text_file)]):
            assert main() == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines[-1]) == 40

    def test_cli_multiple_files(
        self, sample_text_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that counts accumulate across files."""
        other = tmp_path / "other.txt"
        other.write_text("zebra zebra zebra zebra zebra zebra\n", encoding="utf-8")

        with patch("sys.argv", ["freq", "-l", "1", str(sample_text_file), str(other)]):
            assert main() == 0

        assert _labels(capsys.readouterr().out) == ["zebra"]


class TestCLIConfig:
    """Tests for --config handling."""

    def test_cli_config_file(
        self, sample_text_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that settings are read from a YAML config."""
        config = tmp_path / "freq.yml"
        config.write_text("length: 2\nmode: character\n")

        with patch("sys.argv", ["freq", "--config", str(config), str(sample_text_file)]):
            assert main() == 0

        assert len(_labels(capsys.readouterr().out)) == 2

    def test_cli_flags_override_config(
        self, sample_text_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that command-line flags win over config values."""
        config = tmp_path / "freq.yml"
        config.write_text("length: 2\nmode: character\n")

        with patch(
            "sys.argv",
            ["freq", "--config", str(config), "-w", "-l", "1", str(sample_text_file)],
        ):
            assert main() == 0

        assert _labels(capsys.readouterr().out) == ["the"]

    def test_cli_missing_config(
        self, sample_text_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a missing config file returns error code."""
        with patch(
            "sys.argv", ["freq", "--config", str(tmp_path / "none.yml"), str(sample_text_file)]
        ):
            assert main() == 1

        assert "Config file not found" in capsys.readouterr().err

    def test_cli_invalid_config(
        self, sample_text_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that an invalid config value returns error code."""
        config = tmp_path / "freq.yml"
        config.write_text("mode: paragraph\n")

        with patch("sys.argv", ["freq", "--config", str(config), str(sample_text_file)]):
            assert main() == 1

        assert "Invalid configuration" in capsys.readouterr().err

    def test_cli_narrow_width_rejected(
        self, sample_text_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a width below the minimum returns error code."""
        with patch("sys.argv", ["freq", "--width", "5", str(sample_text_file)]):
            assert main() == 1

        assert "width" in capsys.readouterr().err

    @pytest.mark.parametrize("content", ["length: five\n", "width: null\n", "scaled: 3\n"])
    def test_cli_wrongly_typed_config(
        self,
        content: str,
        sample_text_file: Path,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test that wrongly typed config values return error code."""
        config = tmp_path / "freq.yml"
        config.write_text(content)

        with patch("sys.argv", ["freq", "--config", str(config), str(sample_text_file)]):
            assert main() == 1

        assert "Invalid configuration" in capsys.readouterr().err

    def test_cli_config_directory(
        self, sample_text_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a directory passed as config returns error code."""
        with patch("sys.argv", ["freq", "--config", str(tmp_path), str(sample_text_file)]):
            assert main() == 1

        assert "Invalid configuration" in capsys.readouterr().err
