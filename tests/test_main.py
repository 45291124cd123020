"""Test configuration loading and the interactive loop."""

import sys

import pytest
from pydantic import ValidationError

from wordscramble import main as cli
from wordscramble.environment import WordGameEngine, GameConfig


def scripted(lines):
    """Return a read_line function that replays `lines`, then signals EOF."""
    it = iter(lines)

    def read_line(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read_line


@pytest.fixture
def engine(tmp_path):
    start = tmp_path / "start.txt"
    start.write_text("listen\n", encoding="utf-8")
    engine = WordGameEngine.create(
        config=GameConfig(start_words_path=start),
        dictionary=["worms", "silk", "tin", "silent"],
    )
    engine.start_round(["silkworm"])
    return engine


class TestLoadConfig:
    """Test cases for YAML configuration."""

    def test_defaults_without_path(self):
        config = cli.load_config()
        assert config.language == "en"
        assert config.min_word_length == 3
        assert config.points_per_letter == 10
        assert config.seed is None

    def test_loads_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "start_words_path: start.txt\nseed: 42\npoints_per_letter: 5\n",
            encoding="utf-8",
        )
        config = cli.load_config(str(path))
        assert config.seed == 42
        assert config.points_per_letter == 5
        assert config.start_words_path == tmp_path / "start.txt"
        assert config.dictionary_path is None

    def test_relative_paths_follow_config_file(self, tmp_path, monkeypatch):
        """Relative word list paths resolve next to the config, not the working directory."""
        config_dir = tmp_path / "conf"
        (config_dir / "words").mkdir(parents=True)
        path = config_dir / "config.yaml"
        path.write_text(
            "start_words_path: words/start.txt\ndictionary_path: words/dict.txt\n",
            encoding="utf-8",
        )
        monkeypatch.chdir(tmp_path)
        config = cli.load_config(str(path))
        assert config.start_words_path == config_dir / "words" / "start.txt"
        assert config.dictionary_path == config_dir / "words" / "dict.txt"

    def test_absolute_paths_kept(self, tmp_path):
        start = tmp_path / "elsewhere" / "start.txt"
        path = tmp_path / "config.yaml"
        path.write_text(f"start_words_path: {start}\n", encoding="utf-8")
        assert cli.load_config(str(path)).start_words_path == start

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert cli.load_config(str(path)) == GameConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            cli.load_config(str(tmp_path / "missing.yaml"))

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("min_word_length: 0\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            cli.load_config(str(path))


class TestRenderRound:
    """Test cases for the round display."""

    def test_shows_round(self, engine):
        engine.submit_word("worms")
        text = cli.render_round(engine)
        assert "=== silkworm ===" in text
        assert "(5) worms" in text
        assert "Score: 50" in text
        assert "Max possible words: 2" in text


class TestPlay:
    """Test cases for the interactive loop."""

    def test_accepts_and_rejects(self, engine, capsys):
        score = cli.play(engine, scripted(["worms", "xy", "worms", ":quit", "silk"]))
        out = capsys.readouterr().out
        assert score == 50
        assert "+50 worms" in out
        assert "Word too short: Words must be at least 3 letters long" in out
        assert "Word used already: Be more original" in out
        assert engine.accepted_words == ["worms"]

    def test_stops_at_end_of_input(self, engine):
        assert cli.play(engine, scripted(["silk"])) == 40

    def test_blank_lines_ignored(self, engine):
        assert cli.play(engine, scripted(["", "   ", "silk"])) == 40

    def test_lists_possible_words(self, engine, capsys):
        cli.play(engine, scripted([":words"]))
        assert "silk, worms" in capsys.readouterr().out

    def test_new_round(self, engine, capsys):
        score = cli.play(engine, scripted(["silk", ":new", "tin"]))
        out = capsys.readouterr().out
        assert "Found 1 of 2 words for 40 points" in out
        assert "=== listen ===" in out
        assert engine.root_word == "listen"
        assert score == 30

    def test_new_round_error_keeps_playing(self, engine, tmp_path, capsys):
        engine.config.start_words_path = tmp_path / "missing.txt"
        score = cli.play(engine, scripted([":new", "silk"]))
        captured = capsys.readouterr()
        assert "Error starting new round" in captured.err
        assert engine.root_word == "silkworm"
        assert score == 40


class TestMain:
    """Test cases for the command-line entry point."""

    def test_plays_bundled_game(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["wordscramble", "--seed", "3"])
        monkeypatch.setattr("builtins.input", scripted([":quit"]))
        assert cli.main() == 0
        out = capsys.readouterr().out
        assert "Max possible words:" in out
        assert "Rounds played: 1" in out
        assert "Final score: 0" in out

    def test_missing_config(self, monkeypatch, tmp_path, capsys):
        monkeypatch.setattr(sys, "argv", ["wordscramble", str(tmp_path / "missing.yaml")])
        assert cli.main() == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_missing_start_words(self, monkeypatch, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text(f"start_words_path: {tmp_path / 'missing.txt'}\n", encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["wordscramble", str(config)])
        assert cli.main() == 1
        assert "Could not load word list" in capsys.readouterr().err
