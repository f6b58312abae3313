"""
Unit tests for the command-line driver.
"""
from unittest.mock import patch

import pytest

from spellcore.cli import MAX_EXIT_STATUS, build_parser, main
from spellcore.services.spellcheck_memory import InMemorySpellingDetector


@pytest.fixture
def detector():
    return InMemorySpellingDetector(words=["this", "is", "fine", "text", "the", "of"])


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args(["a.txt"])
        assert args.files == ["a.txt"]
        assert args.filenames is False
        assert args.debug is False
        assert args.valid_words is None
        assert args.warn_words is None
        assert args.marker == "@!@"

    def test_short_flags_and_repeats(self):
        args = build_parser().parse_args(
            ["-f", "-d", "--warn-word", "colour", "--warn-word", "color", "a.txt", "b.txt"]
        )
        assert args.filenames is True
        assert args.debug is True
        assert args.warn_words == ["colour", "color"]
        assert args.files == ["a.txt", "b.txt"]

    def test_files_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:
    """Tests for running the driver end to end."""

    def test_clean_file(self, detector, write_file, capsys):
        path = write_file("clean.txt", "This is fine text.")

        status = main([path], detector=detector)

        assert status == 0
        out = capsys.readouterr().out
        assert out == "Check complete; there were 0 errors and 0 warnings.\n"

    def test_errors_and_warnings(self, detector, write_file, capsys):
        path = write_file("notes.txt", "This colour of text is wrnog.")

        status = main(["--warn-word", "colour", path], detector=detector)

        assert status == 1
        out = capsys.readouterr().out.splitlines()
        assert out == [
            f"Error: {path}: wrnog",
            f"Warning: {path}: colour",
            "",
            "Check complete; there were 1 errors and 1 warnings.",
        ]

    def test_exit_status_counts_files_with_errors(self, detector, write_file):
        first = write_file("one.txt", "teh wrod")
        second = write_file("two.txt", "this is fine")
        third = write_file("three.txt", "wrnog")

        assert main([first, second, third], detector=detector) == 2

    def test_marker_regions_skipped(self, detector, write_file):
        path = write_file("marked.txt", "This is fine @!@ xyzzy plugh @!@ text")

        assert main([path], detector=detector) == 0

    def test_skip_code(self, detector, write_file):
        path = write_file("code.md", "This is fine\n```\nprnt(vaule)\n```\n`xyzzy` text")

        assert main(["--skip-code", path], detector=detector) == 0
        assert main([path], detector=detector) == 1

    def test_valid_words(self, detector, write_file):
        path = write_file("wibble.txt", "This is wibble")

        assert main(["--valid-word", "wibble", path], detector=detector) == 0

    def test_filenames_listed(self, detector, write_file, capsys):
        path = write_file("listed.txt", "fine")

        main(["-f", path], detector=detector)

        assert f'Checking file: "{path}"...' in capsys.readouterr().out

    def test_debug_prints_log_messages(self, detector, write_file, capsys):
        path = write_file("debug.txt", "fine")

        main(["-d", "--valid-word", "wibble", "--warn-word", "colour", path], detector=detector)

        out = capsys.readouterr().out
        assert "Added to custom dictionary: wibble" in out
        assert "Added word to warning list: colour" in out

    def test_unreadable_file_counts_as_error(self, detector, tmp_path, capsys):
        missing = str(tmp_path / "missing.txt")

        status = main([missing], detector=detector)

        assert status == 1
        assert f"Error: {missing}: could not be read" in capsys.readouterr().out

    def test_exit_status_capped(self, detector, write_file, monkeypatch):
        monkeypatch.setattr("spellcore.cli.MAX_EXIT_STATUS", 1)
        paths = [write_file(f"bad{i}.txt", "wrnog") for i in range(3)]

        assert main(paths, detector=detector) == 1
        assert MAX_EXIT_STATUS == 255

    def test_strict_mode_without_word_flags(self, detector, write_file, capsys):
        """Test omitted --valid-word/--warn-word pass no empty lists to strict validation."""
        path = write_file("ok.txt", "this is fine")

        with patch("spellcore.utils.validators.settings") as mock_settings:
            mock_settings.SPELLCHECK_ALLOW_EMPTY_WORD_LISTS = False
            status = main([path], detector=detector)

        assert status == 0
        assert "there were 0 errors and 0 warnings" in capsys.readouterr().out
