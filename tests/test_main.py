"""
Command-line tests: argv handling, prompt, output lines and exit codes.
"""

from __future__ import annotations

import sys

import pytest

from main import main


class TestSpellFromArgument:
    def test_prints_both_renderings(self, capsys):
        assert main(["main.py", "1,001"]) == 0
        out = capsys.readouterr().out
        assert "In words:" in out
        assert "one thousand one" in out
        assert "1 thousand 1" in out
        assert "4 digits" in out

    def test_plain_output_when_not_a_terminal(self, capsys):
        main(["main.py", "14"])
        captured = capsys.readouterr()
        assert captured.out == (
            "In words: fourteen \n"
            "In words and digits: 14 \n"
            "Number length: 2 digits\n"
        )
        main(["main.py", "x"])
        assert "\033[" not in capsys.readouterr().err

    def test_colored_output_on_a_terminal(self, monkeypatch, capsys):
        monkeypatch.setattr(sys.stdout, "isatty", lambda: True)
        main(["main.py", "14"])
        assert "\033[1mIn words:\033[0m fourteen" in capsys.readouterr().out

    def test_invalid_number_goes_to_stderr(self, capsys):
        assert main(["main.py", "12a"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "non-zero positive integer" in captured.err
        assert "non_digit" in captured.err

    def test_zero_rejected(self, capsys):
        assert main(["main.py", "0"]) == 1
        assert "should not exceed 101 digits" in capsys.readouterr().err


class TestUsage:
    @pytest.mark.parametrize("flag", ["-h", "--help", "-"])
    def test_dash_argument_shows_usage(self, flag, capsys):
        assert main(["main.py", flag]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Usage: \n main.py the_number_to_spell \n")
        assert "may contain commas as digits separator" in out


class TestPrompt:
    def test_reads_first_token(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt="": "14 and more")
        assert main(["main.py"]) == 0
        assert "fourteen" in capsys.readouterr().out

    def test_end_of_input_is_rejected(self, monkeypatch, capsys):
        def _eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        assert main(["main.py"]) == 1
        assert "non-zero positive integer" in capsys.readouterr().err


class TestSettingsFromEnvironment:
    def test_max_digits_override(self, monkeypatch, capsys):
        monkeypatch.setenv("SPELL_MAX_DIGITS", "3")
        assert main(["main.py", "1234"]) == 1
        assert "should not exceed 3 digits" in capsys.readouterr().err

    def test_usage_reflects_override(self, monkeypatch, capsys):
        monkeypatch.setenv("SPELL_MAX_DIGITS", "6")
        main(["main.py", "-h"])
        assert "should not exceed 6 digits" in capsys.readouterr().out

    def test_invalid_settings_exit_2(self, monkeypatch, capsys):
        monkeypatch.setenv("SPELL_MAX_DIGITS", "lots")
        assert main(["main.py", "12"]) == 2
        assert "SPELL_" in capsys.readouterr().err
