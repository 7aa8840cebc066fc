"""Test the command-line interface."""

import io
import json

import pytest
from sentgroup.boundaries.config import BoundaryConfig
from sentgroup.cli import main, newline_token_for, read_tokens


class TestReadTokens:
    """Test reading whitespace-tokenized input."""

    def test_line_breaks_become_tokens(self):
        """Test that each line break is emitted as a newline token."""
        tokens = read_tokens(io.StringIO("a b .\nc d\n"))
        assert tokens == ["a", "b", ".", "\n", "c", "d", "\n"]

    def test_no_newline_token(self):
        """Test that line breaks can be ignored."""
        tokens = read_tokens(io.StringIO("a b\nc .\n"), newline_token=None)
        assert tokens == ["a", "b", "c", "."]

    def test_newline_token_follows_discard_set(self):
        """Test that the newline marker is one the config discards."""
        config = BoundaryConfig.default()

        assert newline_token_for(config) == "\n"
        assert newline_token_for(config.set_discard(["*NL*"])) == "*NL*"
        assert newline_token_for(config.set_discard(["<SEP>"])) is None


class TestCommands:
    """Test the CLI subcommands."""

    def test_split_file(self, tmp_path, capsys):
        """Test splitting a file with the default rules."""
        source = tmp_path / "input.txt"
        source.write_text("He said \" Hi . \" Then\nhe left !\n", encoding="utf-8")

        assert main(["split", str(source)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["He said \" Hi . \"", "Then", "he left !"]

    def test_split_json(self, tmp_path, capsys):
        """Test JSON output."""
        source = tmp_path / "input.txt"
        source.write_text("a . b", encoding="utf-8")

        assert main(["split", "--json", str(source)]) == 0
        assert json.loads(capsys.readouterr().out) == [["a", "."], ["b"]]

    def test_split_stdin_one_sentence(self, monkeypatch, capsys):
        """Test one-sentence mode on standard input."""
        monkeypatch.setattr("sys.stdin", io.StringIO("a . b\n"))

        assert main(["split", "--one-sentence", "--keep-newlines"]) == 0
        assert capsys.readouterr().out.splitlines() == ["a . b"]

    def test_split_with_rules(self, tmp_path, temp_rules_file, capsys):
        """Test splitting with a rules file."""
        source = tmp_path / "input.txt"
        source.write_text("x <text> a ; b </text> y", encoding="utf-8")

        assert main(["split", "--rules", str(temp_rules_file), str(source)]) == 0
        assert capsys.readouterr().out.splitlines() == ["a ;", "b"]

    def test_split_multiline_with_rules(self, tmp_path, capsys):
        """Test that line breaks honour a rules file discarding only *NL*."""
        rules = tmp_path / "rules.yaml"
        rules.write_text("discard: ['*NL*']\n", encoding="utf-8")
        source = tmp_path / "input.txt"
        source.write_text("a b\nc .\n", encoding="utf-8")

        assert main(["split", "--json", "--rules", str(rules), str(source)]) == 0
        assert json.loads(capsys.readouterr().out) == [["a", "b"], ["c", "."]]

    def test_split_multiline_without_newline_discard(self, tmp_path, capsys):
        """Test that line breaks are ignored when no newline marker is discarded."""
        rules = tmp_path / "rules.yaml"
        rules.write_text("discard: ['<SEP>']\n", encoding="utf-8")
        source = tmp_path / "input.txt"
        source.write_text("a b\nc . d\n", encoding="utf-8")

        assert main(["split", "--json", "--rules", str(rules), str(source)]) == 0
        assert json.loads(capsys.readouterr().out) == [["a", "b", "c", "."], ["d"]]

    def test_split_undecodable_input(self, tmp_path, capsys):
        """Test that non UTF-8 input is reported with exit status 1."""
        source = tmp_path / "input.txt"
        source.write_bytes(b"a \xff\xfe .\n")

        assert main(["split", str(source)]) == 1
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_split_missing_rules(self, tmp_path, capsys):
        """Test that a missing rules file is reported."""
        source = tmp_path / "input.txt"
        source.write_text("a .", encoding="utf-8")

        assert main(["split", "--rules", str(tmp_path / "nope.yaml"), str(source)]) == 1
        assert "Cannot load rules" in capsys.readouterr().err

    def test_validate(self, temp_rules_file, capsys):
        """Test validating a good rules file."""
        assert main(["validate", "-v", str(temp_rules_file)]) == 0
        out = capsys.readouterr().out
        assert "Rules validation successful" in out
        assert "<br>" in out

    def test_validate_invalid(self, tmp_path, capsys):
        """Test validating a broken rules file."""
        rules = tmp_path / "rules.yaml"
        rules.write_text("boundary_pattern: '[x'\n", encoding="utf-8")

        assert main(["validate", str(rules)]) == 1
        assert "Rules validation failed" in capsys.readouterr().out

    def test_info(self, capsys):
        """Test the info command."""
        assert main(["info"]) == 0
        assert "sentgroup CLI" in capsys.readouterr().out

    def test_no_command(self, capsys):
        """Test that running without a command prints help."""
        assert main([]) == 1
