"""Tests for the config CLI command."""

import json

import pytest
from loguru import logger

from pivotal_cli import __version__
from pivotal_cli.api.cli.main import create_parser, main
from pivotal_cli.api.cli.utils.output import format_setting_value, terminal_width, truncate


@pytest.fixture(autouse=True)
def narrow_terminal(monkeypatch):
    """Pin the terminal size so table output is predictable."""
    monkeypatch.setenv("COLUMNS", "40")
    monkeypatch.setenv("LINES", "20")
    monkeypatch.delenv("PIVOTAL_CLI_DEBUG", raising=False)
    yield
    # setup_logging bound a sink to the captured stderr
    logger.remove()


def run_cli(*argv):
    """Run the CLI and return its exit code (0 when it returns normally)."""
    try:
        main(list(argv))
    except SystemExit as e:
        return e.code
    return 0


class TestParser:
    """Test argument parsing."""

    def test_config_subcommands(self, tmp_path):
        parser = create_parser()
        args = parser.parse_args(["config", "set", "token", "abc", "--config", str(tmp_path / "c.json")])

        assert args.command == "config"
        assert args.config_command == "set"
        assert args.name == "token"
        assert args.value == "abc"
        assert args.config == tmp_path / "c.json"

    def test_config_requires_subcommand(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["config"])

    def test_version(self, capsys):
        assert run_cli("--version") == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert run_cli() == 1
        assert "usage: pivotal-cli" in capsys.readouterr().out


class TestConfigShow:
    """Test config show."""

    def test_lists_settings(self, config_file, capsys):
        assert run_cli("config", "show", "--config", str(config_file)) == 0

        out = capsys.readouterr().out
        assert "current_project | 789" in out
        assert "api_url" in out

    def test_masks_token(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"token": "0123456789abcdef"}))

        run_cli("config", "show", "--config", str(path))

        out = capsys.readouterr().out
        assert "0123456789abcdef" not in out
        assert "************cdef" in out

    def test_truncates_to_terminal_width(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"api_url": "https://example.com/" + "x" * 100}))

        run_cli("config", "show", "--config", str(path))

        lines = capsys.readouterr().out.splitlines()
        assert all(len(line) <= 40 for line in lines)
        assert lines[-1].endswith("...")

    def test_empty_store(self, missing_config_file, capsys):
        assert run_cli("config", "show", "--config", str(missing_config_file)) == 0

        assert "No settings stored" in capsys.readouterr().out
        assert not missing_config_file.exists()

    def test_invalid_file(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text("{broken")

        assert run_cli("config", "show", "--config", str(path)) == 1
        assert "Unable to load config file" in capsys.readouterr().err


class TestConfigGetSet:
    """Test config get and config set."""

    def test_get(self, config_file, capsys):
        assert run_cli("config", "get", "api_url", "--config", str(config_file)) == 0
        assert capsys.readouterr().out.strip() == "https://example.com/api"

    def test_get_unset(self, missing_config_file, capsys):
        assert run_cli("config", "get", "token", "--config", str(missing_config_file)) == 1
        assert "token is not set" in capsys.readouterr().err

    def test_set_string(self, config_file, config_contents):
        assert run_cli("config", "set", "token", "abcd", "--config", str(config_file)) == 0

        assert json.loads(config_file.read_text()) == {**config_contents, "token": "abcd"}

    def test_set_numeric_token_stays_string(self, missing_config_file):
        run_cli("config", "set", "token", "1234", "--config", str(missing_config_file))

        assert json.loads(missing_config_file.read_text()) == {"token": "1234"}

    def test_set_project_as_integer(self, config_file):
        run_cli("config", "set", "current_project", "42", "--config", str(config_file))

        assert json.loads(config_file.read_text())["current_project"] == 42

    def test_set_project_rejects_text(self, config_file, config_contents):
        assert run_cli("config", "set", "current_project", "abc", "--config", str(config_file)) == 1
        assert json.loads(config_file.read_text()) == config_contents

    def test_set_rejects_bad_name(self, missing_config_file):
        assert run_cli("config", "set", "bad name!", "x", "--config", str(missing_config_file)) == 1
        assert not missing_config_file.exists()

    def test_set_unknown_setting(self, config_file):
        run_cli("config", "set", "editor", "vim", "--config", str(config_file))

        assert json.loads(config_file.read_text())["editor"] == "vim"

    def test_path(self, config_file, capsys):
        assert run_cli("config", "path", "--config", str(config_file)) == 0
        assert capsys.readouterr().out.strip() == str(config_file)


class TestOutputHelpers:
    """Test display helpers."""

    def test_terminal_width_from_environment(self):
        assert terminal_width() == 40

    def test_terminal_width_fallback(self, monkeypatch):
        monkeypatch.setattr("pivotal_cli.api.cli.utils.output.terminal_size", lambda: None)
        assert terminal_width() == 80

    def test_truncate(self):
        assert truncate("abcdef", 10) == "abcdef"
        assert truncate("abcdefghijkl", 8) == "abcde..."
        assert truncate("abcdef", 2) == "ab"

    def test_format_setting_value(self):
        assert format_setting_value("token", "0123456789") == "******6789"
        assert format_setting_value("token", "abc") == "abc"
        assert format_setting_value("current_project", 789) == "789"
        assert format_setting_value("api_url", None) == "(unset)"
