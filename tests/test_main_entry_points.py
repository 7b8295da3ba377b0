"""Tests for main() and the argument parser.

Validates that the CLI entry point dispatches verbs, maps errors to exit
codes and keeps stdout clean for machine-readable output.
"""

import json
import subprocess
from unittest.mock import patch

import pytest
import tomlkit

from spacetime_token.cli.main import main
from spacetime_token.cli.parser import parse_arguments
from spacetime_token.core.version import __version__


class TestParseArguments:
    """Test parse_arguments()"""

    def test_set(self):
        args = parse_arguments(["set", "alice", "tok"])
        assert (args.command, args.name, args.token) == ("set", "alice", "tok")

    def test_switch_name_optional(self):
        assert parse_arguments(["switch"]).name is None
        assert parse_arguments(["switch", "bob"]).name == "bob"

    def test_list_format_default_and_json(self):
        assert parse_arguments(["list"]).output_format == "table"
        assert parse_arguments(["list", "--format", "json"]).output_format == "json"

    def test_reset_yes(self):
        assert parse_arguments(["reset"]).yes is False
        assert parse_arguments(["reset", "--yes"]).yes is True

    def test_global_flags(self):
        args = parse_arguments(["--log-level", "debug", "--log-format", "json", "--no-color", "current"])
        assert args.log_level == "DEBUG"
        assert args.log_format == "json"
        assert args.no_color is True

    def test_log_level_defaults_to_none(self):
        assert parse_arguments(["current"]).log_level is None

    def test_verb_required(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments([])
        assert exc_info.value.code == 2

    def test_unknown_verb(self):
        with pytest.raises(SystemExit):
            parse_arguments(["frobnicate"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


@pytest.mark.usefixtures("app_home", "home_dir")
class TestMain:
    """Test main() end to end against temp directories"""

    def test_set_then_current(self, capsys):
        main(["set", "a", "tok1"])
        main(["current"])
        out = capsys.readouterr().out
        assert "Current active profile: a" in out

    def test_error_goes_to_stderr_with_exit_one(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["switch", "missing"])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.err.startswith("ERROR: Profile 'missing' not found")
        assert "ERROR" not in captured.out

    def test_list_json_keeps_stdout_clean(self, capsys):
        main(["--log-level", "DEBUG", "set", "b", "tok2"])
        capsys.readouterr()

        main(["--log-level", "DEBUG", "list", "--format", "json"])
        captured = capsys.readouterr()
        assert json.loads(captured.out)["current"] == "b"

    def test_empty_list_exits_zero(self, capsys):
        main(["list"])
        assert "No profiles found" in capsys.readouterr().out

    def test_reset_declined_exits_zero(self, capsys):
        with patch("builtins.input", return_value="n"):
            main(["reset"])
        assert "Aborted." in capsys.readouterr().out

    def test_keyboard_interrupt_exits_130(self, capsys):
        with patch("spacetime_token.cli.main.cmd_current", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                main(["current"])
        assert exc_info.value.code == 130

    def test_broken_settings_fail_other_verbs(self, app_home, capsys):
        app_home.mkdir(parents=True, exist_ok=True)
        (app_home / "config.toml").write_text("broken = = toml")

        with pytest.raises(SystemExit) as exc_info:
            main(["list"])
        assert exc_info.value.code == 1
        assert "Failed to parse app config file" in capsys.readouterr().err

    def test_setup_recovers_from_broken_settings(self, app_home, capsys):
        app_home.mkdir(parents=True, exist_ok=True)
        (app_home / "config.toml").write_text("broken = = toml")

        with patch("builtins.input", return_value=""):
            main(["setup"])

        captured = capsys.readouterr()
        assert "Starting from defaults" in captured.err
        data = tomlkit.parse((app_home / "config.toml").read_text()).unwrap()
        assert data["cli_token_key"] == "spacetimedb_token"

    def test_custom_token_key_from_settings(self, app_home, home_dir, capsys):
        app_home.mkdir(parents=True, exist_ok=True)
        (app_home / "config.toml").write_text(
            'profiles_filename = "p.toml"\n'
            'cli_config_dir_from_home = "st"\n'
            'cli_config_filename = "c.toml"\n'
            'cli_token_key = "token"\n'
        )

        main(["set", "a", "tok1"])
        assert (app_home / "p.toml").exists()
        doc = tomlkit.parse((home_dir / "st" / "c.toml").read_text())
        assert doc["token"] == "tok1"

    def test_create_runs_spacetime_cli(self, home_dir, capsys):
        cli_path = home_dir / ".config" / "spacetime" / "cli.toml"

        def fake_run(cmd, check):
            if cmd[1] == "login":
                cli_path.parent.mkdir(parents=True, exist_ok=True)
                cli_path.write_text('spacetimedb_token = "fresh"\n')
            return subprocess.CompletedProcess(cmd, 0)

        with patch("spacetime_token.external.process.subprocess.run", side_effect=fake_run) as mock_run:
            main(["create", "c"])

        commands = [call.args[0] for call in mock_run.call_args_list]
        assert commands == [["spacetime", "logout"], ["spacetime", "login", "--server-issued-login", "local"]]
        main(["list"])
        assert "- c (current)" in capsys.readouterr().out

    def test_create_missing_executable(self, capsys):
        with patch("spacetime_token.external.process.subprocess.run", side_effect=FileNotFoundError("nope")):
            with pytest.raises(SystemExit) as exc_info:
                main(["create", "c"])
        assert exc_info.value.code == 1
        assert "Is 'spacetime' in your PATH?" in capsys.readouterr().err
