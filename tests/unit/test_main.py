# tests/unit/test_main.py

"""Tests for the scream-id command line."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from scream_id.main import EXIT_INVALID_ID, EXIT_OK, EXIT_USAGE, describe, main, run
from scream_id.core.steam_id import SteamID


@pytest.fixture
def cli_env():
    """Patch config and logging setup so the CLI runs in isolation."""
    fake_config = MagicMock()
    fake_config.UI_LANGUAGE = "en"
    fake_config.LOG_FILE = None
    fake_config.log_level_value = logging.INFO
    with patch("scream_id.main.config", fake_config), patch("scream_id.main.setup_logging") as fake_setup:
        yield fake_setup


class TestDescribe:
    """Tests for describe()."""

    def test_individual(self):
        """All fields and both renderings are listed."""
        lines = describe(SteamID.parse("76561198403256399"))
        text = "\n".join(lines)
        assert len(lines) == 6
        assert "Public" in text
        assert "Individual" in text
        assert "Desktop" in text
        assert "442990671" in text
        assert "76561198403256399" in text
        assert "STEAM_0:1:221495335" in text

    def test_game_server_not_representable(self):
        """Non-individual IDs show the not-representable note for Steam2."""
        lines = describe(SteamID.parse("85568397215006721"))
        assert lines[-1].endswith("(not representable for this account type)")

    def test_labels_aligned(self):
        """Values start in the same column."""
        lines = describe(SteamID.parse("76561198403256399"))
        values = [line.split(": ", 1)[1].lstrip() for line in lines]
        starts = {line.index(value) for line, value in zip(lines, values)}
        assert len(starts) == 1


class TestRun:
    """Tests for run()."""

    def test_valid_ids(self, cli_env, capsys):
        """Valid IDs print their details and exit 0."""
        code = run(["76561198403256399", "STEAM_0:1:221495335"])
        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "STEAM_0:1:221495335" in out
        assert "76561198181761063" in out

    def test_invalid_id(self, cli_env, capsys):
        """An invalid ID prints an error and exits 1, other IDs still print."""
        code = run(["23", "76561198403256399"])
        captured = capsys.readouterr()
        assert code == EXIT_INVALID_ID
        assert "'23'" in captured.err
        assert "76561198403256399" in captured.out

    def test_no_arguments(self, cli_env, capsys):
        """No input is a usage error."""
        assert run([]) == EXIT_USAGE
        assert "Usage" in capsys.readouterr().err

    def test_unknown_option(self, cli_env, capsys):
        """Unknown options are a usage error."""
        assert run(["--frobnicate", "76561198403256399"]) == EXIT_USAGE
        assert "--frobnicate" in capsys.readouterr().err

    def test_version(self, cli_env, capsys):
        """--version prints name and version."""
        from scream_id.version import __app_name__, __version__

        assert run(["--version"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == f"{__app_name__} {__version__}"

    def test_help(self, cli_env, capsys):
        """--help prints the usage text."""
        assert run(["--help"]) == EXIT_OK
        assert "scream-id" in capsys.readouterr().out

    def test_debug_flag(self, cli_env):
        """--debug switches logging to DEBUG and is not treated as an ID."""
        assert run(["--debug", "76561198403256399"]) == EXIT_OK
        assert cli_env.call_args.args[0] == logging.DEBUG

    def test_configured_language_used(self, cli_env, capsys):
        """A shipped language is used for CLI output."""
        with patch("scream_id.main.config.UI_LANGUAGE", "de"):
            assert run([]) == EXIT_USAGE
        assert "Keine Steam-ID angegeben." in capsys.readouterr().err

    def test_unknown_language_falls_back_to_english(self, cli_env, capsys, caplog):
        """A language without a catalog logs a warning and uses English."""
        with patch("scream_id.main.config.UI_LANGUAGE", "xx"):
            with caplog.at_level(logging.WARNING, logger="screamid.cli"):
                assert run([]) == EXIT_USAGE
        assert "No Steam ID given." in capsys.readouterr().err
        assert "'xx'" in caplog.text

    def test_configured_level_used(self, cli_env):
        """Without --debug the configured level is used."""
        run(["76561198403256399"])
        assert cli_env.call_args.args[0] == logging.INFO


class TestMain:
    """Tests for the console script entry point."""

    def test_exits_with_run_code(self, cli_env):
        """main() exits with the code returned by run()."""
        with patch("sys.argv", ["scream-id", "23"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == EXIT_INVALID_ID
