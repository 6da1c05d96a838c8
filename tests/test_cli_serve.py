"""
Tests for the dirserve command line.
"""

from unittest.mock import patch

import pytest

from dirserve import cli_serve


class TestCliServe:
    """Test cases for cli_serve.main."""

    def test_runs_uvicorn_with_settings(self, temp_directory):
        """Test that the parsed options reach uvicorn."""
        with patch("dirserve.cli_serve.uvicorn.run") as mock_run, patch(
            "dirserve.cli_serve.configure_logging"
        ):
            code = cli_serve.main(
                ["--serve-dir", temp_directory, "--port", "9001", "--host", "127.0.0.1"]
            )

        assert code == 0
        mock_run.assert_called_once()
        app = mock_run.call_args[0][0]
        assert app.state.container.settings.serve_root == temp_directory
        assert mock_run.call_args[1]["host"] == "127.0.0.1"
        assert mock_run.call_args[1]["port"] == 9001
        assert mock_run.call_args[1]["log_level"] == "info"

    def test_short_options(self, temp_directory):
        """Test the -s/-p short options."""
        with patch("dirserve.cli_serve.uvicorn.run") as mock_run, patch(
            "dirserve.cli_serve.configure_logging"
        ):
            cli_serve.main(["-s", temp_directory, "-p", "8123"])

        assert mock_run.call_args[1]["port"] == 8123

    def test_prints_banner(self, temp_directory, capsys):
        """Test the startup banner."""
        with patch("dirserve.cli_serve.uvicorn.run"), patch(
            "dirserve.cli_serve.configure_logging"
        ):
            cli_serve.main(["-s", temp_directory, "-p", "8124", "--host", "127.0.0.1"])

        err = " ".join(capsys.readouterr().err.split())
        assert "Serving directory" in err
        assert "http://127.0.0.1:8124" in err

    def test_configuration_error(self, temp_directory, capsys):
        """Test that a missing directory exits with status 2."""
        with patch("dirserve.cli_serve.uvicorn.run") as mock_run:
            code = cli_serve.main(["-s", temp_directory + "/missing"])

        assert code == 2
        mock_run.assert_not_called()
        assert "does not exist" in " ".join(capsys.readouterr().err.split())

    def test_version(self, capsys):
        """Test --version."""
        with pytest.raises(SystemExit) as exc_info:
            cli_serve.main(["--version"])

        assert exc_info.value.code == 0
        assert "dirserve" in capsys.readouterr().out
