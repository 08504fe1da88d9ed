"""
Tests for the command line entry point
"""

from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from postboard.cli import cli


class TestServe:
    def test_serve_runs_app_import_string(self):
        with patch("postboard.cli.uvicorn.run") as run:
            result = CliRunner().invoke(cli, ["serve", "--port", "9000", "--reload"])

        assert result.exit_code == 0, result.output
        run.assert_called_once()
        args, kwargs = run.call_args
        assert args == ("postboard.api.app:app",)
        assert kwargs["port"] == 9000
        assert kwargs["reload"] is True


class TestCheckDb:
    def test_reachable(self):
        with (
            patch("postboard.database.connection.init_database"),
            patch(
                "postboard.database.connection.test_database_connection",
                AsyncMock(return_value=(True, None)),
            ),
        ):
            result = CliRunner().invoke(cli, ["check-db"])

        assert result.exit_code == 0
        assert "Database reachable" in result.output

    def test_unreachable_exits_nonzero(self):
        with (
            patch("postboard.database.connection.init_database"),
            patch(
                "postboard.database.connection.test_database_connection",
                AsyncMock(return_value=(False, "Cannot reach MongoDB")),
            ),
        ):
            result = CliRunner().invoke(cli, ["check-db"])

        assert result.exit_code == 1
