"""Tests for the CLI shell, driven through a mock-backed client."""
# pylint: disable=missing-function-docstring  # test names are self-documenting
# pylint: disable=missing-class-docstring  # test class names are self-documenting

import io

from forgettable.cli import handle_command, run_cli

DIST_RESPONSE = (
    '{"status_code":200,"status_txt":"","data":{"distribution":"colors",'
    '"Z":2,"T":1425056403,"data":[{"bin":"red","count":1,"p":0.5},'
    '{"bin":"blue","count":1,"p":0.5}]}}'
)


class TestHandleCommand:
    def test_dist(self, mock_client, capsys):
        client = mock_client(DIST_RESPONSE)
        assert handle_command(client, "/dist colors") is True
        out = capsys.readouterr().out
        assert "colors (Z=2" in out
        assert "red" in out and "blue" in out

    def test_top(self, mock_client, capsys):
        client = mock_client(DIST_RESPONSE)
        handle_command(client, "/top colors 1")
        assert client.transport.requests[-1].url.params["N"] == "1"
        assert "colors" in capsys.readouterr().out

    def test_get(self, mock_client):
        client = mock_client(DIST_RESPONSE)
        handle_command(client, "/get colors red")
        assert client.transport.requests[-1].url.params["field"] == "red"

    def test_incr(self, mock_client, capsys):
        client = mock_client("OK")
        handle_command(client, "/incr colors red")
        assert "N" not in client.transport.requests[-1].url.params
        handle_command(client, "/incr colors red 5")
        assert client.transport.requests[-1].url.params["N"] == "5"
        assert capsys.readouterr().out.count("OK") == 2

    def test_dbsize(self, mock_client, capsys):
        client = mock_client('{"status_code":200,"status_txt":"","data":42}')
        handle_command(client, "/dbsize")
        assert "Database size: 42" in capsys.readouterr().out

    def test_bad_arguments_print_usage(self, mock_client, capsys):
        client = mock_client(DIST_RESPONSE)
        handle_command(client, "/top colors many")
        handle_command(client, "/get colors")
        out = capsys.readouterr().out
        assert "Usage: /top" in out
        assert "Usage: /get" in out
        assert client.transport.requests == []

    def test_server_error_is_printed(self, mock_client, capsys):
        client = mock_client(
            '{"status_code":500,"status_txt":"MISSING_ARG_DISTRIBUTION","data":null}'
        )
        assert handle_command(client, "/dist colors") is True
        assert "Error: MISSING_ARG_DISTRIBUTION" in capsys.readouterr().out

    def test_unknown_command(self, mock_client, capsys):
        handle_command(mock_client("OK"), "/frobnicate")
        assert "Unknown command" in capsys.readouterr().out

    def test_blank_line_is_ignored(self, mock_client):
        client = mock_client("OK")
        assert handle_command(client, "   ") is True
        assert handle_command(client, "") is True
        assert client.transport.requests == []

    def test_quit(self, mock_client):
        assert handle_command(mock_client("OK"), "/quit") is False


class TestRunCli:
    def test_runs_until_quit(self, mock_client, capsys):
        client = mock_client("OK")
        stream = io.StringIO("\n/incr colors red\n/quit\n/incr colors blue\n")
        run_cli(client, stream=stream)
        assert len(client.transport.requests) == 1
        assert "Goodbye." in capsys.readouterr().out

    def test_stops_at_end_of_input(self, mock_client):
        client = mock_client("OK")
        run_cli(client, stream=io.StringIO("/incr colors red\n/incr colors red 2\n"))
        assert len(client.transport.requests) == 2
