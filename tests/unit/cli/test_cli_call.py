"""Tests for the jrpc command line interface."""

import json
import logging
from pathlib import Path

import httpx
import pytest

from jrpc.cli import commands
from jrpc.cli.arg_parser import parse_args, parse_param
from jrpc.client import JsonRpcClient
from jrpc.config.schema import ClientConfig
from jrpc.core.logging import configure_logging
from jrpc.rpc.protocol import get_protocol
from jrpc.transport.http import HttpTransport

URL = "http://localhost:8080/rpc"


@pytest.fixture(autouse=True)
def empty_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's ~/.jrpc/config.json out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home


@pytest.fixture
def serve(monkeypatch: pytest.MonkeyPatch):
    """Route clients built by the CLI to an in-process handler.

    Returns a function taking the handler; it returns the list of
    (config, body) pairs seen.
    """

    def install(handler):
        seen: list[tuple[ClientConfig, dict]] = []
        configs: list[ClientConfig] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            seen.append((configs[-1], json.loads(request.content)))
            return handler(request)

        def from_config(cls, config: ClientConfig) -> JsonRpcClient:
            configs.append(config)
            client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
            transport = HttpTransport(config.url, timeout=config.timeout, client=client)
            return cls(transport, get_protocol(config.protocol_version))

        monkeypatch.setattr(JsonRpcClient, "from_config", classmethod(from_config))
        return seen

    return install


class TestArgParser:
    """Tests for argument parsing."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1", 1),
            ("2.5", 2.5),
            ('"text"', "text"),
            ("text", "text"),
            ("[1, 2]", [1, 2]),
            ('{"a": 1}', {"a": 1}),
            ("null", None),
            ("true", True),
        ],
    )
    def test_parse_param(self, raw, expected):
        assert parse_param(raw) == expected

    def test_positional_args(self):
        args = parse_args([URL, "math.sum", "1", "2"])

        assert args.url == URL
        assert args.method == "math.sum"
        assert args.params == [1, 2]
        assert args.notify is False
        assert args.protocol_version is None

    def test_options(self):
        args = parse_args([URL, "log", "--notify", "--protocol", "2.0", "-t", "3", "-v"])

        assert args.notify is True
        assert args.protocol_version == "2.0"
        assert args.timeout == 3.0
        assert args.verbose is True
        assert args.params == []

    def test_unknown_protocol_rejected(self):
        with pytest.raises(SystemExit):
            parse_args([URL, "ping", "--protocol", "3.0"])


class TestMain:
    """Tests for main()/cmd_call()."""

    def test_prints_result_as_json(self, serve, capsys):
        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            return httpx.Response(200, json={"result": {"sum": 3}, "error": None, "id": body["id"]})

        seen = serve(handler)

        exit_code = commands.main([URL, "math.sum", "1", "2"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == {"sum": 3}
        config, body = seen[0]
        assert config.url == URL
        assert body["method"] == "math.sum"
        assert body["params"] == [1, 2]

    def test_notify_prints_nothing(self, serve, capsys):
        seen = serve(lambda request: httpx.Response(204))

        exit_code = commands.main([URL, "log.write", "hello", "--notify"])

        assert exit_code == 0
        assert capsys.readouterr().out == ""
        assert seen[0][1] == {"method": "log.write", "params": ["hello"], "id": None}

    def test_rpc_fault_exit_code(self, serve, capsys):
        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            return httpx.Response(
                200,
                json={"result": None, "error": {"code": 1000, "message": "Error message"}, "id": body["id"]},
            )

        serve(handler)

        exit_code = commands.main([URL, "fail"])

        assert exit_code == 1
        assert "RPC error 1000: Error message" in capsys.readouterr().err

    def test_rpc_fault_data_goes_to_stderr(self, serve, capsys):
        """Fault data is printed with the error, leaving stdout empty."""

        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            error = {"code": 42, "message": "Bad input", "data": {"field": "x"}}
            return httpx.Response(200, json={"result": None, "error": error, "id": body["id"]})

        serve(handler)

        exit_code = commands.main([URL, "fail"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "RPC error 42: Bad input" in captured.err
        assert '"field": "x"' in captured.err

    def test_transport_failure_exit_code(self, serve, capsys):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused")

        serve(handler)

        exit_code = commands.main([URL, "ping"])

        assert exit_code == 1
        assert "not responding" in capsys.readouterr().err

    def test_invalid_url_exit_code(self, capsys):
        exit_code = commands.main(["not-a-url", "ping"])

        assert exit_code == 1
        assert "Config validation failed" in capsys.readouterr().err

    def test_config_file_supplies_defaults(self, serve, tmp_path, capsys):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"url": URL, "protocol_version": "2.0", "timeout": 7}))

        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            return httpx.Response(200, json={"jsonrpc": "2.0", "result": "pong", "id": body["id"]})

        seen = serve(handler)

        exit_code = commands.main([URL, "ping", "--config", str(config_file)])

        assert exit_code == 0
        config, body = seen[0]
        assert config.protocol_version == "2.0"
        assert config.timeout == 7
        assert body["jsonrpc"] == "2.0"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_repeat_calls_do_not_duplicate_handlers(self):
        configure_logging(logging.INFO)
        jrpc_logger = configure_logging(logging.DEBUG)

        assert len(jrpc_logger.handlers) == 1
        assert jrpc_logger.level == logging.DEBUG
        assert jrpc_logger.propagate is False

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "jrpc.log"
        jrpc_logger = configure_logging(logging.INFO, log_file=log_file)

        jrpc_logger.info("hello from test")
        for handler in jrpc_logger.handlers:
            handler.flush()

        assert len(jrpc_logger.handlers) == 2
        assert "hello from test" in log_file.read_text(encoding="utf-8")

        for handler in jrpc_logger.handlers:
            handler.close()
