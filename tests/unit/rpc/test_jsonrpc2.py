"""Tests for the JSON-RPC 2.0 protocol."""

import pytest

from jrpc.core.errors import InvalidArgumentError, InvalidResponseError, RpcFaultError
from jrpc.rpc.jsonrpc2 import JsonRpc2
from jrpc.rpc.types import Notification, Request, Response


@pytest.fixture
def protocol() -> JsonRpc2:
    return JsonRpc2()


class TestValidateRequest:
    """Tests for 2.0 request rules."""

    @pytest.mark.parametrize(
        "request_",
        [
            Request("subtract", [42, 23], 1),
            Request("subtract", {"minuend": 42, "subtrahend": 23}, "abc"),
            Request("ping", None, 3),
            Notification("update", [1, 2, 3]),
        ],
    )
    def test_valid_request(self, protocol, request_):
        """Valid 2.0 requests pass unchanged."""
        assert protocol.validate_request(request_) is request_

    def test_rpc_prefix_is_reserved(self, protocol):
        """Method names starting with "rpc." are reserved in 2.0."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            protocol.validate_request(Request("rpc.discover", [], 1))

        assert "rpc." in str(exc_info.value)

    def test_non_string_method_rejected(self, protocol):
        """Methods must be strings."""
        with pytest.raises(InvalidArgumentError):
            protocol.validate_request(Request(None, [], 1))

    @pytest.mark.parametrize("params", ["text", 5, 1.5])
    def test_scalar_params_rejected(self, protocol, params):
        """Scalar params are rejected."""
        with pytest.raises(InvalidArgumentError):
            protocol.validate_request(Request("echo", params, 1))

    @pytest.mark.parametrize("request_id", [1.5, True, [1]])
    def test_bad_id_rejected(self, protocol, request_id):
        """Ids must be strings or integers."""
        with pytest.raises(InvalidArgumentError):
            protocol.validate_request(Request("echo", [], request_id))


class TestGetRequestDto:
    """Tests for 2.0 DTO mapping."""

    def test_request_with_named_params(self, protocol):
        """Named params are sent as an object with the version tag."""
        dto = protocol.get_request_dto(Request("subtract", {"minuend": 42, "subtrahend": 23}, 3))

        assert dto == {
            "jsonrpc": "2.0",
            "method": "subtract",
            "params": {"minuend": 42, "subtrahend": 23},
            "id": 3,
        }

    def test_request_without_params_omits_key(self, protocol):
        """A request without params omits the params key."""
        dto = protocol.get_request_dto(Request("ping", None, 1))

        assert dto == {"jsonrpc": "2.0", "method": "ping", "id": 1}

    def test_notification_omits_id(self, protocol):
        """Notifications omit the id key."""
        dto = protocol.get_request_dto(Notification("update", (1, 2)))

        assert dto == {"jsonrpc": "2.0", "method": "update", "params": [1, 2]}


class TestCreateResponse:
    """Tests for 2.0 reply validation."""

    def test_success(self, protocol):
        """A tagged reply with a result is a success."""
        response = protocol.create_response({"jsonrpc": "2.0", "result": 19, "id": 1})

        assert response == Response(result=19, id=1)

    def test_error_raises_fault(self, protocol):
        """A tagged error reply raises RpcFaultError."""
        dto = {
            "jsonrpc": "2.0",
            "error": {"code": -32601, "message": "Method not found", "data": "foobar"},
            "id": "1",
        }

        with pytest.raises(RpcFaultError) as exc_info:
            protocol.create_response(dto)

        assert exc_info.value.code == -32601
        assert exc_info.value.message == "Method not found"
        assert exc_info.value.data == "foobar"

    @pytest.mark.parametrize(
        "dto",
        [
            pytest.param({"result": 19, "id": 1}, id="jsonrpc-missing"),
            pytest.param({"jsonrpc": "1.0", "result": 19, "id": 1}, id="jsonrpc-wrong"),
            pytest.param({"jsonrpc": "2.0", "result": 19}, id="id-missing"),
            pytest.param({"jsonrpc": "2.0", "id": 1}, id="result-and-error-missing"),
            pytest.param(
                {"jsonrpc": "2.0", "result": 19, "error": None, "id": 1},
                id="result-and-error-both",
            ),
            pytest.param({"jsonrpc": "2.0", "error": None, "id": 1}, id="error-null"),
            pytest.param(
                {"jsonrpc": "2.0", "error": {"code": "x", "message": "m"}, "id": 1},
                id="error-code-string",
            ),
            pytest.param({"jsonrpc": "2.0", "result": 1, "id": 2.5}, id="id-float"),
            pytest.param("oops", id="string"),
        ],
    )
    def test_malformed_raises_invalid_response(self, protocol, dto):
        """Replies breaking 2.0 rules raise InvalidResponseError."""
        with pytest.raises(InvalidResponseError):
            protocol.create_response(dto)
