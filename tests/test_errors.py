"""
Tests for the error types
"""
from lightrpc.errors import (
    INVALID_PARAMS,
    PARSE_ERROR,
    SERVER_ERROR,
    JSONRPCError,
    ResponseParseError,
    RPCNetworkError,
)


def test_to_dict_skips_empty_data():
    assert PARSE_ERROR().to_dict() == {"code": -32700, "message": "Parse error"}
    assert INVALID_PARAMS({"reason": "x"}).to_dict() == {
        "code": -32602,
        "message": "Invalid params",
        "data": {"reason": "x"},
    }


def test_server_error_code():
    assert SERVER_ERROR(-32050).code == -32050


def test_from_dict_full():
    error = JSONRPCError.from_dict({"code": -32601, "message": "Method not found", "data": {"method": "x"}})
    assert error == JSONRPCError(-32601, "Method not found", {"method": "x"})
    assert str(error) == "[-32601] Method not found"


def test_from_dict_partial():
    error = JSONRPCError.from_dict({"message": "nope"})
    assert error.code == -32000
    assert error.message == "nope"


def test_from_dict_non_mapping():
    error = JSONRPCError.from_dict("went wrong")
    assert error.code == -32000
    assert error.data == "went wrong"


def test_from_dict_infinite_code():
    error = JSONRPCError.from_dict({"code": float("inf"), "message": "odd"})
    assert error.code == -32000
    assert error.message == "odd"


def test_subclasses_are_built_from_factories():
    parse_error = ResponseParseError("bad", 200, "{")
    assert isinstance(parse_error, JSONRPCError)
    assert parse_error.to_dict() == PARSE_ERROR({"reason": "bad"}).to_dict()

    network_error = RPCNetworkError(502, "Bad Gateway")
    assert network_error.to_dict() == SERVER_ERROR(d={"status_code": 502, "reason": "Bad Gateway"}).to_dict()
