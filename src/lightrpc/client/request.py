# lightrpc/client/request.py
import math
from typing import Any, List

from pydantic_core import PydanticSerializationError

from lightrpc.errors import INVALID_PARAMS
from lightrpc.schemas import JSONRPC_VERSION, RPCRequest


class Request:
    """
    Generic request for JSON-RPC 2.0 calls.

    Positional constructor arguments become the ``params`` list, in order:

    >>> Request("foo", "bar", ["baz"]).set_method("echo").set_id(7).to_json()
    '{"id":7,"method":"echo","jsonrpc":"2.0","params":["foo","bar",["baz"]]}'

    Params are not validated here; a value that cannot be encoded as JSON
    fails when the request is serialized.
    """

    def __init__(self, *params: Any):
        self._id = 0
        self._method = "call"
        self._version = JSONRPC_VERSION
        self._params: List[Any] = list(params)

    # ───── Fluent setters ─────
    def set_id(self, id: int = 0) -> "Request":
        self._id = int(id)
        return self

    def set_method(self, method: str = "call") -> "Request":
        self._method = str(method)
        return self

    def set_version(self, version: str = JSONRPC_VERSION) -> "Request":
        self._version = str(version)
        return self

    # ───── Getters ─────
    def get_id(self) -> int:
        return self._id

    def get_method(self) -> str:
        return self._method

    def get_version(self) -> str:
        return self._version

    def get_params(self) -> List[Any]:
        return list(self._params)

    id = property(get_id)
    method = property(get_method)
    version = property(get_version)
    params = property(get_params)

    # ───── Serialization ─────
    def _model(self) -> RPCRequest:
        return RPCRequest(
            id=self._id,
            method=self._method,
            jsonrpc=self._version,
            params=self._params,
        )

    def to_envelope(self) -> dict:
        """Return the envelope as a dict keyed ``id, method, jsonrpc, params``."""
        return self._model().model_dump()

    to_dict = to_envelope

    def to_json(self) -> str:
        _check_finite(self._params)
        try:
            return self._model().model_dump_json()
        except PydanticSerializationError as e:
            raise INVALID_PARAMS({"reason": str(e)}) from e

    def __str__(self):
        return self.to_json()

    def __repr__(self):
        return f"Request(id={self._id!r}, method={self._method!r}, params={self._params!r})"


def _check_finite(value: Any) -> None:
    """Reject NaN and infinities anywhere in the params; JSON has no form for them."""
    if isinstance(value, float):
        if not math.isfinite(value):
            raise INVALID_PARAMS({"reason": f"{value!r} is not valid JSON"})
    elif isinstance(value, dict):
        for item in value.values():
            _check_finite(item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _check_finite(item)
