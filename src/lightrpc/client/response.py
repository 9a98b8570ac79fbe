# lightrpc/client/response.py
import copy
import json
import logging
from typing import Any, Optional

import httpx

from lightrpc.errors import JSONRPCError, ResponseParseError, RPCNetworkError
from lightrpc.schemas import JSONValue, RPCResponse

logger = logging.getLogger("lightrpc.response")


class Response:
    """
    JSON-RPC 2.0 response, parsed from an ``httpx.Response``.

    Parsing happens once, in the constructor. Two independent error flags
    are tracked:

    - ``is_network_error``: the HTTP status was outside 200-299.
    - ``is_rpc_error``: the body carried a non-null ``error`` member.

    Bodies whose ``Content-Type`` does not mention ``json`` are not decoded
    at all, so HTML or XML error pages come out as an empty response. A
    JSON content type with a body that is not a JSON object raises
    ``ResponseParseError``.
    """

    def __init__(self, http_response: httpx.Response):
        self._http_response = http_response
        self._network_error = False
        self._rpc_error = False
        self._id: Optional[int] = None
        self._body: dict = {}
        self._data: JSONValue = {}

        self._parse_response()

    # ───── Error flags ─────
    def is_error(self) -> bool:
        """Network errors count as errors too."""
        return self._rpc_error or self._network_error

    @property
    def is_rpc_error(self) -> bool:
        return self._rpc_error

    @property
    def is_network_error(self) -> bool:
        return self._network_error

    # ───── HTTP details ─────
    @property
    def http_response(self) -> httpx.Response:
        return self._http_response

    @property
    def status_code(self) -> int:
        return self._http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._http_response.headers

    @property
    def id(self) -> Optional[int]:
        return self._id

    # ───── Data access ─────
    # accessors hand out copies, the parsed response never changes
    def get(self, key: Optional[str] = None) -> Any:
        """Return the whole result/error data, or one key of it."""
        if not key:
            return copy.deepcopy(self._data)
        if not isinstance(self._data, dict):
            return None
        return copy.deepcopy(self._data.get(key))

    def __getattr__(self, key: str) -> Any:
        # only reached for names that are not real attributes
        if key.startswith("_"):
            raise AttributeError(key)
        return self.get(key)

    def data(self) -> JSONValue:
        return copy.deepcopy(self._data)

    def result(self) -> JSONValue:
        if self._rpc_error:
            return None
        return copy.deepcopy(self._data)

    def error(self) -> JSONValue:
        if not self._rpc_error:
            return None
        return copy.deepcopy(self._data)

    def raise_for_error(self) -> "Response":
        """Raise the RPC error (or the HTTP failure) carried by this response."""
        if self._rpc_error:
            raise JSONRPCError.from_dict(self._data)
        if self._network_error:
            raise RPCNetworkError(self.status_code, self._http_response.reason_phrase)
        return self

    # ───── Serialization ─────
    def to_envelope(self) -> dict:
        """The full decoded body, not just the result/error data."""
        return copy.deepcopy(self._body)

    to_dict = to_envelope

    def to_json(self) -> str:
        return json.dumps(self._body, separators=(",", ":"))

    def __str__(self):
        return self.to_json()

    def __repr__(self):
        return (
            f"Response(status_code={self.status_code}, id={self._id!r}, "
            f"is_rpc_error={self._rpc_error}, is_network_error={self._network_error})"
        )

    # ───── Parsing ─────
    def _parse_response(self) -> None:
        status_code = self._http_response.status_code

        # error if the http status code is not between 200 and 299 (inclusive)
        self._network_error = not (200 <= status_code <= 299)
        if self._network_error:
            logger.warning(f"HTTP {status_code} from {self._request_url()}")

        body = self._decode_body()
        if not body:
            return

        self._body = body
        envelope = RPCResponse.model_validate(body)

        self._id = self._coerce_id(envelope.id)
        self._rpc_error = envelope.error is not None

        data = envelope.error if self._rpc_error else envelope.result
        self._data = {} if data is None else data

        logger.debug(f"Parsed response id={self._id} rpc_error={self._rpc_error}")

    def _content_type(self) -> str:
        """All Content-Type header values, joined with a comma."""
        return ",".join(self._http_response.headers.get_list("content-type"))

    def _is_json(self) -> bool:
        return "json" in self._content_type().lower()

    def _decode_body(self) -> dict:
        # avoid any parsing when there's no json header
        if not self._is_json():
            return {}

        text = self._http_response.text
        if not text.strip():
            return {}

        try:
            body = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Malformed JSON body (HTTP {self.status_code}): {e}")
            raise ResponseParseError(str(e), self.status_code, text) from e

        if not isinstance(body, dict):
            logger.warning(f"Expected a JSON object, got {type(body).__name__}")
            raise ResponseParseError(
                f"expected a JSON object, got {type(body).__name__}", self.status_code, text
            )
        return body

    def _request_url(self) -> str:
        # responses built by hand in tests have no request attached
        try:
            return str(self._http_response.request.url)
        except RuntimeError:
            return "<unknown>"

    @staticmethod
    def _coerce_id(value: Any) -> Optional[int]:
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            # 1e999 and Infinity decode to float('inf')
            return None
