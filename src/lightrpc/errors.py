# lightrpc/errors.py
from typing import Any
from dataclasses import dataclass


@dataclass
class JSONRPCError(Exception):
    code: int
    message: str
    data: Any = None

    def __str__(self):
        return f"[{self.code}] {self.message}"

    def to_dict(self):
        base = {"code": self.code, "message": self.message}
        if self.data is not None:
            base["data"] = self.data
        return base

    @classmethod
    def from_dict(cls, error: Any) -> "JSONRPCError":
        """Build an error from a JSON-RPC ``error`` object, tolerating partial ones."""
        if not isinstance(error, dict):
            return SERVER_ERROR(d=error)

        code = error.get("code", -32000)
        try:
            code = int(code)
        except (TypeError, ValueError, OverflowError):
            # non-numeric codes are kept in data so nothing is lost
            return cls(-32000, str(error.get("message", "Server error")), error)

        return cls(code, str(error.get("message", "Server error")), error.get("data"))


# JSON-RPC 2.0 error codes the client produces
PARSE_ERROR = lambda d=None: JSONRPCError(-32700, "Parse error", d)
INVALID_PARAMS = lambda d=None: JSONRPCError(-32602, "Invalid params", d)
SERVER_ERROR = lambda code=-32000, d=None: JSONRPCError(code, "Server error", d)


class ResponseParseError(JSONRPCError):
    """The server claimed a JSON body but sent something that is not a JSON object."""

    def __init__(self, reason: str, status_code: int, body: str):
        base = PARSE_ERROR({"reason": reason})
        super().__init__(base.code, base.message, base.data)
        self.status_code = status_code
        self.body = body


class RPCNetworkError(JSONRPCError):
    """Non-2xx HTTP status without a JSON-RPC error object to report instead."""

    def __init__(self, status_code: int, reason: str = ""):
        base = SERVER_ERROR(d={"status_code": status_code, "reason": reason})
        super().__init__(base.code, base.message, base.data)
        self.status_code = status_code
        self.reason = reason
