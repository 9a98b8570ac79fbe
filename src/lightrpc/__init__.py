"""Light JSON-RPC 2.0 client over HTTP."""

from lightrpc.client import Client, Request, Response
from lightrpc.config import ClientSettings, configure_logging
from lightrpc.errors import JSONRPCError, ResponseParseError, RPCNetworkError

__version__ = "0.1.0"

__all__ = [
    "Client",
    "Request",
    "Response",
    "ClientSettings",
    "configure_logging",
    "JSONRPCError",
    "ResponseParseError",
    "RPCNetworkError",
]
