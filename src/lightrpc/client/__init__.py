from lightrpc.client.client import DEFAULT_HEADERS, Client
from lightrpc.client.request import Request
from lightrpc.client.response import Response

__all__ = ["Client", "Request", "Response", "DEFAULT_HEADERS"]
