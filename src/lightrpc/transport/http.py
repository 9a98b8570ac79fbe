# lightrpc/transport/http.py
from typing import Protocol, runtime_checkable

import httpx

from lightrpc.config import ClientSettings


@runtime_checkable
class HTTPSender(Protocol):
    """
    Anything that can complete one HTTP exchange.

    ``httpx.Client`` satisfies it, and so does ``fastapi.testclient.TestClient``.
    Connection errors, timeouts and TLS failures are raised by the
    implementation and are not translated by the JSON-RPC client.
    """

    def send(self, request: httpx.Request) -> httpx.Response: ...


def create_http_client(settings: ClientSettings) -> httpx.Client:
    return httpx.Client(
        timeout=settings.timeout,
        follow_redirects=settings.follow_redirects,
    )


def build_http_request(url: str, headers: httpx.Headers, body: str, method: str = "POST") -> httpx.Request:
    return httpx.Request(method.upper(), url, headers=headers, content=body.encode("utf-8"))
