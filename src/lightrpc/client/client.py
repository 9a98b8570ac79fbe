# lightrpc/client/client.py
import json
import logging
from typing import Any, Mapping, Optional, Union

import httpx

from lightrpc.client.request import Request
from lightrpc.client.response import Response
from lightrpc.config import ClientSettings, configure_logging
from lightrpc.transport.http import HTTPSender, build_http_request, create_http_client

logger = logging.getLogger("lightrpc.client")

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class Client:
    """
    Simple JSON-RPC 2.0 client over HTTP(S).

    The HTTP exchange itself is delegated to ``http_client`` (an
    ``httpx.Client`` unless one is injected). Timeouts, TLS and connection
    errors are raised by it and are not caught here; nothing is retried.

    The transport can be swapped with ``set_http_client`` at any time.
    Swapping it while other threads have calls in flight is not supported:
    do it before issuing concurrent calls.
    """

    def __init__(
        self,
        server_url: str,
        headers: Optional[Mapping[str, str]] = None,
        http_client: Optional[HTTPSender] = None,
        settings: Union[ClientSettings, dict, None] = None,
    ):
        self._settings = ClientSettings.coerce(settings)
        # leave the application's logging alone unless asked
        if settings is not None:
            configure_logging(self._settings.log_level)

        self._server_url = server_url

        # merge default headers with new headers
        self._headers = httpx.Headers(DEFAULT_HEADERS)
        self._headers.update(headers or {})

        # only close what we created
        self._owns_http_client = http_client is None
        self._http_client = http_client if http_client is not None else create_http_client(self._settings)

    # ───── Properties ─────
    @property
    def server_url(self) -> str:
        return self._server_url

    @property
    def headers(self) -> httpx.Headers:
        return self._headers.copy()

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def http_client(self) -> HTTPSender:
        return self._http_client

    @http_client.setter
    def http_client(self, http_client: HTTPSender) -> None:
        self.set_http_client(http_client)

    def get_http_client(self) -> HTTPSender:
        return self._http_client

    def set_http_client(self, http_client: HTTPSender) -> "Client":
        """
        Replace the transport. A client created by this ``Client`` is closed
        here; an injected one is never closed by us.
        """
        if self._owns_http_client and http_client is not self._http_client:
            self._http_client.close()
        self._owns_http_client = False
        self._http_client = http_client
        return self

    # ───── Calls ─────
    def call(self, *params: Any) -> Response:
        """Build a default ``Request`` from ``params`` and send it."""
        return self.send(Request(*params))

    def send(self, request: Request) -> Response:
        """Send a ``Request`` to the JSON-RPC server and parse the reply."""
        body = request.to_json()
        logger.debug(f"-> {request.get_method()} id={request.get_id()} {self._server_url}")

        http_response = self.send_raw(body)
        logger.debug(f"<- HTTP {http_response.status_code} for id={request.get_id()}")

        return Response(http_response)

    def send_raw(self, body: Union[dict, list, str], method: str = "POST") -> httpx.Response:
        """
        Send ``body`` as-is and return the raw HTTP response.

        Dicts and lists are JSON-encoded, strings are sent untouched.
        """
        json_body = body if isinstance(body, str) else json.dumps(body, separators=(",", ":"))
        http_request = build_http_request(self._server_url, self._headers, json_body, method)
        return self._http_client.send(http_request)

    # ───── Lifecycle ─────
    def close(self) -> None:
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
