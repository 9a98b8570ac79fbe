"""
Shared fixtures: canned HTTP replies and a tiny JSON-RPC server app.
"""
import json

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

SERVER_URL = "http://some-json-rpc-server.com"


def json_reply(body, status_code=200, content_type="application/json"):
    return httpx.Response(
        status_code,
        headers={"content-type": content_type},
        content=json.dumps(body).encode(),
    )


@pytest.fixture
def result_reply():
    return json_reply({"id": 1, "jsonrpc": "2.0", "result": {"foo": "bar"}})


@pytest.fixture
def error_reply():
    return json_reply({"id": 1, "jsonrpc": "2.0", "error": {"code": "bar"}})


@pytest.fixture
def xml_reply():
    return httpx.Response(
        200,
        headers={"content-type": "application/xml"},
        text='<?xml version="1.0" encoding="UTF-8"?><root><bar>foo</bar><foo>bar</foo></root>',
    )


@pytest.fixture
def recorder():
    """MockTransport handler that records requests and answers with a fixed result."""

    class Recorder:
        def __init__(self):
            self.requests = []
            self.reply = {"id": 1, "jsonrpc": "2.0", "result": {"foo": "bar"}}

        def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(200, json=self.reply)

        @property
        def last_body(self):
            return json.loads(self.requests[-1].content)

    return Recorder()


@pytest.fixture
def rpc_app():
    """Echo server: returns method/params as the result, ``fail`` yields an RPC error."""
    app = FastAPI()

    @app.post("/jsonrpc")
    async def handle(request: Request):
        try:
            payload = json.loads(await request.body())
        except json.JSONDecodeError as e:
            return JSONResponse(
                status_code=400,
                content={"jsonrpc": "2.0", "id": None, "error": {"code": -32700, "message": "Parse error", "data": str(e)}},
            )

        if payload["method"] == "fail":
            return JSONResponse(
                content={"jsonrpc": "2.0", "id": payload["id"], "error": {"code": -32000, "message": "Server error", "data": payload["params"]}}
            )

        return JSONResponse(
            content={"jsonrpc": "2.0", "id": payload["id"], "result": {"method": payload["method"], "params": payload["params"]}}
        )

    @app.post("/broken")
    async def broken():
        return PlainTextResponse("upstream exploded", status_code=502)

    return app
