# echo_server.py
"""
Tiny JSON-RPC 2.0 server for trying the client by hand.

    pip install -e ".[examples]"
    python example/echo_server.py

Every method echoes its params back, except ``divide`` which does what it
says and ``fail`` which always answers with a JSON-RPC error.
"""
import json

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

app = FastAPI(title="echo")


def _error(code: int, message: str, id=None, data=None, status_code: int = 200):
    error = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return JSONResponse(status_code=status_code, content={"jsonrpc": "2.0", "id": id, "error": error})


@app.post("/jsonrpc")
async def handle(request: Request):
    try:
        payload = json.loads(await request.body())
    except json.JSONDecodeError as e:
        return _error(-32700, "Parse error", data=str(e), status_code=400)

    id = payload.get("id")
    method = payload.get("method")
    params = payload.get("params") or []

    match method:
        case "fail":
            return _error(-32000, "Server error", id, {"params": params})
        case "divide":
            try:
                result = params[0] / params[1]
            except (IndexError, TypeError) as e:
                return _error(-32602, "Invalid params", id, str(e))
            except ZeroDivisionError:
                return _error(-32000, "Server error", id, "division by zero")
        case _:
            result = {"method": method, "params": params}

    return JSONResponse(content={"jsonrpc": "2.0", "id": id, "result": result})


if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8001)
