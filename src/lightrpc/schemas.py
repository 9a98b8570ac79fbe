# lightrpc/schemas.py
from typing import Any, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

JSONValue = Union[str, int, float, bool, None, dict, list]

JSONRPC_VERSION = "2.0"


class RPCRequest(BaseModel):
    # field order is the wire key order
    id: int = 0
    method: str = "call"
    jsonrpc: str = Field(default=JSONRPC_VERSION)
    params: List[Any] = Field(default_factory=list)


class RPCResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Any] = None
    jsonrpc: Optional[Any] = None
    result: Optional[Any] = None
    error: Optional[Any] = None
