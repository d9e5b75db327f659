import uuid
from typing import Any
from typing import Awaitable
from typing import Callable
from typing import Dict
from typing import Union

from pydantic import BaseModel
from pydantic import Field

from fncoerce.content_types import ContentType


class RuntimeContext(BaseModel):
    """
    Per-invocation context handed to the user handler.
    """

    call_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    # declared inbound MIME string, as received
    content_type: str = ""
    logical_type: ContentType = ContentType.JSON
    headers: Dict[str, str] = Field(default_factory=dict)
    response_headers: Dict[str, str] = Field(default_factory=dict)

    def set_response_header(self, name: str, value: str) -> None:
        self.response_headers[name] = value


class InvocationResult(BaseModel):
    body: bytes
    content_type: str
    headers: Dict[str, str] = Field(default_factory=dict)


# User handlers may be plain functions or coroutines
Handler = Callable[[RuntimeContext, Any], Union[Any, Awaitable[Any]]]

Next = Callable[[RuntimeContext, Any], Awaitable[Any]]

# Middleware wraps the handler: (ctx, input, next) -> output
Middleware = Callable[[RuntimeContext, Any, Next], Awaitable[Any]]
