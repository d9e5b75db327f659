import inspect
from typing import Any
from typing import Dict
from typing import List
from typing import Mapping
from typing import Optional

from fncoerce.coercion import decode
from fncoerce.coercion import encode
from fncoerce.config import FunctionConfig
from fncoerce.content_types import canonical_mime
from fncoerce.content_types import classify
from fncoerce.content_types import is_accepted
from fncoerce.errors import CoercionError
from fncoerce.errors import FunctionError
from fncoerce.errors import UnsupportedContentTypeError
from fncoerce.interfaces import Handler
from fncoerce.interfaces import InvocationResult
from fncoerce.interfaces import Middleware
from fncoerce.interfaces import Next
from fncoerce.interfaces import RuntimeContext
from fncoerce.log_config import invocation_scope
from fncoerce.log_config import logger

CALL_ID_HEADER = "fn-call-id"


class Function:
    """
    Wraps a user handler: decodes the request body into `input_type`,
    runs the handler through the middleware chain, and encodes the result
    back with the same logical content type.
    """

    def __init__(
        self,
        handler: Handler,
        input_type: Any = str,
        output_type: Optional[Any] = None,
        config: Optional[FunctionConfig] = None,
        middleware: Optional[List[Middleware]] = None,
    ) -> None:
        self._handler = handler
        self.input_type = input_type
        self.output_type = output_type
        self.config = config or FunctionConfig()
        self._middleware: List[Middleware] = list(middleware or [])

    def add_middleware(self, mw: Middleware) -> None:
        self._middleware.append(mw)
        logger.debug("Middleware added: %s", getattr(mw, "__name__", repr(mw)))

    async def invoke(
        self,
        content_type: str,
        body: bytes,
        headers: Optional[Mapping[str, str]] = None,
    ) -> InvocationResult:
        """
        Run one invocation. Raises CoercionError when the body or the
        result can't be converted, FunctionError when the handler fails.
        """
        if self.config.strict_content_type and not is_accepted(content_type):
            raise UnsupportedContentTypeError(content_type)

        lowered: Dict[str, str] = {
            k.lower(): v for k, v in (headers or {}).items()
        }
        logical = classify(content_type)
        ctx = RuntimeContext(
            content_type=content_type,
            logical_type=logical,
            headers=lowered,
        )
        if lowered.get(CALL_ID_HEADER):
            ctx.call_id = lowered[CALL_ID_HEADER]

        with invocation_scope(ctx.call_id, logical.name):
            value = decode(logical, body, self.input_type)
            result = await self._dispatch(ctx, value)
            if isinstance(result, InvocationResult):
                return result

            return InvocationResult(
                body=encode(logical, result, self.output_type),
                content_type=canonical_mime(logical),
                headers=dict(ctx.response_headers),
            )

    async def _dispatch(self, ctx: RuntimeContext, value: Any) -> Any:
        async def final(c: RuntimeContext, v: Any) -> Any:
            try:
                out = self._handler(c, v)
                if inspect.isawaitable(out):
                    out = await out
            except CoercionError:
                raise
            except Exception as e:
                logger.exception("Handler failed for call %s", c.call_id)
                raise FunctionError(e) from e
            return out

        pipeline: Next = final
        for mw in reversed(self._middleware):
            pipeline = self._wrap_middleware(mw, pipeline)

        return await pipeline(ctx, value)

    @staticmethod
    def _wrap_middleware(mw: Middleware, nxt: Next) -> Next:
        async def wrapped(ctx: RuntimeContext, value: Any) -> Any:
            return await mw(ctx, value, nxt)

        return wrapped
