import time
from typing import Any

from fncoerce.interfaces import Next
from fncoerce.interfaces import RuntimeContext
from fncoerce.log_config import logger


async def logging_middleware(
    ctx: RuntimeContext, value: Any, handler: Next
) -> Any:
    """Logs before and after each handler call."""
    logger.info("→ call %s as %s", ctx.call_id, ctx.logical_type.name)
    out = await handler(ctx, value)
    logger.info("✓ call %s handled", ctx.call_id)
    return out


async def metrics_middleware(
    ctx: RuntimeContext, value: Any, handler: Next
) -> Any:
    """Measures and logs the time taken by the handler."""
    start = time.perf_counter()
    try:
        return await handler(ctx, value)
    finally:
        duration = time.perf_counter() - start
        logger.info("METRICS call %s took %.3fs", ctx.call_id, duration)
