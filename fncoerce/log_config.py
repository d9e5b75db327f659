import json
import logging
import logging.handlers
import queue
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator
from typing import Optional
from typing import Tuple

NO_CALL = "-"

TEXT_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s] "
    "call=%(call_id)s type=%(logical_type)s %(message)s"
)

# (call id, logical content type) of the invocation running in this context
_current_call: ContextVar[Optional[Tuple[str, str]]] = ContextVar(
    "fncoerce_current_call", default=None
)


class InvocationFilter(logging.Filter):
    """Stamps records with the call id and logical type of the invocation."""

    def filter(self, record: logging.LogRecord) -> bool:
        call_id, logical_type = _current_call.get() or (NO_CALL, NO_CALL)
        record.call_id = call_id
        record.logical_type = logical_type
        return True


@contextmanager
def invocation_scope(call_id: str, logical_type: str) -> Iterator[None]:
    token = _current_call.set((call_id, logical_type))
    try:
        yield
    finally:
        _current_call.reset(token)


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "call_id": getattr(record, "call_id", NO_CALL),
            "logical_type": getattr(record, "logical_type", NO_CALL),
            "message": record.getMessage(),
        }
        return json.dumps(payload)


def text_formatter() -> logging.Formatter:
    return logging.Formatter(
        TEXT_FORMAT, defaults={"call_id": NO_CALL, "logical_type": NO_CALL}
    )


# Records are stamped on the calling side, then handed to a listener
# thread so an invocation never waits on console I/O.
_log_queue: queue.SimpleQueue = queue.SimpleQueue()
queue_handler = logging.handlers.QueueHandler(_log_queue)
console_handler = logging.StreamHandler()
console_handler.setFormatter(text_formatter())
listener = logging.handlers.QueueListener(_log_queue, console_handler)
listener.start()

logger = logging.getLogger("fncoerce")
logger.setLevel(logging.DEBUG)
logger.addFilter(InvocationFilter())
logger.addHandler(queue_handler)


def configure_logging(json_logging: bool = False) -> None:
    """
    Call at process startup to choose JSON or text console output.
    """
    if json_logging:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(text_formatter())
