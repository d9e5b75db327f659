import logging

from fncoerce.config import FunctionConfig
from fncoerce.fastapi_utils import create_app
from fncoerce.fastapi_utils import serve
from fncoerce.function import Function
from fncoerce.interfaces import RuntimeContext
from fncoerce.log_config import configure_logging
from fncoerce.middleware import logging_middleware
from fncoerce.middleware import metrics_middleware

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("fncoerce")
logger.setLevel(logging.INFO)


def hello_handler(_: RuntimeContext, name: str) -> str:
    """Greets its input; an empty body greets the world."""
    if not name:
        return "Hello world!"
    trimmed = name.rstrip("\n")
    return f"Hello {trimmed}!"


cfg = FunctionConfig.from_env()
configure_logging(cfg.json_logging)

function = Function(hello_handler, input_type=str, config=cfg)
function.add_middleware(logging_middleware)
function.add_middleware(metrics_middleware)

app = create_app(function)


if __name__ == "__main__":
    serve(function, cfg)
