from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi import Request
from fastapi import Response
from fastapi.responses import JSONResponse

from fncoerce import __version__
from fncoerce.config import FunctionConfig
from fncoerce.errors import CoercionError
from fncoerce.errors import FunctionError
from fncoerce.function import Function
from fncoerce.log_config import logger

VERSION_HEADER = "Fn-Fdk-Version"
FAILURE_STATUS = 502


def create_app(function: Function) -> FastAPI:
    """
    Returns a FastAPI app serving `function` on POST /call.
    A failed invocation answers 502 with {"message": ...}; the app keeps
    serving subsequent calls.
    """
    app = FastAPI()
    version = f"fncoerce/{__version__}"

    @app.post("/call")
    async def call(request: Request) -> Response:
        body = await request.body()
        content_type = request.headers.get("content-type", "")
        try:
            result = await function.invoke(
                content_type, body, dict(request.headers)
            )
        except CoercionError as e:
            logger.warning("Coercion failed: %s", e.message)
            return JSONResponse(
                {"message": e.message},
                status_code=FAILURE_STATUS,
                headers={VERSION_HEADER: version},
            )
        except FunctionError as e:
            return JSONResponse(
                {"message": str(e)},
                status_code=FAILURE_STATUS,
                headers={VERSION_HEADER: version},
            )

        headers = dict(result.headers)
        headers[VERSION_HEADER] = version
        # set verbatim so starlette does not append a charset
        headers["content-type"] = result.content_type
        return Response(content=result.body, headers=headers)

    return app


def serve(function: Function, config: Optional[FunctionConfig] = None) -> None:
    """
    Serve on the platform's unix socket when FN_LISTENER names one,
    otherwise on TCP host/port.
    """
    cfg = config or function.config
    app = create_app(function)
    if cfg.socket_path:
        logger.info("Listening on unix socket %s", cfg.socket_path)
        uvicorn.run(app, uds=cfg.socket_path)
    else:
        logger.info("Listening on %s:%d", cfg.host, cfg.port)
        uvicorn.run(app, host=cfg.host, port=cfg.port)
