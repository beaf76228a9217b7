import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from .api import pages, realtime
from .api.deps import RequestBodyError
from .api.routes import build_api_router
from .api.wasm import invalid_body_handler
from .core.config import Settings, get_settings
from .schemas.realtime import SystemMessage
from .services.broadcast_hub import BroadcastHub
from .services.static_site import StaticSite
import uvicorn

# Named explicitly so records still reach the package handler under `python -m`
logger = logging.getLogger("htmx_wasm_server.main")

BODY_LOG_LIMIT = 2000

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_HANDLER_NAME = "htmx_wasm_server"


def configure_logging(level: str, stream=None) -> logging.Handler:
    """Attach a stream handler to the package logger at ``level``.

    uvicorn only configures its own loggers, so the application's loggers
    need a handler of their own. Calling this again replaces the handler.
    """

    package_logger = logging.getLogger("htmx_wasm_server")
    for existing in list(package_logger.handlers):
        if existing.get_name() == LOG_HANDLER_NAME:
            package_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
    return handler


async def log_requests(request: Request, call_next):
    # Log Request
    body_bytes = await request.body()

    # Restore body for the handler
    async def receive():
        return {"type": "http.request", "body": body_bytes}
    request._receive = receive

    logger.info(">>> [REQUEST] %s %s", request.method, request.url)
    if body_bytes:
        logger.info(">>> [REQUEST BODY] %s", body_bytes.decode("utf-8", errors="replace")[:BODY_LOG_LIMIT])

    response = await call_next(request)

    # Only capture body for text-based responses
    content_type = response.headers.get("content-type", "")
    if "text" in content_type or "json" in content_type:
        response_body = b""
        async for chunk in response.body_iterator:
            response_body += chunk

        logger.info("<<< [RESPONSE] Status: %s", response.status_code)
        logger.info("<<< [RESPONSE BODY] %s", response_body.decode("utf-8", errors="replace")[:BODY_LOG_LIMIT])

        # Reconstruct response to pass it downstream
        new_response = Response(
            content=response_body,
            status_code=response.status_code,
            headers=dict(response.headers),
            media_type=response.media_type
        )
        new_response.background = response.background
        return new_response

    logger.info("<<< [RESPONSE] Status: %s (Body not logged for %s)", response.status_code, content_type)
    return response


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        hub = app.state.broadcast_hub
        startup = SystemMessage(message="🦀 HTMX WASM demo server with WebSockets started!")
        hub.broadcast(startup)
        logger.info("%s", startup.message)
        yield

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        description="HTMX + WebAssembly demo server",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.broadcast_hub = BroadcastHub(queue_size=settings.WS_QUEUE_SIZE)
    app.add_exception_handler(RequestBodyError, invalid_body_handler)

    if settings.LOG_REQUESTS:
        app.middleware("http")(log_requests)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(build_api_router(settings.API_PREFIX))
    app.include_router(realtime.router)
    app.include_router(pages.router)

    # Anything the routes above don't claim is looked up on disk
    app.mount(
        "/",
        StaticSite(
            directory=settings.serving_root,
            index_file=settings.INDEX_FILE,
            spa_fallback=settings.SPA_FALLBACK,
        ),
        name="static",
    )
    return app


def print_startup_banner(settings: Settings) -> None:
    print(f"🚀 Server running at http://localhost:{settings.PORT}")
    print(f"📁 Serving files from: {settings.serving_root}")
    print(f"🦀 WASM files should be available at: /{settings.WASM_DIR}/")
    print(f"🔄 HTMX endpoints available at: {settings.API_PREFIX}/*")
    print(f"🔌 WebSocket available at ws://localhost:{settings.PORT}/ws")


app = create_app()


def run() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    print_startup_banner(settings)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL, workers=1)


if __name__ == "__main__":
    run()
