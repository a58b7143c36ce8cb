import contextlib
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from helpdesk.api.middleware import RequestLoggingMiddleware
from helpdesk.api.routes import analytics, dashboard, meta, tickets
from helpdesk.config import settings
from helpdesk.mcp.server import mcp
from helpdesk.mcp.tools import tickets as mcp_tickets  # noqa: F401
from helpdesk.mcp.tools import info as mcp_info  # noqa: F401
from helpdesk.store import get_store

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    async with contextlib.AsyncExitStack() as stack:
        logging.basicConfig(level=settings.log_level.upper())
        store = get_store()
        logger.info("%s started with %d tickets", settings.app_name, len(store))
        await stack.enter_async_context(mcp.session_manager.run())
        yield


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/api/v1/health")
    async def health_check():
        return {"status": "ok"}

    app.include_router(tickets.router, prefix="/api/v1/tickets", tags=["tickets"])
    app.include_router(dashboard.router, prefix="/api/v1/dashboard", tags=["dashboard"])
    app.include_router(analytics.router, prefix="/api/v1/analytics", tags=["analytics"])
    app.include_router(meta.router, prefix="/api/v1/meta", tags=["meta"])

    app.mount(settings.mcp_path, mcp.streamable_http_app())

    return app


app = create_app()
