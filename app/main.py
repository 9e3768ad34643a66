"""Main FastAPI application for the TODO plugin."""
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from app.config import Settings, get_settings
from app.mcp.server import create_mcp_server
from app.middleware.cors import add_cors_middleware
from app.routers import mcp_router, plugin_router, todos_router
from app.services.todo_store import TodoStore
from app.utils.logger import configure_logging, get_logger
from app.utils.metrics import MetricsCollector

API_VERSION = "v1"
API_TITLE = "TODO Plugin"
API_DESCRIPTION = (
    "A plugin that allows the user to create and manage a TODO list using ChatGPT. "
    "If you do not know the user's username, ask them first before making queries to the plugin. "
    "Otherwise, use the username \"global\"."
)

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the FastAPI application with its own todo store."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        servers=[{"url": settings.server_url}],
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
    )

    # Store references in app state
    app.state.settings = settings
    app.state.todo_store = TodoStore()
    app.state.metrics = MetricsCollector()
    app.state.mcp_server = create_mcp_server(app.state.todo_store)

    add_cors_middleware(app, settings.allowed_origins)

    @app.get("/health", include_in_schema=False)
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": API_VERSION}

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint - interactive docs in development, API welcome message otherwise."""
        if app.docs_url:
            return RedirectResponse(url=app.docs_url)
        return {
            "title": API_TITLE,
            "version": API_VERSION,
            "openapi": "/openapi.yaml",
            "manifest": "/.well-known/ai-plugin.json",
            "health": "/health",
        }

    app.include_router(todos_router)   # /todos/{username}
    app.include_router(plugin_router)  # /logo.png, /.well-known/ai-plugin.json, /openapi.yaml
    app.include_router(mcp_router)     # /mcp/tools

    logger.info(
        "application_created",
        environment=settings.environment,
        server_url=settings.server_url,
        tools=app.state.mcp_server.list_tools(),
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = app.state.settings
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )
