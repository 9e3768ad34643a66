"""CORS configuration for the agent-facing API."""
from typing import List
from fastapi.middleware.cors import CORSMiddleware

from app.utils.logger import get_logger

logger = get_logger(__name__)


def add_cors_middleware(app, origins: List[str]):
    """Allow the agent host origins to call the API with any header and method."""
    logger.info("cors_configured", allowed_origins=origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
