"""Routers package for the TODO plugin."""

from .mcp import router as mcp_router
from .plugin import router as plugin_router
from .todos import router as todos_router

__all__ = ["mcp_router", "plugin_router", "todos_router"]
