"""
MCP API Router

Lets agents discover and invoke the todo tools over HTTP.
"""

from fastapi import APIRouter, Body, HTTPException, Request, status
from fastapi.responses import JSONResponse
from typing import Any, Dict

from app.mcp.base_tool import MCPToolError, create_error_response

import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mcp", tags=["mcp"], include_in_schema=False)


@router.get("/tools")
async def list_tools(request: Request):
    """Return the JSON schema of every registered tool."""
    return request.app.state.mcp_server.get_tool_schemas()


@router.post("/tools/{tool_name}")
async def invoke_tool(
    tool_name: str,
    request: Request,
    arguments: Dict[str, Any] = Body(default_factory=dict),
):
    """Invoke a tool with a JSON object of arguments."""
    mcp_server = request.app.state.mcp_server

    if tool_name not in mcp_server.tools:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tool {tool_name} not found"
        )

    try:
        return await mcp_server.invoke_tool(tool_name, **arguments)
    except MCPToolError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=create_error_response(e)
        )
    except (TypeError, ValueError) as e:
        # Missing or unexpected arguments
        logger.warning(f"Rejected call to {tool_name}: {str(e)}")
        error = MCPToolError(
            code="VALIDATION_ERROR",
            message=str(e),
            details={"tool": tool_name}
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=create_error_response(error)
        )
