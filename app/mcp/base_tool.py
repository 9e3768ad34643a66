"""
MCP Base Tool Interface

Provides base functionality for all todo tools including:
- Username validation
- Error handling
- Logging
"""

from typing import Any, Dict, Optional
from abc import ABC, abstractmethod
import logging

from app.services.todo_store import TodoStore

logger = logging.getLogger(__name__)


class MCPToolError(Exception):
    """Base exception for MCP tool errors"""
    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class BaseMCPTool(ABC):
    """
    Base class for all todo tools

    Provides common functionality:
    - Username validation
    - Store access
    - Audit logging
    """

    def __init__(self, store: TodoStore):
        self.store = store

    def validate_username(self, username: Any) -> None:
        """
        Validate that username is provided and non-empty

        Args:
            username: The user name the todos belong to

        Raises:
            MCPToolError: If username is invalid
        """
        if not username or not isinstance(username, str):
            logger.error("MCP tool called without valid username")
            raise MCPToolError(
                code="VALIDATION_ERROR",
                message="Invalid or missing username",
                details={"field": "username"}
            )

    def log_tool_invocation(self, tool_name: str, username: str, params: Dict[str, Any]) -> None:
        """
        Log MCP tool invocation for audit trail

        Args:
            tool_name: Name of the tool being invoked
            username: User the call acts on
            params: Tool parameters
        """
        logger.info(
            f"MCP Tool Invocation: {tool_name} | User: {username} | Params: {params}"
        )

    @abstractmethod
    async def execute(self, **kwargs) -> Dict[str, Any]:
        """
        Execute the tool logic

        Must be implemented by subclasses

        Args:
            **kwargs: Tool-specific parameters (must include username)

        Returns:
            Tool execution result
        """


def create_error_response(error: MCPToolError) -> Dict[str, Any]:
    """
    Create a standardized error response

    Args:
        error: The MCPToolError to convert

    Returns:
        Standardized error response dictionary
    """
    return {
        "success": False,
        "error": {
            "code": error.code,
            "message": error.message,
            "details": error.details
        }
    }


def create_success_response(data: Any, message: Optional[str] = None) -> Dict[str, Any]:
    """
    Create a standardized success response

    Args:
        data: The response data
        message: Optional success message

    Returns:
        Standardized success response dictionary
    """
    response = {
        "success": True,
        "data": data
    }

    if message:
        response["message"] = message

    return response
