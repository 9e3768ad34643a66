"""
Delete Todo MCP Tool

Removes a todo by index. Later todos move down one position, so agents
should list again before deleting another one.
"""

from typing import Dict, Any

from app.mcp.base_tool import BaseMCPTool, MCPToolError, create_success_response
from app.services.todo_store import TodoStore


class DeleteTodoTool(BaseMCPTool):
    """MCP Tool for deleting todos"""

    async def execute(self, username: str, todo_idx: int, **kwargs) -> Dict[str, Any]:
        """
        Delete the todo at ``todo_idx``

        Args:
            username: Owner of the list
            todo_idx: 0-based index of the todo to delete

        Returns:
            Whether a todo was removed
        """
        self.log_tool_invocation("delete_todo", username, {"todo_idx": todo_idx})

        self.validate_username(username)

        # bool is an int subclass
        if isinstance(todo_idx, bool) or not isinstance(todo_idx, int):
            raise MCPToolError(
                code="VALIDATION_ERROR",
                message="todo_idx must be an integer",
                details={"field": "todo_idx"}
            )

        try:
            deleted = self.store.delete(username, todo_idx)
        except Exception as e:
            raise MCPToolError(
                code="INTERNAL_ERROR",
                message="Failed to delete todo",
                details={"error": str(e)}
            )

        if deleted:
            message = f"Todo {todo_idx} deleted for {username}"
        else:
            message = f"No todo at index {todo_idx} for {username}"

        return create_success_response(
            data={"todo_idx": todo_idx, "deleted": deleted},
            message=message
        )


def register_delete_todo_tool(mcp_server, store: TodoStore):
    """Register delete_todo tool with MCP server"""
    from app.mcp.server import MCPTool

    tool = MCPTool(
        name="delete_todo",
        description="Delete a todo from the user's list by index",
        parameters={
            "type": "object",
            "properties": {
                "username": {"type": "string", "description": "The name of the user"},
                "todo_idx": {"type": "integer", "description": "Index of the todo to delete"}
            },
            "required": ["username", "todo_idx"]
        },
        handler=lambda **kwargs: DeleteTodoTool(store).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
