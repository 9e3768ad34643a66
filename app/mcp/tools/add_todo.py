"""
Add Todo MCP Tool

Appends a todo to the end of a user's list.
"""

from typing import Dict, Any

from app.mcp.base_tool import BaseMCPTool, MCPToolError, create_success_response
from app.services.todo_store import TodoStore


class AddTodoTool(BaseMCPTool):
    """MCP Tool for adding todos"""

    async def execute(self, username: str, todo: str, **kwargs) -> Dict[str, Any]:
        """
        Add a todo to the user's list

        Args:
            username: Owner of the list
            todo: Text of the todo, stored verbatim

        Returns:
            The recorded todo and its position in the list
        """
        self.log_tool_invocation("add_todo", username, {"todo": todo})

        self.validate_username(username)

        if not isinstance(todo, str):
            raise MCPToolError(
                code="VALIDATION_ERROR",
                message="Todo must be a string",
                details={"field": "todo"}
            )

        try:
            index = self.store.append(username, todo)
        except Exception as e:
            raise MCPToolError(
                code="INTERNAL_ERROR",
                message="Failed to add todo",
                details={"error": str(e)}
            )

        return create_success_response(
            data={"todo": todo, "index": index},
            message=f"Todo '{todo}' added for {username}"
        )


def register_add_todo_tool(mcp_server, store: TodoStore):
    """Register add_todo tool with MCP server"""
    from app.mcp.server import MCPTool

    tool = MCPTool(
        name="add_todo",
        description="Add a todo to the end of the user's list",
        parameters={
            "type": "object",
            "properties": {
                "username": {"type": "string", "description": "The name of the user"},
                "todo": {"type": "string", "description": "The todo to add to the list"}
            },
            "required": ["username", "todo"]
        },
        handler=lambda **kwargs: AddTodoTool(store).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
