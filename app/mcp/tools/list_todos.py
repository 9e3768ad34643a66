"""
List Todos MCP Tool

Returns a user's todos together with the indices used to delete them.
"""

from typing import Dict, Any

from app.mcp.base_tool import BaseMCPTool, MCPToolError, create_success_response
from app.services.todo_store import TodoStore


class ListTodosTool(BaseMCPTool):
    """MCP Tool for listing todos"""

    async def execute(self, username: str, **kwargs) -> Dict[str, Any]:
        """
        List the user's todos in the order they were added

        Args:
            username: Owner of the list

        Returns:
            Todos with their current indices and a count
        """
        self.log_tool_invocation("list_todos", username, {})

        self.validate_username(username)

        try:
            todos = self.store.list(username)
        except Exception as e:
            raise MCPToolError(
                code="INTERNAL_ERROR",
                message="Failed to list todos",
                details={"error": str(e)}
            )

        return create_success_response(
            data={
                "todos": [{"index": idx, "todo": todo} for idx, todo in enumerate(todos)],
                "count": len(todos)
            }
        )


def register_list_todos_tool(mcp_server, store: TodoStore):
    """Register list_todos tool with MCP server"""
    from app.mcp.server import MCPTool

    tool = MCPTool(
        name="list_todos",
        description="List the user's todos with their indices",
        parameters={
            "type": "object",
            "properties": {
                "username": {"type": "string", "description": "The name of the user"}
            },
            "required": ["username"]
        },
        handler=lambda **kwargs: ListTodosTool(store).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
