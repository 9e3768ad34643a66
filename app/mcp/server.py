"""
MCP Server Implementation

Registry of the tools agents can invoke against the todo store.
"""

from typing import Dict, Any, Callable
from dataclasses import dataclass
import logging

from app.services.todo_store import TodoStore

logger = logging.getLogger(__name__)


@dataclass
class MCPTool:
    """MCP Tool definition"""
    name: str
    description: str
    parameters: Dict[str, Any]
    handler: Callable


class MCPServer:
    """
    MCP Server for the todo list

    Provides tools that agents can invoke. Every tool call must name the
    user whose list it acts on.
    """

    def __init__(self):
        self.tools: Dict[str, MCPTool] = {}
        self.name = "todo-plugin-mcp-server"
        logger.info(f"Initializing MCP Server: {self.name}")

    def register_tool(self, tool: MCPTool):
        """Register a tool with the MCP server"""
        if tool.name in self.tools:
            logger.warning(f"Tool {tool.name} already registered, overwriting")

        self.tools[tool.name] = tool
        logger.info(f"Registered MCP tool: {tool.name}")

    def get_tool(self, name: str) -> MCPTool:
        """Get a registered tool by name"""
        if name not in self.tools:
            raise ValueError(f"Tool {name} not found. Available tools: {list(self.tools.keys())}")
        return self.tools[name]

    def list_tools(self) -> list[str]:
        """List all registered tool names"""
        return list(self.tools.keys())

    async def invoke_tool(self, tool_name: str, **kwargs) -> Dict[str, Any]:
        """
        Invoke a tool with parameters

        Args:
            tool_name: Name of the tool to invoke
            **kwargs: Tool parameters (must include username)

        Returns:
            Tool execution result

        Raises:
            ValueError: If tool not found or username missing
        """
        tool = self.get_tool(tool_name)

        if 'username' not in kwargs:
            raise ValueError("username is required for all MCP tool calls")

        logger.info(f"Invoking MCP tool: {tool_name} for user: {kwargs['username']}")

        try:
            result = await tool.handler(**kwargs)
            logger.info(f"Tool {tool_name} executed successfully")
            return result
        except Exception as e:
            logger.error(f"Tool {tool_name} failed: {str(e)}")
            raise

    def get_tool_schemas(self) -> Dict[str, Dict[str, Any]]:
        """Get JSON schemas for all registered tools"""
        return {
            name: {
                "name": tool.name,
                "description": tool.description,
                "parameters": tool.parameters
            }
            for name, tool in self.tools.items()
        }


def create_mcp_server(store: TodoStore) -> MCPServer:
    """Build a server with every todo tool bound to ``store``."""
    from app.mcp.tools.add_todo import register_add_todo_tool
    from app.mcp.tools.list_todos import register_list_todos_tool
    from app.mcp.tools.delete_todo import register_delete_todo_tool

    server = MCPServer()
    register_add_todo_tool(server, store)
    register_list_todos_tool(server, store)
    register_delete_todo_tool(server, store)
    return server
