"""
MCP (Model Context Protocol) Tools Package

Exposes the todo store operations as named tools that agents can invoke
without going through the REST routes.
"""
