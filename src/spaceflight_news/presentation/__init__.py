"""
Presentation Layer - Interfaces to the outside world.

Contains:
- mcp_server: MCP stdio server exposing the article tools
"""
