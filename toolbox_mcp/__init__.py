"""
Toolbox MCP server package.

A small stdio MCP server exposing a weather tool, a calculator tool,
two readable resources and two prompt templates.
"""
