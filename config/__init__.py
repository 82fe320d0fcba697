"""Configuration package for the ElevenLabs MCP Server."""
