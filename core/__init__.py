"""Core functionality for Spirit.

This package contains:
- client: GoveeClient class for API interaction
- config: spirit.toml discovery and loading
- context: Per-run AppContext shared by subcommands
- errors: Fatal error types
"""
