"""CLI command modules.

This package contains:
- group: Coloured click group with typo suggestions
- info: Show device state
- control: Toggle devices and run checks
"""
