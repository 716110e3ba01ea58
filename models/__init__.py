"""Data models and utility functions.

This package contains:
- color: Colour parsing and precedence resolution
- device: Device and DeviceState
- settings: Settings and per-device overrides
- types: Govee API payload shapes
- utils: Device selection and fuzzy matching
"""
