"""Error types for Spirit.

Every error is a click.ClickException so that the CLI prints a single
``Error: <message>`` line to stderr and exits non-zero.
"""

import click


class SpiritError(click.ClickException):
    """Base class for all fatal Spirit errors."""


class ConfigError(SpiritError):
    """Config file could not be read, parsed or validated."""

    def __init__(self, message: str, path=None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class MissingKeyError(SpiritError):
    """No Govee API key was supplied."""

    def __init__(self):
        super().__init__("No Govee API key given. Use --key or set GOVEE_KEY.")


class NoDevicesMatchedError(SpiritError):
    """Device selection produced an empty list."""

    def __init__(self, message: str = "No devices matched"):
        super().__init__(message)


class GoveeApiError(SpiritError):
    """Govee API call failed (transport, HTTP status or vendor error code)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        if status_code is not None:
            message = f"Govee API error ({status_code}): {message}"
        else:
            message = f"Govee API error: {message}"
        super().__init__(message)


class ColorParseError(SpiritError):
    """A string could not be parsed as a hex color."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


class CommandError(SpiritError):
    """The command given to `check` could not be run."""
