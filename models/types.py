"""Type definitions for Govee API payloads.

This module provides TypedDict definitions for the JSON shapes exchanged with
the Govee developer API.
"""

from typing import Any, TypedDict


class DeviceData(TypedDict, total=False):
    """Device entry from GET /v1/devices."""
    device: str
    model: str
    deviceName: str
    controllable: bool
    retrievable: bool
    supportCmds: list[str]


class DeviceStateData(TypedDict, total=False):
    """Payload of GET /v1/devices/state.

    ``properties`` is a list of single-key dicts, e.g. ``{"powerState": "on"}``.
    """
    device: str
    model: str
    name: str
    properties: list[dict[str, Any]]


class ControlCommand(TypedDict):
    """The ``cmd`` member of a PUT /v1/devices/control body."""
    name: str
    value: Any


class ControlRequest(TypedDict):
    """Body of PUT /v1/devices/control."""
    device: str
    model: str
    cmd: ControlCommand
