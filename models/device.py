"""Device and device state models."""

from dataclasses import dataclass, field

from models.color import Color
from models.types import DeviceData, DeviceStateData


@dataclass(frozen=True)
class Device:
    """A light registered to the Govee account."""
    id: str
    model: str
    name: str
    controllable: bool = True
    retrievable: bool = True
    supported_commands: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, data: DeviceData) -> 'Device':
        return cls(
            id=data.get('device', ''),
            model=data.get('model', ''),
            name=data.get('deviceName', ''),
            controllable=bool(data.get('controllable', True)),
            retrievable=bool(data.get('retrievable', True)),
            supported_commands=tuple(data.get('supportCmds', [])),
        )


@dataclass(frozen=True)
class DeviceState:
    """Current state of a device as reported by the API."""
    id: str
    model: str
    name: str
    online: bool | None = None
    power_state: str | None = None
    brightness: int | None = None
    color: Color | None = None
    color_temperature: int | None = None

    @classmethod
    def from_api(cls, data: DeviceStateData, device: Device | None = None) -> 'DeviceState':
        """Build a DeviceState from the state endpoint payload.

        Args:
            data: The ``data`` member of the state response
            device: The queried device, used to fill in the name
        """
        props = {}
        for prop in data.get('properties', []):
            props.update(prop)

        online = props.get('online')
        # Some models report online as the string "true"/"false"
        if isinstance(online, str):
            online = online.lower() == 'true'

        color = props.get('color')
        return cls(
            id=data.get('device', device.id if device else ''),
            model=data.get('model', device.model if device else ''),
            name=data.get('name') or (device.name if device else ''),
            online=online,
            power_state=props.get('powerState'),
            brightness=props.get('brightness'),
            color=Color.from_api(color) if isinstance(color, dict) else None,
            color_temperature=props.get('colorTem') or props.get('colorTemInKelvin'),
        )
