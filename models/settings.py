"""Settings model for Spirit.

Settings are built from one or more ``spirit.toml`` files and are read-only
for the rest of the run. Per-device entries override the global colors.
"""

from dataclasses import dataclass, field, fields, replace

from core.errors import ConfigError
from models.color import Color, resolve_color

DEFAULT_SUCCESS_COLOR = '#00ff00'
DEFAULT_FAIL_COLOR = '#ff0000'

_COLOR_KEYS = ('default', 'success', 'fail')
_DEVICE_KEYS = ('name', 'color', 'success', 'fail')


@dataclass(frozen=True)
class DeviceSetting:
    """Per-device overrides. Only ``name`` is required."""
    name: str
    color: str | None = None
    success: str | None = None
    fail: str | None = None

    @classmethod
    def from_dict(cls, data, source=None) -> 'DeviceSetting':
        """Build a DeviceSetting from a config entry.

        An entry is either a table with a ``name`` key or a bare device name.
        """
        if isinstance(data, str):
            return cls(name=data)
        if not isinstance(data, dict):
            raise ConfigError(f"device entries must be tables or names, got {type(data).__name__}", source)

        unknown = sorted(set(data) - set(_DEVICE_KEYS))
        if unknown:
            raise ConfigError(f"unknown device setting(s): {', '.join(unknown)}", source)

        name = data.get('name')
        if not isinstance(name, str) or not name:
            raise ConfigError("device entry is missing a 'name'", source)

        for key in ('color', 'success', 'fail'):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"device '{name}': '{key}' must be a string", source)

        return cls(name=name, color=data.get('color'),
                   success=data.get('success'), fail=data.get('fail'))


@dataclass(frozen=True)
class Settings:
    """Global settings plus the list of configured devices."""
    default: str | None = None
    success: str | None = None
    fail: str | None = None
    devices: tuple[DeviceSetting, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict, source=None) -> 'Settings':
        """Validate a parsed config document and build Settings from it.

        Args:
            data: Parsed TOML document
            source: Path the document came from (used in error messages)

        Raises:
            ConfigError: If a key has the wrong type
        """
        values = {}
        for key in _COLOR_KEYS:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"'{key}' must be a string", source)
            values[key] = value

        devices = data.get('devices', [])
        if not isinstance(devices, list):
            raise ConfigError("'devices' must be an array", source)

        return cls(devices=tuple(DeviceSetting.from_dict(d, source) for d in devices), **values)

    def merged(self, other: 'Settings') -> 'Settings':
        """Return new Settings with ``other`` laid over this one.

        Fields set in ``other`` win. Device entries are matched by name and
        ``other``'s entry replaces ours.
        """
        overrides = {
            f.name: getattr(other, f.name)
            for f in fields(self)
            if f.name != 'devices' and getattr(other, f.name) is not None
        }
        by_name = {d.name: d for d in self.devices}
        by_name.update({d.name: d for d in other.devices})
        return replace(self, devices=tuple(by_name.values()), **overrides)

    def device_settings(self) -> dict[str, DeviceSetting]:
        """Map device name to its settings (last entry for a name wins)."""
        return {d.name: d for d in self.devices}

    def device_names(self) -> set[str]:
        return {d.name for d in self.devices}

    def _device(self, name: str) -> DeviceSetting | None:
        return self.device_settings().get(name)

    def toggle_color(self, name: str, explicit: str | None = None) -> Color | None:
        """Color for `toggle`: explicit > device color > global default."""
        device = self._device(name)
        return resolve_color(explicit, device.color if device else None, self.default)

    def success_color(self, name: str, explicit: str | None = None) -> Color:
        """Color for a passing `check`."""
        device = self._device(name)
        return resolve_color(explicit, device.success if device else None,
                             self.success if self.success is not None else DEFAULT_SUCCESS_COLOR)

    def fail_color(self, name: str, explicit: str | None = None) -> Color:
        """Color for a failing `check`."""
        device = self._device(name)
        return resolve_color(explicit, device.fail if device else None,
                             self.fail if self.fail is not None else DEFAULT_FAIL_COLOR)
