"""GoveeClient class for the Govee developer API.

This module contains the client that handles all communication with the
Govee cloud API (v1 developer endpoints).
"""

import click
import requests

from core.errors import GoveeApiError
from models.color import Color
from models.device import Device, DeviceState
from models.types import ControlCommand, ControlRequest

DEFAULT_API_URL = 'https://developer-api.govee.com'
DEFAULT_TIMEOUT = 10


class GoveeClient:
    """Makes synchronous calls to the Govee developer API."""

    def __init__(self, api_key: str, api_url: str = DEFAULT_API_URL,
                 timeout: int = DEFAULT_TIMEOUT, verbose: bool = False):
        """Initialise GoveeClient.

        Args:
            api_key: Govee developer API key
            api_url: Base URL of the API (without the /v1 suffix)
            timeout: Per-request timeout in seconds
            verbose: If True, echo each request to stderr
        """
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.verbose = verbose
        self.session = requests.Session()
        self.session.headers.update({
            'Govee-API-Key': api_key,
            'Content-Type': 'application/json',
        })

    def _request(self, method: str, endpoint: str, params: dict | None = None,
                 data: dict | None = None):
        """Make a request and return the ``data`` member of the response.

        Raises:
            GoveeApiError: On transport failure, non-2xx status, or a vendor error code
        """
        url = f"{self.api_url}/v1{endpoint}"
        if self.verbose:
            click.echo(f"{method} {url}", err=True)

        try:
            response = self.session.request(method, url, params=params, json=data,
                                            timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise GoveeApiError(str(e)) from e

        try:
            result = response.json()
        except ValueError:
            result = None

        message = None
        if isinstance(result, dict):
            message = result.get('message') or result.get('msg')

        if not response.ok:
            raise GoveeApiError(message or response.text or response.reason, response.status_code)

        if not isinstance(result, dict):
            raise GoveeApiError("response was not a JSON object", response.status_code)

        # Govee reports some failures with HTTP 200 and an error code in the body
        code = result.get('code', 200)
        if code != 200:
            raise GoveeApiError(message or 'request failed', code)

        return result.get('data')

    def devices(self) -> list[Device]:
        """List all devices on the account."""
        data = self._request('GET', '/devices') or {}
        return [Device.from_api(d) for d in data.get('devices') or []]

    def state(self, device: Device) -> DeviceState:
        """Query the current state of a device."""
        data = self._request('GET', '/devices/state',
                             params={'device': device.id, 'model': device.model})
        return DeviceState.from_api(data or {}, device)

    def _control(self, device: Device, cmd: ControlCommand):
        body: ControlRequest = {'device': device.id, 'model': device.model, 'cmd': cmd}
        self._request('PUT', '/devices/control', data=body)

    def turn(self, device: Device, on: bool):
        """Switch a device on or off."""
        self._control(device, {'name': 'turn', 'value': 'on' if on else 'off'})

    def color(self, device: Device, color: Color):
        """Set a device's color."""
        self._control(device, {'name': 'color', 'value': color.to_api()})
