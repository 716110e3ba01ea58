"""
Tests for GoveeClient request handling and payload shapes.

The HTTP session is replaced with a mock so no network calls are made.
"""

import pytest
import requests
from unittest.mock import MagicMock, patch
from core.client import GoveeClient, DEFAULT_API_URL
from core.errors import GoveeApiError
from models.color import Color
from models.device import Device


def make_response(payload=None, status=200, text=''):
    response = MagicMock()
    response.ok = 200 <= status < 300
    response.status_code = status
    response.text = text
    response.reason = 'Reason'
    if payload is None:
        response.json.side_effect = ValueError('no json')
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def client():
    client = GoveeClient('secret-key')
    client.session = MagicMock()
    return client


@pytest.fixture
def device():
    return Device(id='AA:01', model='H6159', name='Desk lamp')


class TestInit:
    """Test session setup."""

    def test_sets_api_key_header(self):
        client = GoveeClient('secret-key')
        assert client.session.headers['Govee-API-Key'] == 'secret-key'
        assert client.api_url == DEFAULT_API_URL

    def test_strips_trailing_slash(self):
        assert GoveeClient('k', api_url='http://localhost:8000/').api_url == 'http://localhost:8000'


class TestDevices:
    """Test device listing."""

    def test_parses_devices(self, client):
        client.session.request.return_value = make_response({
            'code': 200,
            'message': 'Success',
            'data': {'devices': [
                {'device': 'AA:01', 'model': 'H6159', 'deviceName': 'Desk lamp',
                 'controllable': True, 'retrievable': True, 'supportCmds': ['turn', 'color']},
            ]},
        })

        devices = client.devices()

        assert devices == [Device(id='AA:01', model='H6159', name='Desk lamp',
                                  supported_commands=('turn', 'color'))]
        method, url = client.session.request.call_args[0]
        assert method == 'GET'
        assert url == f'{DEFAULT_API_URL}/v1/devices'

    def test_no_devices(self, client):
        client.session.request.return_value = make_response({'code': 200, 'data': {}})
        assert client.devices() == []


class TestState:
    """Test state queries."""

    def test_parses_properties(self, client, device):
        client.session.request.return_value = make_response({
            'code': 200,
            'data': {
                'device': 'AA:01',
                'model': 'H6159',
                'properties': [
                    {'online': 'true'},
                    {'powerState': 'on'},
                    {'brightness': 80},
                    {'color': {'r': 255, 'g': 136, 'b': 0}},
                ],
            },
        })

        state = client.state(device)

        assert state.name == 'Desk lamp'
        assert state.online is True
        assert state.power_state == 'on'
        assert state.brightness == 80
        assert state.color == Color(255, 136, 0)
        kwargs = client.session.request.call_args[1]
        assert kwargs['params'] == {'device': 'AA:01', 'model': 'H6159'}


class TestControl:
    """Test control payloads."""

    def test_turn_on(self, client, device):
        client.session.request.return_value = make_response({'code': 200, 'message': 'Success'})
        client.turn(device, True)

        method, url = client.session.request.call_args[0]
        assert method == 'PUT'
        assert url.endswith('/v1/devices/control')
        assert client.session.request.call_args[1]['json'] == {
            'device': 'AA:01', 'model': 'H6159', 'cmd': {'name': 'turn', 'value': 'on'},
        }

    def test_turn_off(self, client, device):
        client.session.request.return_value = make_response({'code': 200})
        client.turn(device, False)
        assert client.session.request.call_args[1]['json']['cmd'] == {'name': 'turn', 'value': 'off'}

    def test_color(self, client, device):
        client.session.request.return_value = make_response({'code': 200})
        client.color(device, Color(1, 2, 3))
        assert client.session.request.call_args[1]['json']['cmd'] == {
            'name': 'color', 'value': {'r': 1, 'g': 2, 'b': 3},
        }


class TestErrors:
    """Every failure surfaces as GoveeApiError."""

    def test_http_error_uses_vendor_message(self, client):
        client.session.request.return_value = make_response(
            {'code': 401, 'message': 'Invalid API-Key'}, status=401)
        with pytest.raises(GoveeApiError, match='Invalid API-Key') as exc:
            client.devices()
        assert exc.value.status_code == 401

    def test_http_error_without_json(self, client):
        client.session.request.return_value = make_response(status=500, text='Server Error')
        with pytest.raises(GoveeApiError, match='Server Error'):
            client.devices()

    def test_error_code_in_body(self, client, device):
        client.session.request.return_value = make_response({'code': 400, 'message': 'Unsupported Cmd'})
        with pytest.raises(GoveeApiError, match='Unsupported Cmd') as exc:
            client.turn(device, True)
        assert exc.value.status_code == 400

    def test_transport_error(self, client):
        client.session.request.side_effect = requests.exceptions.ConnectionError('boom')
        with pytest.raises(GoveeApiError, match='boom'):
            client.devices()

    def test_non_json_success(self, client):
        client.session.request.return_value = make_response(status=200)
        with pytest.raises(GoveeApiError, match='not a JSON object'):
            client.devices()


class TestVerbose:
    """Verbose mode echoes requests to stderr."""

    @patch('core.client.click.echo')
    def test_echoes_request(self, mock_echo):
        client = GoveeClient('k', verbose=True)
        client.session = MagicMock()
        client.session.request.return_value = make_response({'code': 200, 'data': {'devices': []}})

        client.devices()

        mock_echo.assert_called_once_with(f'GET {DEFAULT_API_URL}/v1/devices', err=True)
