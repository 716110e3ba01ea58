"""Per-run application context shared by all subcommands."""

from pathlib import Path

from core.client import DEFAULT_API_URL, GoveeClient
from core.config import load_settings
from core.errors import MissingKeyError
from models.device import Device
from models.settings import Settings
from models.utils import select_devices


class AppContext:
    """Holds the global CLI options and lazily builds settings and client.

    Settings and the API client are only created when a subcommand asks for
    them, so ``spirit info --help`` works without a key or config file.
    """

    def __init__(self, api_key: str | None = None, select_all: bool = False,
                 device_names: tuple[str, ...] = (), config_path: Path | None = None,
                 api_url: str = DEFAULT_API_URL, verbose: bool = False):
        self.api_key = api_key
        self.select_all = select_all
        self.device_names = tuple(device_names)
        self.config_path = config_path
        self.api_url = api_url
        self.verbose = verbose
        self._settings = None
        self._client = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            paths = [Path(self.config_path)] if self.config_path else None
            self._settings = load_settings(paths)
        return self._settings

    @property
    def client(self) -> GoveeClient:
        if self._client is None:
            if not self.api_key:
                raise MissingKeyError()
            self._client = GoveeClient(self.api_key, api_url=self.api_url, verbose=self.verbose)
        return self._client

    def devices(self) -> list[Device]:
        """Fetch the account's devices and apply the selection options."""
        settings = self.settings
        configured = () if self.select_all or self.device_names else settings.device_names()
        return select_devices(
            self.client.devices(),
            names=self.device_names,
            select_all=self.select_all,
            configured=configured,
        )
