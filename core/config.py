"""Configuration file loading.

This module handles:
- Locating spirit.toml (home directory, then current directory)
- Parsing and validating each file
- Overlaying the local file on the global one
"""

import tomllib
from pathlib import Path

from core.errors import ConfigError
from models.settings import Settings

CONFIG_FILENAME = 'spirit.toml'


def config_paths() -> list[Path]:
    """Return config file candidates, lowest precedence first.

    The home directory candidate is skipped when no home directory can be
    determined (no HOME and no passwd entry).
    """
    paths = []
    try:
        paths.append(Path.home() / CONFIG_FILENAME)
    except (RuntimeError, KeyError):
        pass
    paths.append(Path.cwd() / CONFIG_FILENAME)
    return paths


def read_config_file(path: Path) -> Settings:
    """Parse a single config file into Settings.

    Raises:
        ConfigError: If the file can't be read, isn't valid TOML, or has bad values
    """
    try:
        with open(path, 'rb') as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"could not read config file: {e.strerror or e}", path) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}", path) from e

    return Settings.from_dict(data, path)


def load_settings(paths: list[Path] | None = None) -> Settings:
    """Load settings from every existing config file.

    Files are applied in order so later files override earlier ones. If no
    file exists the result is an empty Settings.

    Args:
        paths: Files to read (defaults to config_paths())
    """
    if paths is None:
        paths = config_paths()

    settings = Settings()
    seen = set()
    for path in paths:
        # Running from the home directory makes both candidates the same file
        resolved = path.resolve()
        if resolved in seen or not path.is_file():
            continue
        seen.add(resolved)
        settings = settings.merged(read_config_file(path))

    return settings
