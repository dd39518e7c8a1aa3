from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from styles import DEFAULT_COLORS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "lyra" / "config.toml"
DEFAULT_POLL_INTERVAL = 1.0
DEFAULT_REQUEST_TIMEOUT = 3.0


class ConfigError(Exception):
    """Raised when the configuration file exists but cannot be used."""
    pass


@dataclass
class Config:
    """User configuration.

    Attributes:
        lms_ip: Host name or address of the media server
        lms_port: HTTP port of the media server
        poll_interval: Seconds between two polling ticks
        request_timeout: Seconds before a request is abandoned
        colors: Colour overrides, role name -> 256-colour index
    """
    lms_ip: str = "127.0.0.1"
    lms_port: int = 9000
    poll_interval: float = DEFAULT_POLL_INTERVAL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    colors: dict[str, int] = field(default_factory=dict)

    @property
    def server(self) -> str:
        return f"{self.lms_ip}:{self.lms_port}"

    def color(self, name: str) -> int:
        """Palette index for a UI role, falling back to the built-in default.

        Raises:
            KeyError: If ``name`` is not a known role.
        """
        if name not in DEFAULT_COLORS:
            raise KeyError(f"'{name}' is not a valid color role")
        return self.colors.get(name, DEFAULT_COLORS[name])

    def style(self, name: str) -> str:
        """Rich style string for a UI role."""
        return f"color({self.color(name)})"


def _parse_server(value: str) -> tuple[str, int]:
    host, sep, port = value.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ConfigError(f"Server must look like host:port, got {value!r}")
    return host, int(port)


def load_config(path: Path | None = None) -> Config:
    """Load configuration from TOML.

    Lookup order for the file is ``path``, ``$LYRA_CONFIG``, then
    ``~/.config/lyra/config.toml``. A missing file gives the defaults.
    ``$LYRA_SERVER`` (``host:port``) overrides the server address.

    Raises:
        ConfigError: If the file is unreadable, not TOML, or has bad values.
    """
    if path is None:
        env_path = os.environ.get("LYRA_CONFIG")
        path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    config = Config()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{path} is not valid TOML: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e
        _apply(config, data, path)
        logger.info(f"Loaded configuration from {path}")
    else:
        logger.info(f"No configuration file at {path}, using defaults")

    server = os.environ.get("LYRA_SERVER")
    if server:
        config.lms_ip, config.lms_port = _parse_server(server)

    return config


def _apply(config: Config, data: dict, path: Path) -> None:
    try:
        if "lms_ip" in data:
            config.lms_ip = str(data["lms_ip"])
        if "lms_port" in data:
            config.lms_port = int(data["lms_port"])
        if "poll_interval" in data:
            config.poll_interval = float(data["poll_interval"])
        if "request_timeout" in data:
            config.request_timeout = float(data["request_timeout"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in {path}: {e}") from e

    if config.poll_interval <= 0 or config.request_timeout <= 0:
        raise ConfigError(f"poll_interval and request_timeout must be positive in {path}")

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        raise ConfigError(f"[colors] in {path} must be a table")

    for name, value in colors.items():
        if name not in DEFAULT_COLORS:
            logger.warning(f"Ignoring unknown color role '{name}' in {path}")
            continue
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
            raise ConfigError(f"Color '{name}' in {path} must be an integer 0-255")
        config.colors[name] = value
