"""Site configuration for mdstatic.

The configuration is a single immutable value created once at startup and
handed to every component that needs it. Values come from three layers,
later layers winning:

1. Built-in defaults (``DEFAULT_CONFIG``).
2. An optional ``static.yaml`` file in the project directory.
3. Explicit overrides, usually CLI options.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "static.yaml"


class ConfigError(ValueError):
    """A configuration value cannot be used."""


DEFAULT_CONFIG: dict[str, Any] = {
    "site_name": "Static HTML Site",
    "host": "0.0.0.0",
    "port": 8000,
    "root": "./",
    "output": "output/",
    "css_url": "static.css",
}


@dataclass(frozen=True)
class Configuration:
    """Settings shared by every part of the generator.

    Attributes:
        site_name: Name shown in the page header and title.
        host: Address the preview server binds to.
        port: Port the preview server binds to.
        root: Directory holding the Markdown sources and ``static.css``.
        output: Directory the build writes into.
        css_url: Stylesheet URL linked from every page.
    """

    site_name: str = DEFAULT_CONFIG["site_name"]
    host: str = DEFAULT_CONFIG["host"]
    port: int = DEFAULT_CONFIG["port"]
    root: str = DEFAULT_CONFIG["root"]
    output: str = DEFAULT_CONFIG["output"]
    css_url: str = DEFAULT_CONFIG["css_url"]

    @property
    def url(self) -> str:
        return f"{self.host}:{self.port}"


def load_config(config_path: Path) -> dict[str, Any]:
    """Load configuration values from a YAML file.

    Args:
        config_path: Path to the YAML file.

    Returns:
        Dictionary containing configuration values, with defaults applied.
    """
    config = DEFAULT_CONFIG.copy()
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                config.update(loaded)
    return config


def configure(config_path: Path | None = None, **overrides: Any) -> Configuration:
    """Create the process configuration.

    Args:
        config_path: YAML file to read. Defaults to ``static.yaml`` in the
            current directory.
        **overrides: Values that take precedence over the file. ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        The immutable Configuration.
    """
    path = config_path if config_path is not None else Path.cwd() / CONFIG_FILENAME
    values = load_config(path)
    values.update({key: value for key, value in overrides.items() if value is not None})

    known = {f.name for f in fields(Configuration)}
    values = {key: value for key, value in values.items() if key in known}
    try:
        values["port"] = int(values["port"])
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid port: {values['port']!r}") from None
    return Configuration(**values)
