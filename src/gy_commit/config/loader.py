"""
Configuration storage for gy_commit.

The tool keeps a single JSON file, ``~/.gy_config.json``, holding the
Anthropic API key once it has been validated::

    {
      "anthropic_api_key": "sk-ant-..."
    }

Loading is forgiving: a missing, unreadable or malformed file simply
means "no stored key" and the operator is prompted again. Saving raises
:class:`ConfigError`, which callers are expected to downgrade to a
warning.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)
# Attach a null handler so nothing is printed until the CLI configures
# logging. Records still propagate to the root logger once it has handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


CONFIG_FILENAME = ".gy_config.json"


class ConfigError(Exception):
    """Raised when the configuration file cannot be written."""

    pass


@dataclass
class Config:
    """The persisted settings record."""

    anthropic_api_key: str


def _get_config_path() -> Path:
    """Return the default per-user configuration file location."""
    return Path.home() / CONFIG_FILENAME


class ConfigStore:
    """Load/save access to the configuration file.

    Parameters
    ----------
    path : Path, optional
        Location of the JSON file. Defaults to ``~/.gy_config.json``.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else _get_config_path()

    def load(self) -> Optional[Config]:
        """Return the stored configuration, or ``None`` if there is none.

        A file that cannot be read or parsed, or whose key is not a
        string, is treated the same as a missing file.
        """
        if not self.path.exists():
            logger.debug("No configuration file at %s", self.path)
            return None

        try:
            data: Dict[str, Any] = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable configuration file %s: %s", self.path, exc)
            return None

        if not isinstance(data, dict):
            logger.warning("Ignoring configuration file %s: not a JSON object", self.path)
            return None

        api_key = data.get("anthropic_api_key")
        if not isinstance(api_key, str):
            logger.warning("Ignoring configuration file %s: 'anthropic_api_key' must be a string", self.path)
            return None

        logger.debug("Loaded configuration from: %s", self.path)
        return Config(anthropic_api_key=api_key)

    def save(self, config: Config) -> None:
        """Overwrite the configuration file with ``config``.

        Raises
        ------
        ConfigError
            If the file cannot be serialised or written.
        """
        try:
            content = json.dumps(asdict(config), indent=2)
            self.path.write_text(content, encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to save config: {exc}") from exc
        logger.debug("Saved configuration to: %s", self.path)
