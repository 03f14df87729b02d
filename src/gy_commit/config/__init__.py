"""
Configuration and credentials for gy_commit.

:mod:`gy_commit.config.loader` persists the validated API key in
``~/.gy_config.json``; :mod:`gy_commit.config.credentials` decides
which key to use for a run.
"""

from .credentials import CredentialProvider  # noqa: F401
from .loader import Config, ConfigError, ConfigStore  # noqa: F401
