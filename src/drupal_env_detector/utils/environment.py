"""
Environment variable access for hosting detection.

Reads go through an ``EnvironmentSource`` so callers and tests can supply a
fixed set of values instead of touching the real process environment.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

from drupal_env_detector.logger import setup_logger

logger = setup_logger(__name__)


class EnvironmentSource(ABC):
    """Read-only view over a set of environment variables."""

    @abstractmethod
    def get(self, name: str) -> str:
        """
        Read a variable.

        Args:
            name: Variable name, e.g. AH_SITE_ENVIRONMENT

        Returns:
            str: The raw value, or an empty string when the variable is unset
        """
        pass


class OsEnvironment(EnvironmentSource):
    """Reads straight from ``os.environ`` on every call."""

    def get(self, name: str) -> str:
        return os.environ.get(name, "")

    def __repr__(self) -> str:
        return "OsEnvironment()"


class MappingEnvironment(EnvironmentSource):
    """Reads from a fixed mapping. Missing keys and ``None`` values read as ""."""

    def __init__(self, values: Optional[Mapping[str, Optional[str]]] = None):
        self._values = dict(values or {})

    def get(self, name: str) -> str:
        value = self._values.get(name)
        return "" if value is None else str(value)

    def __repr__(self) -> str:
        return f"MappingEnvironment({self._values!r})"


def load_local_env(env_file: Optional[Union[str, Path]] = None) -> bool:
    """
    Load a .env file into the process environment for local development.

    Variables that are already set are left untouched, so values provided by
    the hosting platform always win.

    Args:
        env_file: Path to the .env file. Defaults to .env in the working directory.

    Returns:
        bool: True if a file was found and loaded, False otherwise
    """
    if env_file is None:
        env_file = os.path.join(os.getcwd(), ".env")
    if not os.path.exists(env_file):
        logger.debug(f"No .env file at {env_file}")
        return False

    load_dotenv(env_file, override=False)
    logger.info(f"Loaded local environment from {env_file}")
    return True
