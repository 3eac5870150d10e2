"""
Site settings supplied by the hosting platform.

On Site Factory the platform exposes per-site settings (notably the site's
database name) to the application. ``SiteSettings`` wraps that data so it can
be handed to the detector explicitly.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from drupal_env_detector.constants import ACSF_DB_NAME_KEY
from drupal_env_detector.logger import setup_logger

logger = setup_logger(__name__)


class SiteSettingsError(ValueError):
    """Raised when a site settings file cannot be read or has the wrong shape."""


@dataclass(frozen=True)
class SiteSettings:
    conf: Mapping[str, Any] = field(default_factory=dict)

    @property
    def acsf_db_name(self) -> Optional[str]:
        return self.conf.get(ACSF_DB_NAME_KEY)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SiteSettings":
        """
        Build settings from a mapping shaped like ``{"conf": {...}}``.

        Raises:
            SiteSettingsError: If ``data`` or its ``conf`` entry is not a mapping
        """
        if not isinstance(data, Mapping):
            raise SiteSettingsError(
                f"Site settings must be a mapping, got {type(data).__name__}"
            )
        conf = data.get("conf", {})
        if conf is None:
            conf = {}
        if not isinstance(conf, Mapping):
            raise SiteSettingsError(
                f"Site settings 'conf' must be a mapping, got {type(conf).__name__}"
            )
        return cls(conf=dict(conf))


def load_site_settings(path: Union[str, Path]) -> Optional[SiteSettings]:
    """
    Load site settings from a YAML or JSON file.

    Args:
        path: Location of the settings file

    Returns:
        SiteSettings, or None if the file does not exist

    Raises:
        SiteSettingsError: If the file cannot be read or parsed
    """
    if not os.path.exists(path):
        logger.debug(f"No site settings file at {path}")
        return None

    try:
        with open(path, "r") as file:
            data = yaml.safe_load(file)
    except yaml.YAMLError as e:
        logger.warning(f"Could not parse site settings {path}: {e}")
        raise SiteSettingsError(f"Could not parse site settings {path}: {e}") from e
    except OSError as e:
        logger.warning(f"Could not read site settings {path}: {e}")
        raise SiteSettingsError(f"Could not read site settings {path}: {e}") from e

    if data is None:
        data = {}
    return SiteSettings.from_mapping(data)
