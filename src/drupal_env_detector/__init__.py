"""
Detect properties of the current Acquia hosting environment.

The module-level functions build a fresh detector over ``os.environ`` on each
call, for code that just wants to ask "is this prod?" without wiring anything.
Use ``AcquiaEnvironmentDetector`` directly to inject an environment source or
site settings.
"""

from typing import Optional

from drupal_env_detector.detector import AcquiaEnvironmentDetector, EnvironmentType
from drupal_env_detector.utils.environment import (
    EnvironmentSource,
    MappingEnvironment,
    OsEnvironment,
    load_local_env,
)
from drupal_env_detector.utils.site_settings import (
    SiteSettings,
    SiteSettingsError,
    load_site_settings,
)

__all__ = [
    "AcquiaEnvironmentDetector",
    "EnvironmentType",
    "EnvironmentSource",
    "MappingEnvironment",
    "OsEnvironment",
    "SiteSettings",
    "SiteSettingsError",
    "load_local_env",
    "load_site_settings",
    "is_ah_env",
    "is_local_env",
    "is_acsf_env",
    "is_ah_prod_env",
    "is_ah_stage_env",
    "is_ah_dev_env",
    "is_ah_ode_env",
    "is_ah_ide_env",
    "is_ah_devcloud",
    "get_ah_group",
    "get_ah_env",
    "get_ah_realm",
    "get_ah_non_production",
    "get_ah_application_uuid",
    "get_ah_files_root",
    "get_acsf_db_name",
    "get_site_name",
]


def _detector(site_settings: Optional[SiteSettings] = None) -> AcquiaEnvironmentDetector:
    return AcquiaEnvironmentDetector(OsEnvironment(), site_settings=site_settings)


def is_ah_env() -> bool:
    return _detector().is_ah_env()


def is_local_env() -> bool:
    return _detector().is_local_env()


def is_acsf_env(ah_group: Optional[str] = None, ah_env: Optional[str] = None) -> bool:
    return _detector().is_acsf_env(ah_group, ah_env)


def is_ah_prod_env(ah_env: Optional[str] = None) -> bool:
    return _detector().is_ah_prod_env(ah_env)


def is_ah_stage_env(ah_env: Optional[str] = None) -> bool:
    return _detector().is_ah_stage_env(ah_env)


def is_ah_dev_env(ah_env: Optional[str] = None) -> bool:
    return _detector().is_ah_dev_env(ah_env)


def is_ah_ode_env(ah_env: Optional[str] = None) -> bool:
    return _detector().is_ah_ode_env(ah_env)


def is_ah_ide_env(ah_env: Optional[str] = None) -> bool:
    return _detector().is_ah_ide_env(ah_env)


def is_ah_devcloud() -> bool:
    return _detector().is_ah_devcloud()


def get_ah_group() -> str:
    return _detector().get_ah_group()


def get_ah_env() -> str:
    return _detector().get_ah_env()


def get_ah_realm() -> str:
    return _detector().get_ah_realm()


def get_ah_non_production() -> str:
    return _detector().get_ah_non_production()


def get_ah_application_uuid() -> str:
    return _detector().get_ah_application_uuid()


def get_ah_files_root() -> str:
    return _detector().get_ah_files_root()


def get_acsf_db_name(site_settings: Optional[SiteSettings] = None) -> Optional[str]:
    return _detector(site_settings).get_acsf_db_name()


def get_site_name(site_path: str, site_settings: Optional[SiteSettings] = None) -> Optional[str]:
    return _detector(site_settings).get_site_name(site_path)
