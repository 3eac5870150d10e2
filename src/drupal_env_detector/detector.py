from enum import Enum
from pathlib import Path
from typing import Optional

from drupal_env_detector import constants
from drupal_env_detector.logger import setup_logger
from drupal_env_detector.utils.environment import EnvironmentSource, OsEnvironment
from drupal_env_detector.utils.site_settings import SiteSettings

logger = setup_logger(__name__)


class EnvironmentType(Enum):
    """Kinds of hosting environment a site can run in."""

    PROD = "prod"
    STAGE = "stage"
    DEV = "dev"
    ODE = "ode"
    IDE = "ide"
    LOCAL = "local"
    UNKNOWN = "unknown"

    @classmethod
    def from_label(cls, label: str) -> "EnvironmentType":
        """
        Parse an environment type from its label, ignoring case and whitespace.

        Raises:
            ValueError: If the label is not a known environment type
        """
        normalized = label.lower().strip()
        for member in cls:
            if member.value == normalized:
                return member
        supported = ", ".join(member.value for member in cls)
        raise ValueError(
            f"Unknown environment type '{label}'. Supported types: {supported}"
        )


class AcquiaEnvironmentDetector:
    """
    Detect properties of the current Acquia hosting environment.

    Everything is derived from a handful of AH_* environment variables and,
    for Site Factory detection, the presence of a marker file on the shared
    files mount. Nothing is cached: each call reads its inputs again.

    Methods that accept ``ah_group`` / ``ah_env`` use the value from the
    environment when the argument is None. An explicit empty string is used
    as given.
    """

    def __init__(
        self,
        environment: Optional[EnvironmentSource] = None,
        site_settings: Optional[SiteSettings] = None,
        files_root: str = constants.AH_FILES_ROOT,
    ):
        self.environment = environment if environment is not None else OsEnvironment()
        self.site_settings = site_settings
        self.files_root = files_root

    # Raw values

    def get_ah_group(self) -> str:
        """Site group (usually a customer name)."""
        return self.environment.get(constants.AH_SITE_GROUP)

    def get_ah_env(self) -> str:
        """Environment name (e.g. dev, stage, prod)."""
        return self.environment.get(constants.AH_SITE_ENVIRONMENT)

    def get_ah_realm(self) -> str:
        """Realm name (e.g. prod, gardens)."""
        return self.environment.get(constants.AH_REALM)

    def get_ah_non_production(self) -> str:
        return self.environment.get(constants.AH_NON_PRODUCTION)

    def get_ah_application_uuid(self) -> str:
        return self.environment.get(constants.AH_APPLICATION_UUID)

    # Hosting

    def is_ah_env(self) -> bool:
        return bool(self.get_ah_env())

    def is_local_env(self) -> bool:
        """If this isn't a Cloud environment, assume it's local."""
        return not self.is_ah_env()

    def is_ah_devcloud(self) -> bool:
        """The devcloud realm includes Acquia Cloud Professional (ACP)."""
        return self.get_ah_realm() == constants.DEVCLOUD_REALM

    def is_acsf_env(
        self, ah_group: Optional[str] = None, ah_env: Optional[str] = None
    ) -> bool:
        """
        Check if this is a Site Factory (ACSF) environment.

        Site Factory drops a sites.json file in the private files directory of
        every environment it manages, so its presence is the signal.

        Args:
            ah_group: Hosting site group (e.g. my_subscription)
            ah_env: Hosting environment name (e.g. 01dev)

        Returns:
            bool: True if the marker file exists, False otherwise. Errors while
            checking the file are treated as the file not existing.
        """
        if ah_group is None:
            ah_group = self.get_ah_group()
        if ah_env is None:
            ah_env = self.get_ah_env()

        if not ah_group or not ah_env:
            return False

        marker = Path(self._files_root_for(ah_group, ah_env)) / constants.ACSF_SITES_JSON
        try:
            marker.stat()
        except (FileNotFoundError, NotADirectoryError):
            return False
        except (OSError, ValueError) as e:
            logger.debug(f"Could not check ACSF marker {marker}: {e}")
            return False
        return True

    # Environment name classification

    def is_ah_prod_env(self, ah_env: Optional[str] = None) -> bool:
        if ah_env is None:
            ah_env = self.get_ah_env()
        return ah_env == constants.PROD_ENV_NAME or bool(
            constants.LIVE_ENV_PATTERN.fullmatch(ah_env)
        )

    def is_ah_stage_env(self, ah_env: Optional[str] = None) -> bool:
        if ah_env is None:
            ah_env = self.get_ah_env()
        return (
            bool(constants.TEST_ENV_PATTERN.fullmatch(ah_env))
            or ah_env in constants.STAGE_ENV_NAMES
        )

    def is_ah_dev_env(self, ah_env: Optional[str] = None) -> bool:
        if ah_env is None:
            ah_env = self.get_ah_env()
        return bool(constants.DEV_ENV_PATTERN.fullmatch(ah_env))

    def is_ah_ode_env(self, ah_env: Optional[str] = None) -> bool:
        if ah_env is None:
            ah_env = self.get_ah_env()
        return bool(constants.ODE_ENV_PATTERN.fullmatch(ah_env))

    def is_ah_ide_env(self, ah_env: Optional[str] = None) -> bool:
        if ah_env is None:
            ah_env = self.get_ah_env()
        return ah_env.lower() == constants.IDE_ENV_NAME

    def get_environment_type(self, ah_env: Optional[str] = None) -> EnvironmentType:
        """
        Classify an environment name.

        Args:
            ah_env: Environment name. Defaults to AH_SITE_ENVIRONMENT.

        Returns:
            EnvironmentType: LOCAL for an empty name, UNKNOWN if no rule matches
        """
        if ah_env is None:
            ah_env = self.get_ah_env()
        if not ah_env:
            return EnvironmentType.LOCAL

        checks = [
            (EnvironmentType.PROD, self.is_ah_prod_env),
            (EnvironmentType.STAGE, self.is_ah_stage_env),
            (EnvironmentType.DEV, self.is_ah_dev_env),
            (EnvironmentType.ODE, self.is_ah_ode_env),
            (EnvironmentType.IDE, self.is_ah_ide_env),
        ]
        for env_type, check in checks:
            if check(ah_env):
                return env_type

        logger.debug(f"Environment name '{ah_env}' matched no known type")
        return EnvironmentType.UNKNOWN

    # Derived names and paths

    def get_ah_files_root(self) -> str:
        """
        The path to the persistent file storage mount.

        It is a common base path for public and private files and is not tied
        to any particular site. The path is built even when the group or
        environment is empty, so check is_ah_env() before relying on it.
        """
        return self._files_root_for(self.get_ah_group(), self.get_ah_env())

    def get_acsf_db_name(self) -> Optional[str]:
        """
        Site Factory database name from the injected site settings.

        Returns:
            The database name, or None when there are no site settings or this
            is not a Site Factory environment
        """
        if self.site_settings is None or not self.is_acsf_env():
            return None
        return self.site_settings.acsf_db_name

    def get_site_name(self, site_path: str) -> Optional[str]:
        """
        Get a standardized site / db name.

        On Site Factory this is the ACSF db name. Elsewhere it is the site
        directory under docroot/sites.

        Args:
            site_path: Site directory path, e.g. sites/default

        Returns:
            The site name, or None on Site Factory without site settings
        """
        if self.is_acsf_env():
            return self.get_acsf_db_name()
        return site_path.removeprefix(constants.SITES_DIR_PREFIX)

    def describe(self) -> dict:
        """Snapshot of every raw value and classification, for logging."""
        return {
            "group": self.get_ah_group(),
            "environment": self.get_ah_env(),
            "realm": self.get_ah_realm(),
            "non_production": self.get_ah_non_production(),
            "application_uuid": self.get_ah_application_uuid(),
            "files_root": self.get_ah_files_root(),
            "environment_type": self.get_environment_type().value,
            "is_ah_env": self.is_ah_env(),
            "is_local_env": self.is_local_env(),
            "is_acsf_env": self.is_acsf_env(),
            "is_ah_devcloud": self.is_ah_devcloud(),
        }

    def _files_root_for(self, ah_group: str, ah_env: str) -> str:
        return f"{self.files_root}/{ah_group}.{ah_env}"
