import pytest
from pathlib import Path

from drupal_env_detector import constants
from drupal_env_detector.detector import AcquiaEnvironmentDetector
from drupal_env_detector.utils.environment import MappingEnvironment
from drupal_env_detector.utils.site_settings import SiteSettings

AH_VARIABLES = [
    constants.AH_SITE_GROUP,
    constants.AH_SITE_ENVIRONMENT,
    constants.AH_REALM,
    constants.AH_NON_PRODUCTION,
    constants.AH_APPLICATION_UUID,
]


@pytest.fixture(autouse=True)
def clear_ah_environment(monkeypatch):
    """Make sure no AH_* variables leak in from the machine running the tests."""
    for name in AH_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def files_root(tmp_path) -> Path:
    """Stand-in for the /mnt/files mount."""
    root = tmp_path / "mnt" / "files"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def make_acsf_marker(files_root):
    """Create the Site Factory sites.json marker for a group/environment."""

    def _make(group: str, env: str) -> Path:
        marker = files_root / f"{group}.{env}" / constants.ACSF_SITES_JSON
        marker.parent.mkdir(parents=True, exist_ok=True)
        marker.write_text("{}")
        return marker

    return _make


@pytest.fixture
def make_detector(files_root):
    """Build a detector over a fixed set of variables and the temporary files root."""

    def _make(site_settings: SiteSettings = None, **values) -> AcquiaEnvironmentDetector:
        return AcquiaEnvironmentDetector(
            MappingEnvironment(values),
            site_settings=site_settings,
            files_root=str(files_root),
        )

    return _make


@pytest.fixture
def acsf_site_settings() -> SiteSettings:
    return SiteSettings.from_mapping({"conf": {"acsf_db_name": "acmedb"}})
