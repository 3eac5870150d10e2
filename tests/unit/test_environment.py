import os
import pytest

from drupal_env_detector.utils.environment import (
    EnvironmentSource,
    MappingEnvironment,
    OsEnvironment,
    load_local_env,
)


class TestEnvironmentSources:
    """Test suite for the environment variable sources."""

    def test_base_source_is_abstract(self):
        """Test that the base source cannot be instantiated."""
        with pytest.raises(TypeError):
            EnvironmentSource()

    def test_os_environment_reads_live_values(self, monkeypatch):
        """Test that OsEnvironment sees changes to os.environ."""
        source = OsEnvironment()
        assert source.get("AH_SITE_ENVIRONMENT") == ""
        monkeypatch.setenv("AH_SITE_ENVIRONMENT", "prod")
        assert source.get("AH_SITE_ENVIRONMENT") == "prod"

    def test_mapping_environment(self):
        """Test that missing keys and None values read as empty strings."""
        source = MappingEnvironment({"AH_REALM": "devcloud", "AH_SITE_GROUP": None})
        assert source.get("AH_REALM") == "devcloud"
        assert source.get("AH_SITE_GROUP") == ""
        assert source.get("AH_SITE_ENVIRONMENT") == ""

    def test_mapping_environment_copies_values(self):
        """Test that later changes to the input mapping are not seen."""
        values = {"AH_SITE_ENVIRONMENT": "dev"}
        source = MappingEnvironment(values)
        values["AH_SITE_ENVIRONMENT"] = "prod"
        assert source.get("AH_SITE_ENVIRONMENT") == "dev"

    def test_empty_mapping_environment(self):
        assert MappingEnvironment().get("AH_SITE_GROUP") == ""


class TestLoadLocalEnv:
    """Test suite for loading a local .env file."""

    def test_missing_file(self, tmp_path):
        """Test that a missing .env file is skipped."""
        assert load_local_env(tmp_path / ".env") is False

    def test_loads_file(self, tmp_path, monkeypatch):
        """Test that variables from the .env file are loaded."""
        env_file = tmp_path / ".env"
        env_file.write_text("AH_SITE_GROUP=acme\nAH_SITE_ENVIRONMENT=ide\n")
        assert load_local_env(env_file) is True
        assert os.environ["AH_SITE_GROUP"] == "acme"
        assert OsEnvironment().get("AH_SITE_ENVIRONMENT") == "ide"

    def test_does_not_override_existing(self, tmp_path, monkeypatch):
        """Test that platform-provided values win over the .env file."""
        monkeypatch.setenv("AH_SITE_ENVIRONMENT", "prod")
        env_file = tmp_path / ".env"
        env_file.write_text("AH_SITE_ENVIRONMENT=ide\n")
        load_local_env(env_file)
        assert os.environ["AH_SITE_ENVIRONMENT"] == "prod"

    def test_defaults_to_working_directory(self, tmp_path, monkeypatch):
        """Test that .env is looked up in the working directory by default."""
        monkeypatch.chdir(tmp_path)
        assert load_local_env() is False
        (tmp_path / ".env").write_text("AH_REALM=devcloud\n")
        assert load_local_env() is True
        assert os.environ["AH_REALM"] == "devcloud"
