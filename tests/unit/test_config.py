"""Unit tests for configuration management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from kmachine.config import DeployConfig
from kmachine.utils.errors import ConfigurationError


@pytest.fixture(autouse=True)
def no_dotenv():
    """Keep a developer's .env file out of the tests."""
    with patch("kmachine.config.load_dotenv"):
        yield


class TestDeployConfig:
    """Test DeployConfig class."""

    def test_default_configuration(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = DeployConfig()

            assert config.host_source == "machine"
            assert config.machine_bin == "docker-machine"
            assert config.machine_storage_path is None
            assert config.kubectl_bin == "kubectl"
            assert config.insecure_skip_tls_verify is False
            assert config.submit_timeout == 120
            assert config.log_level == "info"

    def test_environment_variable_loading(self):
        """Test loading configuration from environment."""
        env = {
            "KMACHINE_HOST_SOURCE": "Inventory",
            "KMACHINE_MACHINE_BIN": "/opt/bin/docker-machine",
            "MACHINE_STORAGE_PATH": "/var/lib/machines",
            "KMACHINE_INVENTORY": "/etc/kmachine/hosts.yaml",
            "KMACHINE_KUBECTL_BIN": "/opt/bin/kubectl",
            "KMACHINE_INSECURE_SKIP_TLS_VERIFY": "true",
            "KMACHINE_SUBMIT_TIMEOUT": "30",
            "LOG_LEVEL": "DEBUG",
        }

        with patch.dict(os.environ, env, clear=True):
            config = DeployConfig()

            assert config.host_source == "inventory"
            assert config.machine_bin == "/opt/bin/docker-machine"
            assert config.machine_storage_path == "/var/lib/machines"
            assert config.get_inventory_path() == Path("/etc/kmachine/hosts.yaml")
            assert config.kubectl_bin == "/opt/bin/kubectl"
            assert config.insecure_skip_tls_verify is True
            assert config.submit_timeout == 30
            assert config.log_level == "debug"

    def test_environment_overrides_constructor(self):
        """Test environment variables take precedence over constructor values."""
        with patch.dict(os.environ, {"KMACHINE_KUBECTL_BIN": "env-kubectl"}, clear=True):
            config = DeployConfig(kubectl_bin="arg-kubectl", submit_timeout=45)

            assert config.kubectl_bin == "env-kubectl"
            assert config.submit_timeout == 45

    def test_skip_tls_false_values(self):
        """Test falsy values for the TLS flag."""
        for value in ["0", "false", "no", "off", ""]:
            env = {"KMACHINE_INSECURE_SKIP_TLS_VERIFY": value}
            with patch.dict(os.environ, env, clear=True):
                config = DeployConfig(insecure_skip_tls_verify=True)
                assert config.insecure_skip_tls_verify is False

    def test_invalid_timeout(self):
        """Test non-integer timeout."""
        with patch.dict(os.environ, {"KMACHINE_SUBMIT_TIMEOUT": "soon"}, clear=True):
            with pytest.raises(ConfigurationError, match="KMACHINE_SUBMIT_TIMEOUT"):
                DeployConfig()

    def test_inventory_path_expands_home(self):
        """Test ~ in the inventory path is expanded."""
        with patch.dict(os.environ, {}, clear=True):
            config = DeployConfig()
            assert config.get_inventory_path() == Path("~/.kmachine/hosts.yaml").expanduser()


class TestDeployConfigValidation:
    """Test DeployConfig.validate."""

    def test_validation_success(self):
        """Test default configuration is valid."""
        with patch.dict(os.environ, {}, clear=True):
            DeployConfig().validate()

    def test_invalid_host_source(self):
        """Test unknown host source."""
        with patch.dict(os.environ, {"KMACHINE_HOST_SOURCE": "consul"}, clear=True):
            config = DeployConfig()

            with pytest.raises(ConfigurationError, match="Invalid host source"):
                config.validate()

    def test_non_positive_timeout(self):
        """Test zero timeout."""
        with patch.dict(os.environ, {"KMACHINE_SUBMIT_TIMEOUT": "0"}, clear=True):
            config = DeployConfig()

            with pytest.raises(ConfigurationError, match="positive"):
                config.validate()

    def test_invalid_log_level(self):
        """Test unknown log level."""
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True):
            config = DeployConfig()

            with pytest.raises(ConfigurationError, match="Invalid log level"):
                config.validate()
