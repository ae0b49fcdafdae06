"""Configuration management for kmachine.

This module handles configuration loading from environment variables and .env files.
Configuration is only consumed by the CLI, which uses it to build the host resolver
and submission client handed to the deploy command.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv

from kmachine.utils.errors import ConfigurationError

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class DeployConfig:
    """kmachine configuration.

    Values passed to the constructor act as defaults; matching environment
    variables take precedence.
    """

    # Host resolution
    host_source: Literal["machine", "inventory"] = "machine"
    machine_bin: str = "docker-machine"
    machine_storage_path: str | None = None
    inventory_path: str = "~/.kmachine/hosts.yaml"

    # Submission
    kubectl_bin: str = "kubectl"
    insecure_skip_tls_verify: bool = False
    submit_timeout: int = 120

    log_level: str = "info"

    def __post_init__(self):
        """Load configuration from environment variables after initialization."""
        # Load .env file if present
        load_dotenv()

        self.host_source = os.getenv("KMACHINE_HOST_SOURCE", self.host_source).lower()  # type: ignore
        self.machine_bin = os.getenv("KMACHINE_MACHINE_BIN", self.machine_bin)
        self.machine_storage_path = os.getenv("MACHINE_STORAGE_PATH", self.machine_storage_path)
        self.inventory_path = os.getenv("KMACHINE_INVENTORY", self.inventory_path)

        self.kubectl_bin = os.getenv("KMACHINE_KUBECTL_BIN", self.kubectl_bin)
        skip_tls = os.getenv("KMACHINE_INSECURE_SKIP_TLS_VERIFY")
        if skip_tls is not None:
            self.insecure_skip_tls_verify = _parse_bool(skip_tls)

        timeout = os.getenv("KMACHINE_SUBMIT_TIMEOUT")
        if timeout is not None:
            try:
                self.submit_timeout = int(timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid KMACHINE_SUBMIT_TIMEOUT: '{timeout}'. Must be an integer"
                ) from e

        self.log_level = os.getenv("LOG_LEVEL", self.log_level).lower()

    def validate(self) -> None:
        """Validate configuration.

        Raises:
            ConfigurationError: If a setting has an unsupported value.
        """
        if self.host_source not in ("machine", "inventory"):
            raise ConfigurationError(
                f"Invalid host source: {self.host_source}. Must be one of: machine, inventory"
            )
        if self.submit_timeout <= 0:
            raise ConfigurationError(
                f"Submit timeout must be a positive number of seconds, got {self.submit_timeout}"
            )
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level}. Must be one of: {', '.join(_LOG_LEVELS)}"
            )

    def get_inventory_path(self) -> Path:
        """Get the host inventory file path with ``~`` expanded.

        Returns:
            Path to the inventory file
        """
        return Path(self.inventory_path).expanduser()
