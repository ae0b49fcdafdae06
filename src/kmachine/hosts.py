"""Host resolution for provisioned machines.

A host resolver turns a host reference into a handle that can report the
host's connection URL. Two resolvers are provided: one backed by the
docker-machine CLI and one backed by a YAML inventory file.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import yaml

from kmachine.utils.errors import HostResolutionError, HostURLError
from kmachine.utils.validation import validate_host_name

logger = logging.getLogger(__name__)


class HostHandle(ABC):
    """A resolved host that can report its connection URL."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def connection_url(self) -> str:
        """Return the current connection URL of the host.

        Returns:
            URL of the form scheme://host:port

        Raises:
            HostURLError: If the URL cannot be obtained
        """
        pass


class HostResolver(ABC):
    """Resolves host references to host handles."""

    @abstractmethod
    def resolve(self, reference: str) -> HostHandle:
        """Resolve a host reference.

        Args:
            reference: Host name or identifier

        Returns:
            Handle for the host

        Raises:
            HostResolutionError: If the host is unknown or cannot be looked up
        """
        pass


class MachineHost(HostHandle):
    """Host managed by docker-machine."""

    def __init__(self, name: str, resolver: "MachineHostResolver"):
        super().__init__(name)
        self._resolver = resolver

    def connection_url(self) -> str:
        try:
            result = self._resolver.run_machine(["url", self.name])
        except subprocess.TimeoutExpired as e:
            raise HostURLError(f"Timeout while getting URL for host '{self.name}'") from e
        except FileNotFoundError as e:
            raise HostURLError(f"{self._resolver.machine_bin} CLI not found") from e
        except OSError as e:
            raise HostURLError(
                f"Failed to run {self._resolver.machine_bin} for host '{self.name}': {e}"
            ) from e

        if result.returncode != 0:
            error_msg = (result.stderr or result.stdout).strip()
            raise HostURLError(f"Failed to get URL for host '{self.name}': {error_msg}")

        url = result.stdout.strip()
        if not url:
            raise HostURLError(f"Host '{self.name}' reported an empty URL. Is it running?")

        logger.debug(f"Host '{self.name}' URL: {url}")
        return url


class MachineHostResolver(HostResolver):
    """Resolver for hosts provisioned with docker-machine."""

    def __init__(
        self,
        machine_bin: str = "docker-machine",
        storage_path: str | None = None,
        timeout: int = 30,
    ):
        """Initialize docker-machine resolver.

        Args:
            machine_bin: docker-machine executable
            storage_path: Optional machine storage path (--storage-path)
            timeout: Timeout in seconds for each docker-machine call
        """
        self.machine_bin = machine_bin
        self.storage_path = storage_path
        self.timeout = timeout

    def run_machine(self, args: list[str]) -> subprocess.CompletedProcess[str]:
        """Run a docker-machine command with the configured storage path.

        Args:
            args: Command arguments

        Returns:
            Completed subprocess
        """
        cmd = [self.machine_bin]
        if self.storage_path:
            cmd.extend(["--storage-path", self.storage_path])
        cmd.extend(args)
        logger.debug(f"Running machine command: {' '.join(cmd)}")

        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=self.timeout,
        )

    def resolve(self, reference: str) -> HostHandle:
        try:
            validate_host_name(reference)
        except ValueError as e:
            raise HostResolutionError(str(e)) from e

        try:
            result = self.run_machine(["inspect", "--format", "{{.Name}}", reference])
        except subprocess.TimeoutExpired as e:
            raise HostResolutionError(f"Timeout while looking up host '{reference}'") from e
        except FileNotFoundError as e:
            raise HostResolutionError(
                f"{self.machine_bin} CLI not found. Please install docker-machine"
            ) from e
        except OSError as e:
            raise HostResolutionError(
                f"Failed to run {self.machine_bin} for host '{reference}': {e}"
            ) from e

        if result.returncode != 0:
            error_msg = (result.stderr or result.stdout).strip()
            raise HostResolutionError(f"Host '{reference}' not found: {error_msg}")

        logger.debug(f"Resolved host '{reference}'")
        return MachineHost(reference, self)


class InventoryHost(HostHandle):
    """Host listed in an inventory file."""

    def __init__(self, name: str, url: str | None):
        super().__init__(name)
        self._url = url

    def connection_url(self) -> str:
        if not self._url:
            raise HostURLError(f"Host '{self.name}' has no url in the inventory")
        return self._url


class InventoryHostResolver(HostResolver):
    """Resolver for hosts listed in a YAML inventory file.

    The inventory maps host names to connection URLs::

        hosts:
          my-host:
            url: tcp://192.168.99.100:2376
          other-host: tcp://192.168.99.101:2376
    """

    def __init__(self, inventory_path: Path):
        self.inventory_path = inventory_path

    def _load_inventory(self) -> dict[str, Any]:
        """Load host entries from the inventory file.

        Raises:
            HostResolutionError: If the file is missing or invalid
        """
        if not self.inventory_path.exists():
            raise HostResolutionError(f"Host inventory not found: {self.inventory_path}")

        try:
            with open(self.inventory_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise HostResolutionError(
                f"Invalid host inventory {self.inventory_path}: {e}"
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise HostResolutionError(
                f"Cannot read host inventory {self.inventory_path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise HostResolutionError(
                f"Invalid host inventory {self.inventory_path}: expected a mapping"
            )

        hosts = data.get("hosts") or {}
        if not isinstance(hosts, dict):
            raise HostResolutionError(
                f"Invalid host inventory {self.inventory_path}: 'hosts' must be a mapping"
            )
        return hosts

    def resolve(self, reference: str) -> HostHandle:
        hosts = self._load_inventory()

        if reference not in hosts:
            raise HostResolutionError(
                f"Host '{reference}' not found in inventory {self.inventory_path}"
            )

        entry = hosts[reference]
        if isinstance(entry, dict):
            url = entry.get("url")
        else:
            url = entry

        logger.debug(f"Resolved host '{reference}' from inventory")
        return InventoryHost(reference, str(url) if url else None)
