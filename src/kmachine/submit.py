"""Manifest submission to a cluster endpoint."""

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from kmachine.utils.errors import SubmissionError

logger = logging.getLogger(__name__)


@dataclass
class SubmissionResult:
    """Outcome of a successful submission."""

    endpoint: str
    resources: list[str] = field(default_factory=list)
    output: str = ""


class SubmissionClient(ABC):
    """Creates resources on a cluster from manifest bytes."""

    @abstractmethod
    def create(self, endpoint: str, payload: bytes) -> SubmissionResult:
        """Create the resources described by a manifest payload.

        Args:
            endpoint: Cluster API endpoint URL
            payload: Manifest content, forwarded unchanged

        Returns:
            SubmissionResult for the created resources

        Raises:
            SubmissionError: If the create call fails
        """
        pass


class KubectlSubmitter(SubmissionClient):
    """Submission client that pipes manifests to ``kubectl create -f -``."""

    def __init__(
        self,
        kubectl_bin: str = "kubectl",
        insecure_skip_tls_verify: bool = False,
        timeout: int = 120,
    ):
        """Initialize kubectl submitter.

        Args:
            kubectl_bin: kubectl executable
            insecure_skip_tls_verify: Skip verification of the API server certificate
            timeout: Command timeout in seconds
        """
        self.kubectl_bin = kubectl_bin
        self.insecure_skip_tls_verify = insecure_skip_tls_verify
        self.timeout = timeout

    def _build_command(self, endpoint: str) -> list[str]:
        cmd = [self.kubectl_bin, "--server", endpoint]
        if self.insecure_skip_tls_verify:
            cmd.append("--insecure-skip-tls-verify=true")
        cmd.extend(["create", "-f", "-"])
        return cmd

    def create(self, endpoint: str, payload: bytes) -> SubmissionResult:
        cmd = self._build_command(endpoint)
        logger.debug(f"Running kubectl command: {' '.join(cmd)} ({len(payload)} bytes on stdin)")

        try:
            result = subprocess.run(
                cmd,
                input=payload,
                capture_output=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise SubmissionError(
                f"kubectl create against {endpoint} timed out after {self.timeout} seconds",
                endpoint=endpoint,
            ) from e
        except FileNotFoundError as e:
            raise SubmissionError(
                f"{self.kubectl_bin} CLI not found. Please install kubectl: "
                "https://kubernetes.io/docs/tasks/tools/install-kubectl/",
                endpoint=endpoint,
            ) from e

        stdout = result.stdout.decode("utf-8", errors="replace")
        stderr = result.stderr.decode("utf-8", errors="replace")

        if result.returncode != 0:
            error_msg = (stderr or stdout).strip()
            raise SubmissionError(
                f"Failed to create resources on {endpoint}: {error_msg}",
                endpoint=endpoint,
            )

        resources = [line.strip() for line in stdout.strip().split("\n") if line.strip()]
        logger.info(f"Created {len(resources)} resources on {endpoint}")

        return SubmissionResult(endpoint=endpoint, resources=resources, output=stdout)
