"""Deploy command: submit a built-in add-on manifest to a host's cluster."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from kmachine.endpoint import derive_cluster_endpoint
from kmachine.hosts import HostResolver
from kmachine.manifests import ManifestKind, lookup, parse_kind
from kmachine.submit import SubmissionClient
from kmachine.utils.errors import ArityError, DeployError, SubmissionError

logger = logging.getLogger(__name__)

USAGE = "deploy <host-reference> <manifest-kind>"


@dataclass
class DeployResult:
    """Outcome of a successful deploy."""

    host: str
    kind: ManifestKind
    endpoint: str
    resources: list[str] = field(default_factory=list)


def _report_target(endpoint: str) -> None:
    logger.info(f"using host: {endpoint}")


def deploy(
    args: Sequence[str],
    resolver: HostResolver,
    submitter: SubmissionClient,
    report: Callable[[str], None] | None = None,
) -> DeployResult:
    """Deploy a manifest to the cluster running on a host.

    Steps run strictly in order and the first failure stops the command,
    so nothing is submitted unless every earlier step succeeded:

    1. require exactly two arguments (host reference, manifest kind)
    2. resolve the host
    3. look up the manifest payload
    4. read the host URL and derive the cluster endpoint
    5. report the target endpoint
    6. submit the payload

    Args:
        args: Positional arguments: host reference and manifest kind
        resolver: Host resolver used to look up the host
        submitter: Submission client that creates the resources
        report: Callable receiving the target endpoint before submission

    Returns:
        DeployResult describing the submission

    Raises:
        ArityError: If args does not hold exactly two values
        HostResolutionError: If the host cannot be resolved
        UnknownManifestKindError: If the manifest kind is not supported
        HostURLError: If the host URL cannot be obtained
        MalformedURLError: If the host URL is not scheme://host:port
        SubmissionError: If the submission fails
    """
    if len(args) != 2:
        raise ArityError(
            f"Requires a host and a manifest kind ({USAGE}), got {len(args)} argument(s)"
        )

    reference, kind_name = args

    host = resolver.resolve(reference)

    kind = parse_kind(kind_name)
    payload = lookup(kind)

    url = host.connection_url()
    endpoint = derive_cluster_endpoint(url).url

    (report or _report_target)(endpoint)

    try:
        result = submitter.create(endpoint, payload)
    except DeployError:
        raise
    except Exception as e:
        raise SubmissionError(
            f"Failed to submit '{kind.value}' manifest to {endpoint}: {e}", endpoint=endpoint
        ) from e

    logger.info(f"Deployed '{kind.value}' manifest to host '{host.name}' at {endpoint}")

    return DeployResult(
        host=host.name,
        kind=kind,
        endpoint=endpoint,
        resources=result.resources,
    )
