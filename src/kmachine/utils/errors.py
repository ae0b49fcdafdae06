"""Custom exception classes for kmachine."""


class KMachineError(Exception):
    """Base exception for kmachine errors."""

    pass


class ConfigurationError(KMachineError):
    """Raised when configuration is invalid or missing."""

    pass


class DeployError(KMachineError):
    """Base exception for failures of the deploy command."""

    pass


class ArityError(DeployError):
    """Raised when deploy is invoked with the wrong number of arguments."""

    pass


class HostResolutionError(DeployError):
    """Raised when a host reference cannot be resolved to a host."""

    pass


class HostURLError(DeployError):
    """Raised when a resolved host cannot report its connection URL."""

    pass


class UnknownManifestKindError(DeployError):
    """Raised when a manifest kind is not one of the supported kinds."""

    def __init__(self, kind: str, available: list[str] | None = None):
        self.kind = kind
        message = f"Invalid manifest kind: '{kind}'"
        if available:
            message += f". Must be one of: {', '.join(available)}"
        super().__init__(message)


class EndpointDerivationError(DeployError):
    """Raised when the cluster endpoint cannot be derived from a host URL."""

    pass


class MalformedURLError(EndpointDerivationError):
    """Raised when a host connection URL is not of the form scheme://host:port."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed host URL '{url}': {reason}")


class SubmissionError(DeployError):
    """Raised when submitting a manifest to the cluster endpoint fails."""

    def __init__(self, message: str, endpoint: str | None = None):
        self.endpoint = endpoint
        super().__init__(message)
