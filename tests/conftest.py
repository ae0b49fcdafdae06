"""Pytest fixtures for testing kmachine."""

import pytest

from tests.mocks import FakeResolver, FakeSubmitter


@pytest.fixture
def fake_resolver() -> FakeResolver:
    """Create a resolver that knows one running host.

    Returns:
        FakeResolver with ``my-host`` at tcp://192.168.99.100:2376
    """
    return FakeResolver({"my-host": "tcp://192.168.99.100:2376"})


@pytest.fixture
def fake_submitter() -> FakeSubmitter:
    """Create a submission client that always succeeds.

    Returns:
        FakeSubmitter reporting two created resources
    """
    return FakeSubmitter(resources=['namespace "kube-system" created', 'service "kube-dns" created'])


@pytest.fixture
def inventory_file(tmp_path):
    """Create a host inventory file.

    Returns:
        Path to a YAML inventory with three hosts
    """
    path = tmp_path / "hosts.yaml"
    path.write_text(
        "hosts:\n"
        "  my-host:\n"
        "    url: tcp://192.168.99.100:2376\n"
        "  short-host: tcp://10.0.0.5:2376\n"
        "  no-url-host: {}\n"
    )
    return path
