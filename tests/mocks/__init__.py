"""Test doubles for kmachine collaborators."""

from tests.mocks.mock_collaborators import FakeHost, FakeResolver, FakeSubmitter

__all__ = ["FakeHost", "FakeResolver", "FakeSubmitter"]
