"""Shared utilities for kmachine."""
