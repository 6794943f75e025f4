"""Shared in-memory fakes for unit tests."""
