"""Fakes for the elites domain."""
