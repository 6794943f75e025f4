"""Fakes for the content domain."""
