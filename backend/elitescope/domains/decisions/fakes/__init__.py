"""Fakes for the decisions domain."""
