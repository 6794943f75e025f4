"""Fakes for the reports domain."""
