"""Fakes for the newsletter domain."""
