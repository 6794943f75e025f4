"""Fakes for the expert access domain."""
