"""Fakes for the organizations domain."""
