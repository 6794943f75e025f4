"""Fakes for the education domain."""
