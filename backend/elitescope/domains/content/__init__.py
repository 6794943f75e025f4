"""Ungated content domain: posts, events and publications."""
