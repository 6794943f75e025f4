"""Elites domain: profiles and the relationship graph."""
