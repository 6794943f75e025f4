"""Catalog statistics domain."""
