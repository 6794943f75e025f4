"""Health probe adapters."""
