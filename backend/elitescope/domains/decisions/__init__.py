"""Political decisions domain."""
