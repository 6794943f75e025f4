"""Newsletter domain."""
