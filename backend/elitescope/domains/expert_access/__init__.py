"""Expert access request domain."""
