"""Reports domain: analytical reports gated by access level."""
