"""Education domain: educational resources gated by access level."""
