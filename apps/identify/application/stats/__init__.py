"""Stats use cases."""
