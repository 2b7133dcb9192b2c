"""Identify use cases."""
