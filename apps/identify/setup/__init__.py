"""Identify setup (config, logging, DI)."""
