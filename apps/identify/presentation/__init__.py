"""Identify presentation layer."""
