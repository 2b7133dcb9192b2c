"""Identify Infrastructure Layer."""
