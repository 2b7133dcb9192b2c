"""Identify Application Layer."""
