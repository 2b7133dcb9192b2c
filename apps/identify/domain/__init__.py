"""Identify Domain Layer."""
