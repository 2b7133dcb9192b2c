"""Identify Domain Entities."""

from apps.identify.domain.entities.recycling_stats import RecyclingStats

__all__ = ["RecyclingStats"]
