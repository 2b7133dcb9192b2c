"""Stats Commands."""

from apps.identify.application.stats.commands.record_scan import RecordScanCommand

__all__ = ["RecordScanCommand"]
