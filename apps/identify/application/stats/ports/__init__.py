"""Stats Ports."""

from apps.identify.application.stats.ports.scan_history_store import (
    ScanHistoryStorePort,
)

__all__ = ["ScanHistoryStorePort"]
