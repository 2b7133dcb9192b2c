"""Recycling Stats Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

# 재활용 가능 품목 1건당 CO₂ 절감 추정치 (kg)
DEFAULT_CO2_PER_RECYCLABLE_KG = 0.5
# 레벨업 단위 (스캔 수)
ITEMS_PER_LEVEL = 10


@dataclass(slots=True)
class RecyclingStats:
    """사용자 참여 통계 엔티티.

    Attributes:
        items_scanned: 누적 스캔 수
        co2_saved_kg: 누적 CO₂ 절감 추정치 (kg)
        streak: 연속 스캔 일수 (최소 1)
        level: 레벨 (items_scanned // 10 + 1)
        last_scan_date: 마지막 스캔 날짜
    """

    items_scanned: int = 0
    co2_saved_kg: float = 0.0
    streak: int = 1
    level: int = 1
    last_scan_date: date | None = None

    def record(
        self,
        recyclable: bool,
        today: date,
        co2_per_recyclable_kg: float = DEFAULT_CO2_PER_RECYCLABLE_KG,
    ) -> None:
        """스캔 1건 반영.

        Args:
            recyclable: 재활용 가능 여부
            today: 스캔 날짜
            co2_per_recyclable_kg: 재활용 품목당 CO₂ 절감량
        """
        self.items_scanned += 1
        if recyclable:
            self.co2_saved_kg = round(self.co2_saved_kg + co2_per_recyclable_kg, 3)
        self.level = self.items_scanned // ITEMS_PER_LEVEL + 1

        if self.last_scan_date is None:
            self.streak = 1
        elif self.last_scan_date == today - timedelta(days=1):
            self.streak += 1
        elif self.last_scan_date != today:
            self.streak = 1
        self.last_scan_date = today

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (저장 / API 응답용)."""
        return {
            "items_scanned": self.items_scanned,
            "co2_saved_kg": self.co2_saved_kg,
            "streak": self.streak,
            "level": self.level,
            "last_scan_date": self.last_scan_date.isoformat() if self.last_scan_date else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RecyclingStats:
        """딕셔너리에서 복원."""
        last_scan = data.get("last_scan_date")
        return cls(
            items_scanned=int(data.get("items_scanned", 0)),
            co2_saved_kg=float(data.get("co2_saved_kg", 0.0)),
            streak=int(data.get("streak", 1)),
            level=int(data.get("level", 1)),
            last_scan_date=date.fromisoformat(last_scan) if last_scan else None,
        )
