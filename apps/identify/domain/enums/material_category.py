"""Material Category Enum."""

from enum import Enum


class MaterialCategory(str, Enum):
    """품목 재질 카테고리.

    백엔드가 반환한 임의 문자열은 coerce()로 항상 이 enum 멤버로 수렴.
    알 수 없는 값은 MIXED.
    """

    PLASTIC = "plastic"
    PAPER = "paper"
    GLASS = "glass"
    METAL = "metal"
    ORGANIC = "organic"
    ELECTRONIC = "electronic"
    HAZARDOUS = "hazardous"
    MIXED = "mixed"

    @classmethod
    def coerce(cls, value: object) -> "MaterialCategory":
        """문자열을 카테고리로 변환 (대소문자/공백 무시, 실패 시 MIXED)."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.MIXED
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.MIXED
