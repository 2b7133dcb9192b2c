"""Capture Mode Enum."""

from enum import Enum


class CaptureMode(str, Enum):
    """이미지 캡처 모드.

    - ITEM: 일반 카메라 스캔 (로컬 모델 + 원격 AI)
    - BARCODE: 바코드/라벨 스캔 (원격 AI 전용)
    """

    ITEM = "item"
    BARCODE = "barcode"
