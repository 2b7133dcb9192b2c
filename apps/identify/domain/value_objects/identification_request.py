"""Identification Request Value Objects.

ImageCapture | TextQuery tagged union.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from apps.identify.domain.enums import CaptureMode
from apps.identify.domain.exceptions import EmptyImageError, EmptyQueryError

DATA_URI_SEPARATOR = ","


def strip_data_uri(image_base64: str) -> str:
    """`data:image/jpeg;base64,` 형태 prefix 제거.

    Args:
        image_base64: base64 문자열 (prefix 포함 가능)

    Returns:
        순수 base64 payload
    """
    if DATA_URI_SEPARATOR in image_base64:
        return image_base64.split(DATA_URI_SEPARATOR, 1)[1].strip()
    return image_base64.strip()


@dataclass(frozen=True, slots=True)
class ImageCapture:
    """이미지 식별 요청.

    Attributes:
        image_base64: base64 이미지 (data URI prefix 허용)
        mode: ITEM(일반 스캔) / BARCODE(바코드 스캔)
    """

    image_base64: str
    mode: CaptureMode = CaptureMode.ITEM

    def __post_init__(self) -> None:
        if not isinstance(self.image_base64, str) or not strip_data_uri(self.image_base64):
            raise EmptyImageError()

    @property
    def payload(self) -> str:
        """전송용 base64 (prefix 제거)."""
        return strip_data_uri(self.image_base64)


@dataclass(frozen=True, slots=True)
class TextQuery:
    """텍스트 검색 요청."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text.strip():
            raise EmptyQueryError()


IdentificationRequest = Union[ImageCapture, TextQuery]
