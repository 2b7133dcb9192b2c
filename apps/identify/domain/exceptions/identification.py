"""Identification 도메인 예외."""

from apps.identify.domain.exceptions.base import DomainError


class EmptyImageError(DomainError):
    """이미지 payload 누락 (data URI prefix 제거 후 빈 값 포함)."""

    def __init__(self) -> None:
        super().__init__("image_base64 must not be empty")


class EmptyQueryError(DomainError):
    """검색어 누락."""

    def __init__(self) -> None:
        super().__init__("query must not be empty")


class InvalidResolverConfigError(DomainError):
    """ResolverConfig 값 범위 위반."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid resolver config: {reason}")
