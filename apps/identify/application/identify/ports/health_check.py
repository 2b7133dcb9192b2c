"""Health Check Port - 백엔드 가용성 확인."""

from abc import ABC, abstractmethod


class HealthCheckPort(ABC):
    """가용성 프로브 포트."""

    @abstractmethod
    async def is_available(self, endpoints: tuple[str, ...]) -> str | None:
        """응답하는 첫 endpoint 반환 (없으면 None)."""
