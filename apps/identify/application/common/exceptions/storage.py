"""저장소 관련 애플리케이션 예외."""

from apps.identify.application.common.exceptions.base import ApplicationError


class HistoryStoreError(ApplicationError):
    """스캔 이력 저장소 접근 실패."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        super().__init__(f"History store {operation} failed: {reason}")
