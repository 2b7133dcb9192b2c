"""Prompt Repository Port - 프롬프트 로딩 추상화."""

from abc import ABC, abstractmethod


class PromptRepositoryPort(ABC):
    """프롬프트 리포지토리 포트."""

    @abstractmethod
    def get_prompt(self, name: str) -> str:
        """프롬프트 템플릿 로딩.

        Args:
            name: 프롬프트 이름 (확장자 제외)

        Returns:
            프롬프트 문자열

        Raises:
            FileNotFoundError: 프롬프트 없음
        """
