"""원격 생성형 AI 응답 스키마.

응답 body는 {"completion": "<JSON 문자열>"} 형태.
completion 내부 JSON을 다시 파싱해야 한다.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompletionEnvelope(BaseModel):
    """HTTP 응답 body."""

    model_config = ConfigDict(extra="ignore")

    completion: str = Field(min_length=1, strict=True)


class GenerativeAnswer(BaseModel):
    """completion 내부 JSON.

    material, barcode, commonVariations 등 추가 필드는 허용하되 사용하지 않음.
    """

    model_config = ConfigDict(extra="ignore")

    item: str = Field(min_length=1, strict=True)
    category: str = Field(min_length=1, strict=True)
    recyclable: bool = Field(strict=True)
