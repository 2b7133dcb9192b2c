"""로컬 모델 /predict 응답 스키마."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LocalPrediction(BaseModel):
    """로컬 모델 예측 결과.

    class_id, predictions 등 추가 필드는 무시.
    """

    model_config = ConfigDict(extra="ignore")

    class_name: str = Field(min_length=1, strict=True)
    category: str = Field(min_length=1, strict=True)
    confidence: float = Field(ge=0.0, le=1.0, strict=True)
    is_recyclable: bool = Field(strict=True)
