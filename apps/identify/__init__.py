"""Identify API - Clean Architecture.

재활용 품목 식별 서비스:
1. Local Model: 로컬 이미지 분류 모델 (confidence gate, multi-host retry)
2. Remote AI: 생성형 AI completion (JSON-in-text 응답)
3. Guidance: 카테고리별 배출 안내 (정적 YAML 카탈로그)
4. Stats: 스캔 이력 / CO₂ 절감량 / 스트릭 / 레벨
"""
