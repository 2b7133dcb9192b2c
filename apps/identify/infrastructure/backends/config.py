"""식별 백엔드 HTTP 공통 설정.

연결 제한, health check 타임아웃 등.
요청 타임아웃은 ResolverConfig.request_timeout_ms로 요청마다 적용.
"""

import httpx

# ==========================================
# HTTP 연결 제한 설정
# ==========================================

BACKEND_LIMITS = httpx.Limits(
    max_connections=100,
    max_keepalive_connections=20,
    keepalive_expiry=30.0,
)

# ==========================================
# 기본 타임아웃 (요청별 override 전 클라이언트 기본값)
# ==========================================

DEFAULT_TIMEOUT = httpx.Timeout(30.0, connect=5.0)

# ==========================================
# Health check
# ==========================================

HEALTH_CHECK_TIMEOUT = 5.0
