import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)

# 이 시간(ms)을 넘긴 요청은 WARNING (대용량 성적 파일 업로드 등)
SLOW_REQUEST_MS = 1000


def route_label(request: Request) -> str:
    """매칭된 라우트 경로(/api/fa-mode 등), 매칭 실패 시 실제 요청 경로"""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class TimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = int((time.perf_counter() - start) * 1000)
        response.headers["X-Latency-Ms"] = str(latency_ms)

        level = logging.WARNING if latency_ms >= SLOW_REQUEST_MS else logging.INFO
        logger.log(
            level, "%s %s → %s (%dms)",
            request.method, route_label(request), response.status_code, latency_ms,
        )
        return response
