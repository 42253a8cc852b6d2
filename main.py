import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from database.db import init_db

logging.basicConfig(level=settings.LOG_LEVEL)

# HTTP 라이브러리 디버그 로그 비활성화
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


# ✅ 미들웨어 임포트
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ 라우터 임포트
from routers import init, class_stats, marks, queries, fa_mode


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ✅ 시작 시 테이블 생성 (이미 있으면 그대로 사용)
    init_db()
    logger.info("DB 초기화 완료 (%s)", settings.ENV)
    yield


app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# ✅ CORS 설정 (기본값: 모든 출처 허용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ 요청 지연 측정 미들웨어 (응답 헤더 X-Latency-Ms 추가)
app.add_middleware(TimingMiddleware)

# ✅ 전역 에러 핸들러 등록 ({success: false, message} 포맷)
add_error_handlers(app)

# ✅ /api 프리픽스 라우터 등록
app.include_router(init.router,         prefix="/api")
app.include_router(class_stats.router,  prefix="/api")
app.include_router(marks.router,        prefix="/api")
app.include_router(queries.router,      prefix="/api")
app.include_router(fa_mode.router,      prefix="/api")

# ✅ 헬스체크 엔드포인트
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}

# ✅ 루트 엔드포인트
@app.get("/")
def root():
    return {"message": f"{settings.APP_TITLE} - 학급 성적/문의/FA 모드 관리"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT, reload=settings.ENV == "dev")
