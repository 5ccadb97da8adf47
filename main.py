from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config.settings import settings

# ✅ 로깅 설정 (레벨은 .env 의 LOG_LEVEL)
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


# ✅ 미들웨어 임포트
from middlewares.request_log import RequestLogMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ 라우터 임포트
from routers import auth, stats, students

from database.db import store
from schemas.common import HealthResponse
from utils.timeutil import now_iso

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# ✅ CORS 설정 (프론트엔드 연동)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ 요청 로그 + 지연 측정 미들웨어 (응답 헤더 X-Latency-Ms 추가)
app.add_middleware(RequestLogMiddleware, enabled=settings.REQUEST_LOG)

# ✅ 전역 에러 핸들러 등록 (모든 에러는 {"error": message})
add_error_handlers(app)

# ✅ /api 프리픽스 라우터 등록
app.include_router(auth.router,      prefix="/api")
app.include_router(stats.router,     prefix="/api")
app.include_router(students.router,  prefix="/api")

# ✅ 헬스체크 엔드포인트 (인증 불필요)
@app.get("/api/health", response_model=HealthResponse, tags=["Meta"])
def health_check():
    return HealthResponse(status="ok", timestamp=now_iso())

@app.on_event("startup")
def _init_database():
    # 파일이 없을 때만 시드 데이터 기록
    store.ensure_initialized()
    logger.info(f"{settings.APP_TITLE} 시작 (DB_FILE={settings.DB_FILE}, ENV={settings.ENV})")

# ✅ 루트 엔드포인트
@app.get("/", tags=["Meta"])
def root():
    return {"message": f"{settings.APP_TITLE} - {settings.APP_DESCRIPTION}"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
