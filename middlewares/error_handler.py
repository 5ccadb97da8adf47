import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from services.errors import AppError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # loc 예: ("body", "age") → "age"
    loc = [str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path", "header")]
    if first.get("type") == "json_invalid":
        return "Malformed JSON body"
    if loc:
        return f"{'.'.join(loc)}: {first.get('msg')}"
    return first.get("msg", "Invalid request")


def add_error_handlers(app: FastAPI):
    # ✅ 도메인 예외 → {"error": message}
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return _error(exc.status_code, exc.message)

    # ✅ 요청 본문/쿼리 형식 오류 → 400
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return _error(400, _describe_validation_error(exc))

    # ✅ 라우트 없음(404/405) → 404 Route not found
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405) and exc.detail in ("Not Found", "Method Not Allowed"):
            return _error(404, "Route not found")
        return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    # ✅ 그 밖의 모든 예외 → 500 (프로세스는 계속 동작)
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"처리되지 않은 예외: {request.method} {request.url.path}")
        return _error(500, "Internal server error")
