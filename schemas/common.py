"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- Pydantic v2 기준
- 포함 내용:
  1) 에러 응답 표준: ErrorResponse, ERROR_RESPONSES
  2) 헬스체크 응답: HealthResponse
  3) 페이지네이션 계산: make_pagination()
"""

from __future__ import annotations

from math import ceil

from pydantic import BaseModel, Field

from schemas.students import PaginationInfo


# =========================================================
# 1) 에러 응답 표준
# =========================================================

class ErrorResponse(BaseModel):
    """
    전역 에러 핸들러가 내려주는 {"error": message} 응답의 문서화용 스키마
    - 라우터의 responses= 에 연결해 Swagger 에 에러 형식을 노출
    """
    error: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")


# ✅ 인증이 필요한 라우터 공통 에러 응답
ERROR_RESPONSES = {
    code: {"model": ErrorResponse}
    for code in (400, 401, 403, 404, 500)
}


# =========================================================
# 2) 헬스체크
# =========================================================

class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: str = Field(..., description="응답 생성 시각 (UTC, ISO 8601)")


# =========================================================
# 3) 페이지네이션 메타
# =========================================================

def make_pagination(total: int, page: int, limit: int) -> PaginationInfo:
    """
    페이징 메타를 계산해서 생성
    - total 이 0이면 totalPages 도 0 (마지막 페이지 판정은 page < totalPages)
    """
    total_pages = ceil(total / limit)
    return PaginationInfo(
        currentPage=page,
        totalPages=total_pages,
        totalStudents=total,
        studentsPerPage=limit,
        hasNextPage=page < total_pages,
        hasPreviousPage=page > 1,
    )
