from fastapi import APIRouter, Depends

from database.db import JsonDocumentStore, get_store
from dependencies.security import require_teacher
from schemas.common import ERROR_RESPONSES
from schemas.stats import StatsResponse
from services import student_service

router = APIRouter(prefix="/stats", tags=["통계"], dependencies=[Depends(require_teacher)],
                   responses=ERROR_RESPONSES)


# ✅ [SUMMARY] 전체 학생 수 / 과목 수 / 평균 나이 / 올해 입학 수
@router.get("", response_model=StatsResponse)
def get_stats(store: JsonDocumentStore = Depends(get_store)):
    return student_service.compute_stats(store)
