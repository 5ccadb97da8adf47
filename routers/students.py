from typing import Optional

from fastapi import APIRouter, Depends, status

from config.settings import settings
from database.db import JsonDocumentStore, get_store
from dependencies.security import require_teacher
from models.students import Student
from schemas.common import ERROR_RESPONSES
from schemas.students import (
    StudentCreate,
    StudentDeleteResponse,
    StudentListResponse,
    StudentUpdate,
)
from services import student_service

router = APIRouter(prefix="/students", tags=["학생 정보"], dependencies=[Depends(require_teacher)],
                   responses=ERROR_RESPONSES)


# ==========================================================
# [1단계] 목록 / 단건 조회
# ==========================================================

# ✅ [READ] 검색 + 페이징 목록
@router.get("", response_model=StudentListResponse)
def read_students(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
    store: JsonDocumentStore = Depends(get_store),
):
    # 쿼리값은 문자열로 받아 관대하게 해석 (잘못된 값은 기본값)
    page_no = student_service.parse_positive_int(page, 1)
    per_page = min(
        student_service.parse_positive_int(limit, settings.DEFAULT_PAGE_LIMIT),
        settings.MAX_PAGE_LIMIT,
    )
    return student_service.list_students(store, page_no, per_page, search or "")


# ✅ [READ] 특정 학생 상세 조회
@router.get("/{student_id}", response_model=Student)
def read_student(student_id: str, store: JsonDocumentStore = Depends(get_store)):
    return student_service.get_student(store, student_id)


# ==========================================================
# [2단계] 추가 / 수정 / 삭제
# ==========================================================

# ✅ [CREATE] 학생 추가
@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(student: StudentCreate, store: JsonDocumentStore = Depends(get_store)):
    return student_service.create_student(store, student)


# ✅ [UPDATE] 특정 학생 정보 부분 수정
@router.put("/{student_id}", response_model=Student)
def update_student(student_id: str, updated: StudentUpdate,
                   store: JsonDocumentStore = Depends(get_store)):
    return student_service.update_student(store, student_id, updated)


# ✅ [DELETE] 특정 학생 삭제
@router.delete("/{student_id}", response_model=StudentDeleteResponse)
def delete_student(student_id: str, store: JsonDocumentStore = Depends(get_store)):
    removed = student_service.delete_student(store, student_id)
    return StudentDeleteResponse(message="Student deleted successfully", student=removed)
