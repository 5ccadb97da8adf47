"""
services/student_service.py

- 학생 명부 CRUD / 검색 / 통계 로직
- 모든 연산은 요청마다 문서 전체를 새로 읽고, 변경 시 문서 전체를 다시 저장한다
- 변경 연산은 store.locked() 안에서 읽기-수정-쓰기를 수행
"""

import logging
import random
import re
from datetime import date
from typing import Optional

from database.db import JsonDocumentStore
from models.document import Document
from models.students import Student
from schemas.common import make_pagination
from schemas.stats import StatsResponse
from schemas.students import StudentCreate, StudentListResponse, StudentUpdate
from services.errors import ConflictError, NotFoundError, ValidationError
from utils.timeutil import current_year, today_iso

logger = logging.getLogger(__name__)

MIN_AGE = 16
MAX_AGE = 100
PLACEHOLDER_IMAGE_COUNT = 12
_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


# ==========================================================
# [1단계] 공용 헬퍼
# ==========================================================

def parse_positive_int(value: Optional[str], default: int) -> int:
    """쿼리 문자열의 앞부분 정수를 읽는다. 읽을 수 없거나 1 미만이면 default"""
    if value is None:
        return default
    m = _LEADING_INT.match(str(value))
    if not m:
        return default
    number = int(m.group(0))
    return number if number >= 1 else default


def _email_key(email: str) -> str:
    return email.strip().lower()


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def _filled(value: Optional[str]) -> Optional[str]:
    """공백뿐인 값은 보내지 않은 것으로 취급"""
    return None if _is_blank(value) else value


def _check_age(age: Optional[int]) -> None:
    if age is not None and not (MIN_AGE <= age <= MAX_AGE):
        raise ValidationError(f"Age must be between {MIN_AGE} and {MAX_AGE}")


def _email_taken(document: Document, email: str, exclude_id: Optional[str] = None) -> bool:
    key = _email_key(email)
    return any(
        _email_key(s.email) == key and s.id != exclude_id
        for s in document.students
    )


def placeholder_image() -> str:
    return f"https://reqres.in/img/faces/{random.randint(1, PLACEHOLDER_IMAGE_COUNT)}-image.jpg"


def _matches(student: Student, needle: str) -> bool:
    return (
        needle in student.firstName.lower()
        or needle in student.lastName.lower()
        or needle in student.email.lower()
    )


# ==========================================================
# [2단계] 조회
# ==========================================================

# ✅ [READ] 검색 + 페이징 목록
def list_students(store: JsonDocumentStore, page: int = 1, limit: int = 10,
                  search: str = "") -> StudentListResponse:
    students = store.load().students

    # 검색어가 있으면 먼저 필터링 (이름/성/이메일 중 하나라도 포함)
    if search:
        needle = search.lower()
        students = [s for s in students if _matches(s, needle)]

    start = (page - 1) * limit
    return StudentListResponse(
        students=students[start:start + limit],
        pagination=make_pagination(len(students), page, limit),
    )


# ✅ [READ] 단건 조회
def get_student(store: JsonDocumentStore, student_id: str) -> Student:
    document = store.load()
    index = document.find_index(student_id)
    if index == -1:
        raise NotFoundError()
    return document.students[index]


# ✅ [SUMMARY] 통계
def compute_stats(store: JsonDocumentStore) -> StatsResponse:
    students = store.load().students

    courses = set()
    ages = []
    this_year = 0
    year = current_year()
    for s in students:
        courses.update(s.courses)
        if s.age is not None:
            ages.append(s.age)
        try:
            if date.fromisoformat(s.enrollmentDate[:10]).year == year:
                this_year += 1
        except ValueError:
            pass

    # 0.5 는 올림 (round() 의 은행가 반올림과 다름)
    average_age = int(sum(ages) / len(ages) + 0.5) if ages else None
    return StatsResponse(
        totalStudents=len(students),
        totalUniqueCourses=len(courses),
        averageAge=average_age,
        enrollmentsThisYear=this_year,
    )


# ==========================================================
# [3단계] 변경 (읽기-수정-쓰기)
# ==========================================================

# ✅ [CREATE] 학생 추가
def create_student(store: JsonDocumentStore, payload: StudentCreate) -> Student:
    if _is_blank(payload.firstName) or _is_blank(payload.lastName) or _is_blank(payload.email):
        raise ValidationError("First name, last name, and email are required")
    _check_age(payload.age)

    with store.locked() as document:
        if _email_taken(document, payload.email):
            raise ConflictError("Student with this email already exists")

        student = Student(
            id=document.next_student_id(),
            firstName=payload.firstName,
            lastName=payload.lastName,
            email=payload.email,
            age=payload.age,
            enrollmentDate=payload.enrollmentDate or today_iso(),
            image=payload.image or placeholder_image(),
            courses=payload.courses or [],
        )
        document.students.append(student)
        store.save(document)

    logger.info(f"학생 추가: {student.id} ({student.email})")
    return student


# ✅ [UPDATE] 학생 부분 수정
def update_student(store: JsonDocumentStore, student_id: str, payload: StudentUpdate) -> Student:
    sent = payload.model_fields_set
    email = _filled(payload.email)

    with store.locked() as document:
        index = document.find_index(student_id)
        if index == -1:
            raise NotFoundError()
        current = document.students[index]

        if email and _email_taken(document, email, exclude_id=student_id):
            raise ConflictError("Another student with this email already exists")
        _check_age(payload.age)

        # age/courses 는 "보낸 경우" 그대로 반영 (null, 빈 목록 포함),
        # 나머지 필드는 비어 있거나 공백뿐이면 기존 값 유지
        updated = current.model_copy(update={
            "firstName": _filled(payload.firstName) or current.firstName,
            "lastName": _filled(payload.lastName) or current.lastName,
            "email": email or current.email,
            "age": payload.age if "age" in sent else current.age,
            "enrollmentDate": payload.enrollmentDate or current.enrollmentDate,
            "image": payload.image or current.image,
            "courses": (payload.courses or []) if "courses" in sent else current.courses,
        })
        document.students[index] = updated
        store.save(document)

    logger.info(f"학생 수정: {student_id} (fields={sorted(sent)})")
    return updated


# ✅ [DELETE] 학생 삭제
def delete_student(store: JsonDocumentStore, student_id: str) -> Student:
    with store.locked() as document:
        index = document.find_index(student_id)
        if index == -1:
            raise NotFoundError()
        removed = document.students.pop(index)
        store.save(document)

    logger.info(f"학생 삭제: {student_id}")
    return removed
