from pydantic import BaseModel
from typing import List, Optional

from models.students import Student


# ✅ 입력용 (POST) - 필수값 검사는 서비스에서 수행해 일관된 에러 메시지를 돌려준다
class StudentCreate(BaseModel):
    firstName: Optional[str] = None          # 이름 (필수)
    lastName: Optional[str] = None           # 성 (필수)
    email: Optional[str] = None              # 이메일 (필수, 중복 불가)
    age: Optional[int] = None                # 나이 (16~100)
    enrollmentDate: Optional[str] = None     # 입학일 (생략 시 오늘)
    image: Optional[str] = None              # 이미지 URL (생략 시 임의 placeholder)
    courses: Optional[List[str]] = None      # 수강 과목 (생략 시 빈 목록)


# ✅ 입력용 (PUT) - 부분 수정. 보내지 않은 필드와 null 을 구분하기 위해 model_fields_set 사용
class StudentUpdate(StudentCreate):
    pass


# ✅ 목록 응답의 페이징 정보
class PaginationInfo(BaseModel):
    currentPage: int
    totalPages: int
    totalStudents: int
    studentsPerPage: int
    hasNextPage: bool
    hasPreviousPage: bool


# ✅ 목록 응답
class StudentListResponse(BaseModel):
    students: List[Student]
    pagination: PaginationInfo


# ✅ 삭제 응답
class StudentDeleteResponse(BaseModel):
    message: str
    student: Student
