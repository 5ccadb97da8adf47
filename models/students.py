from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional


# ✅ 저장용 학생 레코드 (database.json 의 students 배열 원소)
class Student(BaseModel):
    id: str                                  # 학생 ID (예: stu-001)
    firstName: str                           # 이름
    lastName: str                            # 성
    email: str                               # 이메일 (명부 내 유일)
    age: Optional[int] = None                # 나이 (16~100 또는 null)
    enrollmentDate: str                      # 입학일 (ISO 날짜 문자열)
    image: str = ""                          # 프로필 이미지 URL
    courses: List[str] = Field(default_factory=list)   # 수강 과목 (중복 허용)

    # 파일에 있는 알 수 없는 필드는 재저장 시에도 보존
    model_config = ConfigDict(extra="allow")

    @field_validator("courses", mode="before")
    @classmethod
    def _null_courses(cls, v):
        # 구버전 서버가 courses: null 을 기록한 파일도 읽을 수 있도록
        return [] if v is None else v
