"""
models/document.py

- database.json 전체를 표현하는 문서 모델
- 저장 단위는 항상 문서 전체 (teacher + students + studentSequence)
"""

import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from models.students import Student
from models.teachers import Teacher

STUDENT_ID_PATTERN = re.compile(r"^stu-(\d+)$")


def format_student_id(number: int) -> str:
    return f"stu-{number:03d}"


class Document(BaseModel):
    teacher: Teacher
    students: List[Student]
    # 마지막으로 발급한 학생 번호. 삭제 후에도 ID가 재사용되지 않도록 함께 저장
    studentSequence: Optional[int] = None

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="after")
    def _fill_sequence(self):
        # 카운터가 없는 파일(시드, 구버전)은 기존 ID 중 가장 큰 번호에서 이어간다
        if self.studentSequence is None:
            numbers = [
                int(m.group(1))
                for m in (STUDENT_ID_PATTERN.match(s.id) for s in self.students)
                if m
            ]
            self.studentSequence = max(numbers + [len(self.students)])
        return self

    def next_student_id(self) -> str:
        """카운터를 1 증가시키고 새 학생 ID 를 반환"""
        self.studentSequence += 1
        return format_student_id(self.studentSequence)

    def find_index(self, student_id: str) -> int:
        for i, s in enumerate(self.students):
            if s.id == student_id:
                return i
        return -1
