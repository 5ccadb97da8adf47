"""
CSV → database.json 학생 일괄 등록

- 컬럼: firstName,lastName,email,age,enrollmentDate,image,courses
- courses 는 세미콜론(;)으로 구분
- 행마다 API 와 같은 create_student 를 거치므로 검증/중복 규칙이 동일하게 적용됨
- 실행: python -m scripts.import_students data/students.csv
"""

import csv
import logging
import sys

from database.db import JsonDocumentStore, store as default_store
from schemas.students import StudentCreate
from services import student_service
from services.errors import ConflictError, ValidationError

logger = logging.getLogger(__name__)

CSV_PATH = "data/students.csv"  # ✅ 기본 파일 경로


def _row_to_payload(row: dict) -> StudentCreate:
    age = (row.get("age") or "").strip()
    courses = (row.get("courses") or "").strip()
    return StudentCreate(
        firstName=(row.get("firstName") or "").strip(),
        lastName=(row.get("lastName") or "").strip(),
        email=(row.get("email") or "").strip(),
        age=int(age) if age else None,
        enrollmentDate=(row.get("enrollmentDate") or "").strip() or None,
        image=(row.get("image") or "").strip() or None,
        courses=[c.strip() for c in courses.split(";") if c.strip()],
    )


def import_students(csv_path: str, store: JsonDocumentStore = default_store) -> tuple[int, int]:
    """CSV 의 각 행을 학생으로 등록하고 (등록 수, 건너뛴 수) 반환"""
    store.ensure_initialized()
    created = skipped = 0

    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for line_no, row in enumerate(reader, start=2):
            try:
                student = student_service.create_student(store, _row_to_payload(row))
            except (ValidationError, ConflictError, ValueError) as e:
                # 검증 실패 행은 건너뛰고 계속 진행
                logger.warning(f"{csv_path}:{line_no} 건너뜀 - {e}")
                skipped += 1
                continue
            logger.debug(f"{csv_path}:{line_no} → {student.id}")
            created += 1

    return created, skipped


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    path = sys.argv[1] if len(sys.argv) > 1 else CSV_PATH
    created, skipped = import_students(path)
    print(f"✅ 학생 CSV → DB 등록 완료: {created}명 등록, {skipped}행 건너뜀")
