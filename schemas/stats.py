from pydantic import BaseModel
from typing import Optional


# ✅ 대시보드 통계 응답
class StatsResponse(BaseModel):
    totalStudents: int                       # 전체 학생 수
    totalUniqueCourses: int                  # 중복 제거한 과목 수
    averageAge: Optional[int] = None         # 평균 나이 (반올림, 나이 정보가 없으면 null)
    enrollmentsThisYear: int                 # 올해 입학한 학생 수
