from pydantic import BaseModel, ConfigDict
from typing import Optional


# ✅ 저장용 교사 레코드 (시드 이후 변경되지 않음)
class Teacher(BaseModel):
    id: str                                  # 교사 ID
    name: str                                # 이름
    email: str                               # 로그인 이메일
    password: str                            # 로그인 비밀번호 (평문)
    image: Optional[str] = None              # 프로필 이미지 URL

    model_config = ConfigDict(extra="allow")
