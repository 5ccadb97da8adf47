from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from database.db import JsonDocumentStore, get_store
from schemas.common import ErrorResponse
from services import auth_service

router = APIRouter(prefix="/auth", tags=["인증"])

# ✅ 요청 형식 정의 (누락 여부는 서비스에서 400 으로 처리)
class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

# ✅ 응답용 교사 정보 (비밀번호 제외)
class TeacherPublic(BaseModel):
    id: str
    name: str
    email: str

# ✅ 응답 형식 정의
class LoginResponse(BaseModel):
    token: str
    teacher: TeacherPublic

# ✅ [LOGIN] 로그인 API
@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def login(request: LoginRequest, store: JsonDocumentStore = Depends(get_store)):
    token, teacher = auth_service.login(store, request.email, request.password)
    return LoginResponse(
        token=token,
        teacher=TeacherPublic(id=teacher.id, name=teacher.name, email=teacher.email),
    )
