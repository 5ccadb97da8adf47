from typing import Annotated, Optional, Protocol

from fastapi import Depends, Header

from config.settings import settings
from services.errors import ForbiddenError, UnauthorizedError
import hmac

AuthHeader = Annotated[Optional[str], Header(alias="Authorization")]


class TokenVerifier(Protocol):
    def verify(self, token: str) -> dict:
        """유효하면 인증 주체 정보를, 아니면 ForbiddenError 를 발생"""
        ...


class StaticTokenVerifier:
    """설정에 지정된 고정 토큰 하나만 허용"""

    def __init__(self, token: str):
        self._token = token

    def verify(self, token: str) -> dict:
        # 타이밍 안전 비교
        if not hmac.compare_digest(token.encode("utf-8"), self._token.encode("utf-8")):
            raise ForbiddenError()
        return {"role": "teacher"}


def get_token_verifier() -> TokenVerifier:
    return StaticTokenVerifier(settings.AUTH_TOKEN)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    # "Bearer <token>" 에서 두 번째 토막만 사용 (스킴 문자열은 검사하지 않음)
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) < 2:
        return None
    return parts[1]


def require_teacher(
    authorization: AuthHeader = None,
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> dict:
    token = extract_bearer_token(authorization)
    if not token:
        raise UnauthorizedError()
    return verifier.verify(token)
