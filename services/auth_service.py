import logging

from config.settings import settings
from database.db import JsonDocumentStore
from models.teachers import Teacher
from services.errors import InvalidCredentialsError, ValidationError
from utils.security import verify_credentials

logger = logging.getLogger(__name__)


def login(store: JsonDocumentStore, email: str, password: str) -> tuple[str, Teacher]:
    """교사 로그인. 성공 시 (고정 토큰, 교사 레코드) 반환"""
    if not email or not password:
        raise ValidationError("Email and password are required")

    teacher = store.load().teacher
    if not verify_credentials(teacher, email, password):
        logger.warning(f"로그인 실패: {email}")
        raise InvalidCredentialsError()

    logger.info(f"로그인 성공: {teacher.id}")
    return settings.AUTH_TOKEN, teacher
