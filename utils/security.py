import hmac

from models.teachers import Teacher


def _same(a: str, b: str) -> bool:
    # 타이밍 안전 비교 (대소문자 구분)
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def verify_credentials(teacher: Teacher, email: str, password: str) -> bool:
    """교사 레코드의 이메일/비밀번호와 정확히 일치하는지 확인 (평문 비교)"""
    email_ok = _same(email, teacher.email)
    password_ok = _same(password, teacher.password)
    return email_ok and password_ok
