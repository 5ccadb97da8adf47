"""
services/errors.py

- 서비스 계층에서 발생시키는 도메인 예외 모음
- 각 예외는 HTTP 상태 코드와 사람이 읽을 수 있는 메시지를 가진다
- middlewares/error_handler.py 에서 {"error": message} 형태로 변환
"""


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ✅ 400: 필수값 누락 / 잘못된 값
class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


# ✅ 400: 이메일 중복
class ConflictError(AppError):
    status_code = 400
    default_message = "Student with this email already exists"


# ✅ 401: 토큰 없음
class UnauthorizedError(AppError):
    status_code = 401
    default_message = "Access token required"


# ✅ 401: 로그인 실패
class InvalidCredentialsError(AppError):
    status_code = 401
    default_message = "Invalid credentials"


# ✅ 403: 토큰은 있으나 유효하지 않음
class ForbiddenError(AppError):
    status_code = 403
    default_message = "Invalid or expired token"


# ✅ 404: 학생 없음
class NotFoundError(AppError):
    status_code = 404
    default_message = "Student not found"


# ✅ 500: 저장 실패 (읽기 실패는 시드 데이터로 대체되므로 예외 아님)
class StorageError(AppError):
    status_code = 500
    default_message = "Failed to save database"
