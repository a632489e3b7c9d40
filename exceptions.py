"""
서비스 계층 예외

서비스는 아래 예외만 던지고, HTTP 상태 코드 변환은 main.register_exception_handlers 가 담당한다.
    ValidationError     -> 400
    NotFoundError       -> 404
    UnauthorizedError   -> 403
    InternalServerError -> 500
"""

from fastapi import status


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "요청을 처리하는 중 오류가 발생했습니다."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "잘못된 요청입니다."


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "요청한 리소스를 찾을 수 없습니다."


class UnauthorizedError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "해당 리소스에 대한 권한이 없습니다."


class InternalServerError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "서버 내부 오류가 발생했습니다."
