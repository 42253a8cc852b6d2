"""
services/exceptions.py

- 서비스 계층에서 발생시키는 도메인 예외
- middlewares/error_handler.py에서 status_code 그대로 JSON 응답으로 변환
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """요청 필드 누락/형식 오류, 업로드 파일 행 오류"""
    status_code = 400


class NotFoundError(AppError):
    """존재하지 않는 레코드 참조"""
    status_code = 404
