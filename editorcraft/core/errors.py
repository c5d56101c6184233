from fastapi import status


class EditorCraftError(Exception):
    """Базовая ошибка домена, которую API превращает в {"error": message}"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(EditorCraftError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(EditorCraftError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(EditorCraftError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(EditorCraftError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(EditorCraftError):
    status_code = status.HTTP_409_CONFLICT


class UpstreamFailure(EditorCraftError):
    """Внешнее хранилище или БД недоступны; подробности только в логах"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
