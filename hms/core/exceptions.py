from fastapi import HTTPException, status

ERROR_NAMES = {
    status.HTTP_400_BAD_REQUEST: "BadRequest",
    status.HTTP_401_UNAUTHORIZED: "Unauthorized",
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "NotFound",
    status.HTTP_409_CONFLICT: "Conflict",
    422: "ValidationError",
    status.HTTP_423_LOCKED: "Locked",
    status.HTTP_429_TOO_MANY_REQUESTS: "TooManyRequests",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "InternalServerError",
}

def error_name(status_code: int) -> str:
    return ERROR_NAMES.get(status_code, "Error")

class AuthenticationError(HTTPException):
    error = "Unauthorized"

    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class AuthorizationError(HTTPException):
    error = "Forbidden"

    def __init__(self, detail: str = "Not enough permissions"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )

class NotFoundError(HTTPException):
    error = "NotFound"

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )

class ValidationError(HTTPException):
    error = "ValidationError"

    def __init__(self, detail: str = "Invalid request"):
        super().__init__(
            status_code=422,
            detail=detail,
        )

class ConflictError(HTTPException):
    error = "Conflict"

    def __init__(self, detail: str = "Request conflicts with the current state"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )
