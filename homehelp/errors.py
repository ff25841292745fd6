"""Domain errors raised by services and rendered directly by FastAPI"""

from fastapi import HTTPException


class NotFoundError(HTTPException):
    """Referenced entity does not exist"""

    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=404, detail=detail)


class UnauthenticatedError(HTTPException):
    """Operation requires an identity and none was resolved"""

    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(HTTPException):
    """Identity does not own the resource being mutated"""

    def __init__(self, detail: str = "Forbidden"):
        super().__init__(status_code=403, detail=detail)


class ValidationError(HTTPException):
    """Malformed or missing input"""

    def __init__(self, detail: str = "Invalid input"):
        super().__init__(status_code=422, detail=detail)


class ConflictError(HTTPException):
    """Write would collide with existing state (taken slot, duplicate username)"""

    def __init__(self, detail: str = "Conflict"):
        super().__init__(status_code=409, detail=detail)
