from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse


# PUBLIC_INTERFACE
class ApiError(Exception):
    """
    An error the client is expected to show to the user.

    Rendered by ``api_error_handler`` as ``{"error": message}`` with the given status.
    """

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
