from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.exceptions import RequestValidationError

from ..schemas import EchoOut, EnvOut, HealthOut, HelloOut
from ..settings import Settings, get_settings

router = APIRouter(prefix="/api")


# PUBLIC_INTERFACE
@router.get("/health", response_model=HealthOut, summary="Health Check", tags=["health"])
def health_check() -> HealthOut:
    """
    Health check endpoint.

    Returns:
        {"status": "ok"} whenever the process is serving requests.
    """
    return HealthOut(status="ok")


# PUBLIC_INTERFACE
@router.get("/hello", response_model=HelloOut, summary="Greeting", tags=["misc"])
def hello(name: Optional[str] = Query(None, description="Who to greet; defaults to 'world'")) -> HelloOut:
    return HelloOut(message=f"Hello, {name or 'world'}!")


# PUBLIC_INTERFACE
@router.post(
    "/echo",
    response_model=EchoOut,
    summary="Echo",
    tags=["misc"],
    openapi_extra={
        "requestBody": {"required": True, "content": {"application/json": {"schema": {}}}},
    },
)
async def echo(request: Request) -> EchoOut:
    """
    Return the request body unmodified under the "echoed" key.

    Any JSON value is accepted, ``null`` included; a body that is not JSON is a 422.
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        raise RequestValidationError(
            [
                {
                    "type": "json_invalid",
                    "loc": ("body",),
                    "msg": "JSON decode error",
                    "input": {},
                    "ctx": {"error": str(exc)},
                }
            ]
        ) from exc
    return EchoOut(echoed=payload)


# PUBLIC_INTERFACE
@router.get("/env", response_model=EnvOut, summary="Environment mode", tags=["misc"])
def env(settings: Settings = Depends(get_settings)) -> EnvOut:
    return EnvOut(env=settings.environment)
