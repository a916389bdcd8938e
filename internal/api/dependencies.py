"""Dependency injection for API endpoints.

Provides FastAPI dependencies for accessing the advisory gateway and
request settings that are initialized once during application startup.
"""

from fastapi import Request, HTTPException, status  # type: ignore

from internal.vex.interface import IVexUseCase


def get_vex_usecase(request: Request) -> IVexUseCase:
    """Dependency injection for the advisory gateway.

    Args:
        request: FastAPI request object containing app state

    Returns:
        IVexUseCase: Gateway shared by every request

    Raises:
        HTTPException: If the gateway is not initialized (503 Service Unavailable)
    """
    usecase = getattr(request.app.state, "vex_usecase", None)
    if usecase is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Advisory storage is not available. The service may still be starting up or failed to initialize.",
        )
    return usecase


async def read_limited_body(request: Request) -> bytes:
    """Read the request body, rejecting anything over the configured limit.

    Raises:
        HTTPException: 413 when the body is larger than max_payload_bytes
    """
    limit = request.app.state.max_payload_bytes

    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"Payload exceeds {limit} bytes",
        )

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise HTTPException(
                status_code=status.HTTP_413_CONTENT_TOO_LARGE,
                detail=f"Payload exceeds {limit} bytes",
            )
    return bytes(body)
