"""VEX publish and lookup API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status  # type: ignore
from fastapi.responses import PlainTextResponse  # type: ignore

from internal.api.dependencies import get_vex_usecase, read_limited_body
from internal.vex.constant import MSG_STORED
from internal.vex.errors import (
    ErrAdvisoryNotFound,
    ErrDecodeFailure,
    ErrMalformedInput,
    ErrMissingParameter,
    ErrStoreFailure,
    ErrUnsupportedQuery,
)
from internal.vex.interface import IVexUseCase
from internal.vex.type import LookupInput, PublishInput

router = APIRouter(prefix="/api/v1")

ADVISORY_MEDIA_TYPE = "application/octet-stream"


@router.get("/vex")
async def query_vex(
    advisory: Optional[str] = None,
    cve: Optional[str] = None,
    usecase: IVexUseCase = Depends(get_vex_usecase),
) -> Response:
    """Fetch a stored advisory by its identifier."""
    try:
        result = await usecase.lookup(LookupInput(advisory=advisory, cve=cve))
    except (ErrMissingParameter, ErrUnsupportedQuery) as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except ErrAdvisoryNotFound:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    except (ErrDecodeFailure, ErrStoreFailure) as e:
        return PlainTextResponse(
            str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return Response(content=result.data, media_type=ADVISORY_MEDIA_TYPE)


@router.post("/vex")
async def publish_vex(
    request: Request,
    advisory: Optional[str] = None,
    usecase: IVexUseCase = Depends(get_vex_usecase),
) -> Response:
    """Store an advisory under the given or embedded identifier."""
    data = await read_limited_body(request)

    try:
        result = await usecase.publish(PublishInput(data=data, advisory=advisory))
    except ErrMalformedInput as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except ErrStoreFailure as e:
        return PlainTextResponse(
            str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return PlainTextResponse(
        MSG_STORED.format(size=result.size), status_code=status.HTTP_201_CREATED
    )
