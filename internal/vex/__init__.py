from .interface import IVexUseCase
from .type import (
    Config,
    CsafDocument,
    LookupInput,
    LookupOutput,
    PublishInput,
    PublishOutput,
)
from .errors import (
    ErrMalformedInput,
    ErrMissingParameter,
    ErrUnsupportedQuery,
    ErrAdvisoryNotFound,
    ErrDecodeFailure,
    ErrStoreFailure,
)
from .usecase import New, VexUseCase

__all__ = [
    "IVexUseCase",
    "Config",
    "CsafDocument",
    "LookupInput",
    "LookupOutput",
    "PublishInput",
    "PublishOutput",
    "ErrMalformedInput",
    "ErrMissingParameter",
    "ErrUnsupportedQuery",
    "ErrAdvisoryNotFound",
    "ErrDecodeFailure",
    "ErrStoreFailure",
    "New",
    "VexUseCase",
]
