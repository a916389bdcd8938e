from typing import Optional, Tuple

import zstandard  # type: ignore
from pydantic import ValidationError

from pkg.logger.logger import Logger
from pkg.zstd.interface import IZstd
from internal.vex.type import CsafDocument, PublishInput
from internal.vex.errors import ErrDecodeFailure, ErrMalformedInput
from internal.vex.constant import MSG_DECODE_FAILED, MSG_MALFORMED_INPUT


def derive_identifier(input_data: PublishInput, logger: Optional[Logger] = None) -> str:
    """Explicit identifier wins; otherwise use the CSAF tracking id."""
    if input_data.advisory:
        return input_data.advisory

    try:
        doc = CsafDocument.model_validate_json(input_data.data)
    except ValidationError as e:
        if logger:
            logger.warning(
                f"internal.vex.usecase.helpers: {MSG_MALFORMED_INPUT}: "
                f"{e.error_count()} validation error(s)"
            )
        raise ErrMalformedInput(MSG_MALFORMED_INPUT) from e

    return doc.document.tracking.id


def compress_payload(
    codec: IZstd, data: bytes, level: int, logger: Optional[Logger] = None
) -> Tuple[bytes, bool]:
    """Compress data, falling back to the original bytes on any codec error.

    Returns:
        (bytes to persist, compressed flag)
    """
    try:
        return codec.compress(data, level), level != 0
    except Exception as e:
        if logger:
            logger.warning(
                f"internal.vex.usecase.helpers: Compression failed, storing uncompressed: {e}"
            )
        return data, False


def decompress_payload(
    codec: IZstd, key: str, data: bytes, logger: Optional[Logger] = None
) -> bytes:
    try:
        return codec.decompress(data)
    except zstandard.ZstdError as e:
        if logger:
            logger.error(
                f"internal.vex.usecase.helpers: Unable to decode object {key}: {e}"
            )
        raise ErrDecodeFailure(MSG_DECODE_FAILED) from e
