"""Read xctestrun files and dispatch to the decoder for their format version."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Callable, Dict, Iterable, List, Union

from xctestrun.kernel.errors import UnreadableInputError, UnsupportedFormatVersionError
from xctestrun.kernel.format import detect_format_version
from xctestrun.kernel.format_v1 import parse_format_v1
from xctestrun.kernel.format_v2 import parse_format_v2
from xctestrun.kernel.scheme import SchemeRecord

logger = logging.getLogger(__name__)

SUPPORTED_FORMAT_VERSIONS = (1, 2)

DECODERS: Dict[int, Callable[[bytes], List[SchemeRecord]]] = {
    1: parse_format_v1,
    2: parse_format_v2,
}


def read_xctestrun_bytes(source: Union[Path, BinaryIO]) -> bytes:
    """Read the raw bytes of an xctestrun file from a path or binary stream."""
    if isinstance(source, Path):
        try:
            return source.read_bytes()
        except OSError as e:
            raise UnreadableInputError(f"failed to open xctestrun file: {e}") from e
    try:
        return source.read()
    except OSError as e:
        raise UnreadableInputError(f"unable to read xctestrun content: {e}") from e


def decode_xctestrun(
    content: bytes,
    supported_versions: Iterable[int] = SUPPORTED_FORMAT_VERSIONS,
) -> List[SchemeRecord]:
    """Detect the format version of the content and decode its schemes."""
    supported = tuple(supported_versions)
    unknown = [v for v in supported if v not in DECODERS]
    if unknown:
        raise ValueError(f"no decoder for requested format versions: {unknown}")
    version = detect_format_version(content)
    if version not in supported:
        raise UnsupportedFormatVersionError(version, supported)

    schemes = DECODERS[version](content)
    logger.debug("decoded %d schemes from format version %d xctestrun", len(schemes), version)
    return schemes


def load_xctestrun(
    source: Union[Path, BinaryIO],
    supported_versions: Iterable[int] = SUPPORTED_FORMAT_VERSIONS,
) -> List[SchemeRecord]:
    """Read and decode an xctestrun file."""
    return decode_xctestrun(read_xctestrun_bytes(source), supported_versions)
