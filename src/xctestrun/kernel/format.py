"""Property list decoding and FormatVersion detection for xctestrun files."""

from __future__ import annotations

import logging
import plistlib
from typing import Any, Dict, List, Union
from xml.parsers.expat import ExpatError

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from xctestrun.kernel.errors import MalformedDocumentError

logger = logging.getLogger(__name__)

METADATA_KEY = "__xctestrun_metadata__"

# Values produced by plistlib: scalars, arrays and string-keyed dicts.
PlistValue = Union[str, int, float, bool, bytes, List[Any], Dict[str, Any]]


class FormatMetadata(BaseModel):
    """The metadata block; only FormatVersion is read."""
    format_version: int = Field(0, alias="FormatVersion")

    model_config = ConfigDict(extra="ignore", frozen=True)


class XCTestRunMetadata(BaseModel):
    """Document view that ignores everything except the metadata block."""
    metadata: FormatMetadata = Field(default_factory=FormatMetadata, alias=METADATA_KEY)

    model_config = ConfigDict(extra="ignore")


def load_plist(content: bytes) -> Dict[str, PlistValue]:
    """Decode XML or binary plist bytes into a dict, keeping document key order.

    Raises MalformedDocumentError if the bytes are not a property list or the
    root object is not a dictionary.
    """
    # plistlib sniffs the format from the first bytes, so an indented XML
    # prolog has to be stripped first.
    content = content.lstrip()
    try:
        root = plistlib.loads(content, dict_type=dict)
    except (
        plistlib.InvalidFileException,
        ExpatError,
        ValueError,
        AttributeError,
        TypeError,
        OverflowError,
    ) as e:
        raise MalformedDocumentError(f"failed to parse xctestrun plist: {e}") from e
    if not isinstance(root, dict):
        raise MalformedDocumentError(
            f"failed to parse xctestrun plist: root is {type(root).__name__}, expected dict"
        )
    return root


def detect_format_version(content: bytes) -> int:
    """Return the FormatVersion of an xctestrun document (0 when absent)."""
    root = load_plist(content)
    try:
        metadata = XCTestRunMetadata.model_validate(root)
    except ValidationError as e:
        raise MalformedDocumentError(f"failed to parse format version: {e}") from e
    version = metadata.metadata.format_version
    logger.debug("detected xctestrun format version %d", version)
    return version
