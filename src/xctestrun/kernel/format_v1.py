"""xctestrun FormatVersion 1 decoder.

Version 1 files keep the test configuration under a top-level key named after
the scheme (e.g. "RunnerTests"), next to the metadata block. The key is not
known up front, so the document is decoded into plain plist values first and
the first dictionary entry is then validated into a SchemeRecord.
"""

from __future__ import annotations

import logging
from typing import List

from pydantic import ValidationError

from xctestrun.kernel.errors import SchemaMismatchError
from xctestrun.kernel.format import METADATA_KEY, load_plist
from xctestrun.kernel.scheme import SchemeRecord

logger = logging.getLogger(__name__)


def parse_format_v1(content: bytes) -> List[SchemeRecord]:
    """Return the scheme of a version 1 document as a one-element list.

    Only the first non-metadata dictionary entry is used; an empty list is
    returned when there is none.
    """
    root = load_plist(content)

    for key, value in root.items():
        if key == METADATA_KEY:
            continue
        if not isinstance(value, dict):
            continue

        try:
            scheme = SchemeRecord.model_validate(value)
        except ValidationError as e:
            raise SchemaMismatchError(f"failed to decode scheme {key}: {e}") from e
        logger.debug("using scheme %r from format version 1 document", key)
        return [scheme]

    logger.debug("no scheme found in format version 1 document")
    return []
