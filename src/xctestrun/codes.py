"""Error code constants for xctestrun errors and validation issues.

These constants prevent stringly-typed error codes and ensure
client code uses the correct codes.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error and warning codes."""

    # Errors (blocking)
    UNREADABLE_INPUT = "UNREADABLE_INPUT"
    MALFORMED_DOCUMENT = "MALFORMED_DOCUMENT"
    UNSUPPORTED_FORMAT_VERSION = "UNSUPPORTED_FORMAT_VERSION"
    SCHEMA_MISMATCH = "SCHEMA_MISMATCH"
    NO_TEST_CONFIGURATIONS = "NO_TEST_CONFIGURATIONS"

    # Warnings (non-blocking)
    APP_NOT_FOUND = "APP_NOT_FOUND"
    NO_SCHEMES = "NO_SCHEMES"
