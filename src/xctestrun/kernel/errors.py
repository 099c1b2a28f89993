"""Exceptions raised while reading, decoding and normalizing xctestrun files."""

from typing import Optional

from xctestrun.codes import ErrorCode

ISSUES_URL = "https://github.com/danielpaulus/go-ios/issues"


class XCTestRunError(ValueError):
    """Base class for all xctestrun errors."""

    code: ErrorCode = ErrorCode.SCHEMA_MISMATCH

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(message)


class UnreadableInputError(XCTestRunError):
    """Raised when the xctestrun source cannot be opened or read."""

    code = ErrorCode.UNREADABLE_INPUT


class DecodeError(XCTestRunError):
    """Raised when the property list cannot be decoded into the expected shape."""


class MalformedDocumentError(DecodeError):
    """Raised when the bytes are not a property list with a dictionary root."""

    code = ErrorCode.MALFORMED_DOCUMENT


class SchemaMismatchError(DecodeError):
    """Raised when a recognized format version has the wrong nested structure."""

    code = ErrorCode.SCHEMA_MISMATCH


class UnsupportedFormatVersionError(XCTestRunError):
    """Raised when the FormatVersion marker is absent or not supported."""

    code = ErrorCode.UNSUPPORTED_FORMAT_VERSION

    def __init__(self, version: int, supported_versions=(1, 2)):
        self.version = version
        self.supported_versions = tuple(supported_versions)
        supported = " and ".join(str(v) for v in self.supported_versions)
        super().__init__(
            f"xctestrun currently only supports .xctestrun files in formatVersion {supported}: "
            f"The formatVersion of your xctestrun file is {version}, "
            f"feel free to open an issue in {ISSUES_URL} to add support"
        )


class AppNotFoundError(XCTestRunError):
    """Raised when no installed app matches the UI target app name."""

    code = ErrorCode.APP_NOT_FOUND

    def __init__(self, app_name: str):
        self.app_name = app_name
        super().__init__(f"app {app_name} not found")
