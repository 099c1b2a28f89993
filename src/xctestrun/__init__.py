"""xctestrun: parse .xctestrun files into normalized XCTest run configurations."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("xctestrun")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from xctestrun.api import parse_file, parse_bytes, build_test_configs, validate
from xctestrun.codes import ErrorCode
from xctestrun.contracts import InstalledApp, ValidationIssue, ValidationResult
from xctestrun.kernel.errors import (
    XCTestRunError,
    UnreadableInputError,
    DecodeError,
    MalformedDocumentError,
    SchemaMismatchError,
    UnsupportedFormatVersionError,
    AppNotFoundError,
)
from xctestrun.kernel.scheme import SchemeRecord
from xctestrun.kernel.test_config import NormalizedTestConfig, build_test_config

__all__ = [
    "__version__",
    "parse_file",
    "parse_bytes",
    "build_test_config",
    "build_test_configs",
    "validate",
    "ErrorCode",
    "InstalledApp",
    "ValidationIssue",
    "ValidationResult",
    "SchemeRecord",
    "NormalizedTestConfig",
    "XCTestRunError",
    "UnreadableInputError",
    "DecodeError",
    "MalformedDocumentError",
    "SchemaMismatchError",
    "UnsupportedFormatVersionError",
    "AppNotFoundError",
]
