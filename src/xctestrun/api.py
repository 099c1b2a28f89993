"""Public API for the xctestrun package.

High-level functions that return complete, structured results.
Callers should use these functions instead of importing from _internal.
"""

import json
import os
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterable, List, Optional, Union

from xctestrun.codes import ErrorCode
from xctestrun.contracts import InstalledApp, ValidationIssue, ValidationResult
from xctestrun._internal.io.xctestrun_file import (
    SUPPORTED_FORMAT_VERSIONS,
    decode_xctestrun,
    load_xctestrun,
    read_xctestrun_bytes,
)
from xctestrun.kernel.bundle_resolver import app_name_from_path, find_bundle_id
from xctestrun.kernel.errors import XCTestRunError, UnreadableInputError, UnsupportedFormatVersionError
from xctestrun.kernel.format import detect_format_version
from xctestrun.kernel.scheme import SchemeRecord
from xctestrun.kernel.test_config import NormalizedTestConfig
from xctestrun.kernel.test_config import build_test_configs as _build_test_configs


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def parse_file(
    path: Union[str, os.PathLike, Path],
    supported_versions: Iterable[int] = SUPPORTED_FORMAT_VERSIONS,
) -> List[SchemeRecord]:
    """Parse an .xctestrun file into its scheme records.

    Raises UnreadableInputError, DecodeError or UnsupportedFormatVersionError.
    """
    return load_xctestrun(_normalize_path(path), supported_versions)


def parse_bytes(
    content: Union[bytes, BinaryIO],
    supported_versions: Iterable[int] = SUPPORTED_FORMAT_VERSIONS,
) -> List[SchemeRecord]:
    """Parse xctestrun content given as bytes or a binary stream."""
    if not isinstance(content, (bytes, bytearray)):
        content = read_xctestrun_bytes(content)
    return decode_xctestrun(bytes(content), supported_versions)


def load_installed_apps(
    apps: Union[str, os.PathLike, Path, List[Dict[str, Any]]]
) -> List[InstalledApp]:
    """Load an installed app inventory from a JSON file or a list of dicts.

    Entries may use CFBundleName/CFBundleIdentifier (installation proxy
    output) or display_name/bundle_identifier keys.
    """
    if isinstance(apps, list):
        data = apps
    else:
        try:
            with open(_normalize_path(apps), 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise UnreadableInputError(f"failed to open installed apps file: {e}") from e
    if not isinstance(data, list):
        raise ValueError("installed apps must be a JSON list of objects")
    return [InstalledApp.model_validate(entry) for entry in data]


def build_test_configs(
    path: Union[str, os.PathLike, Path],
    device: Any,
    listener: Any,
    installed_apps: Optional[Iterable[InstalledApp]] = None,
    strict_bundle_id: bool = False,
    supported_versions: Iterable[int] = SUPPORTED_FORMAT_VERSIONS,
) -> List[NormalizedTestConfig]:
    """Parse an .xctestrun file and build one test config per scheme."""
    schemes = parse_file(path, supported_versions)
    return _build_test_configs(
        schemes,
        device,
        listener,
        installed_apps=installed_apps,
        strict_bundle_id=strict_bundle_id,
    )


def validate(
    xctestrun: Union[str, os.PathLike, Path, bytes],
    installed_apps: Optional[Iterable[InstalledApp]] = None,
    supported_versions: Iterable[int] = SUPPORTED_FORMAT_VERSIONS,
) -> ValidationResult:
    """
    Pure validation/preflight function for a single xctestrun file.

    Performs the same decoding that parse_file relies on and reports
    problems as issues instead of raising.

    Args:
        xctestrun: Path to the file, or its raw bytes
        installed_apps: Optional inventory (enables UI target app checks)
        supported_versions: Format versions to accept

    Returns:
        ValidationResult with errors and warnings.

    This is READ-ONLY - no side effects, no file writes, no mutations.
    """
    errors: List[ValidationIssue] = []
    warnings: List[ValidationIssue] = []

    # 1. Read + decode (ERROR)
    format_version: Optional[int] = None
    try:
        if isinstance(xctestrun, (bytes, bytearray)):
            content = bytes(xctestrun)
        else:
            content = read_xctestrun_bytes(_normalize_path(xctestrun))
        format_version = detect_format_version(content)
        schemes = decode_xctestrun(content, supported_versions)
    except UnsupportedFormatVersionError as e:
        errors.append(ValidationIssue(code=e.code.value, message=e.message))
        return ValidationResult(ok=False, format_version=e.version, errors=errors, warnings=warnings)
    except XCTestRunError as e:
        errors.append(ValidationIssue(code=e.code.value, message=e.message))
        return ValidationResult(ok=False, format_version=format_version, errors=errors, warnings=warnings)

    # 2. Empty version 1 documents (WARNING)
    if not schemes:
        warnings.append(ValidationIssue(
            code=ErrorCode.NO_SCHEMES.value,
            message="xctestrun file does not contain any test configuration",
        ))

    # 3. UI target apps (WARNING, if inventory provided)
    if installed_apps is not None:
        apps = list(installed_apps)
        for index, scheme in enumerate(schemes):
            if not scheme.is_ui_test_bundle:
                continue
            _, found = find_bundle_id(apps, scheme.ui_target_app_path or "")
            if not found:
                app_name = app_name_from_path(scheme.ui_target_app_path or "")
                warnings.append(ValidationIssue(
                    code=ErrorCode.APP_NOT_FOUND.value,
                    message=f"app {app_name} not found",
                    scheme_index=index,
                    app_name=app_name,
                ))

    return ValidationResult(
        ok=len(errors) == 0,
        format_version=format_version,
        scheme_count=len(schemes),
        errors=errors,
        warnings=warnings,
    )
