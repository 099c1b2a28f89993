"""Public models exchanged with callers of the xctestrun package."""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class InstalledApp(BaseModel):
    """An app installed on the device, as reported by the installation proxy."""
    display_name: str = Field(validation_alias=AliasChoices("display_name", "CFBundleName", "displayName"))
    bundle_identifier: str = Field(
        validation_alias=AliasChoices("bundle_identifier", "CFBundleIdentifier", "bundleIdentifier")
    )

    model_config = ConfigDict(extra="ignore", frozen=True)


class ValidationIssue(BaseModel):
    """A single validation issue (error or warning)."""
    code: str  # e.g., "UNSUPPORTED_FORMAT_VERSION", "SCHEMA_MISMATCH", "APP_NOT_FOUND"
    message: str
    scheme_index: Optional[int] = None  # Position of the affected scheme in the parsed list
    app_name: Optional[str] = None  # For APP_NOT_FOUND warnings


class ValidationResult(BaseModel):
    """Result of validation/preflight check of an xctestrun file."""
    ok: bool  # True if no errors (warnings don't block)
    format_version: Optional[int] = None
    scheme_count: int = 0
    errors: List[ValidationIssue]  # Blocking issues
    warnings: List[ValidationIssue]  # Non-blocking issues
