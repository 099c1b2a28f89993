"""Per-test-target configuration block shared by both xctestrun format versions."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SchemeRecord(BaseModel):
    """A single test target as described in an xctestrun file.

    Field aliases are the plist key names. Keys that the test driver does not
    need (BlueprintName, DependentProductPaths, ...) are ignored.
    """
    test_host_bundle_identifier: str = Field("", alias="TestHostBundleIdentifier")
    test_bundle_path: str = Field("", alias="TestBundlePath")
    skip_test_identifiers: List[str] = Field(default_factory=list, alias="SkipTestIdentifiers")
    only_test_identifiers: List[str] = Field(default_factory=list, alias="OnlyTestIdentifiers")
    is_ui_test_bundle: bool = Field(False, alias="IsUITestBundle")
    command_line_arguments: List[str] = Field(default_factory=list, alias="CommandLineArguments")
    environment_variables: Dict[str, Any] = Field(default_factory=dict, alias="EnvironmentVariables")
    testing_environment_variables: Dict[str, Any] = Field(
        default_factory=dict, alias="TestingEnvironmentVariables"
    )
    ui_target_app_environment_variables: Optional[Dict[str, Any]] = Field(
        None, alias="UITargetAppEnvironmentVariables"
    )
    ui_target_app_path: Optional[str] = Field(None, alias="UITargetAppPath")

    model_config = ConfigDict(extra="ignore", frozen=True)
