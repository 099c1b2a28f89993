"""xctestrun FormatVersion 2 decoder (Xcode test plans)."""

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from xctestrun.codes import ErrorCode
from xctestrun.kernel.errors import SchemaMismatchError
from xctestrun.kernel.format import METADATA_KEY, FormatMetadata, load_plist
from xctestrun.kernel.scheme import SchemeRecord

logger = logging.getLogger(__name__)


class ContainerInfo(BaseModel):
    container_name: str = Field("", alias="ContainerName")
    scheme_name: Optional[str] = Field(None, alias="SchemeName")

    model_config = ConfigDict(extra="ignore")


class TestConfiguration(BaseModel):
    """One entry of TestConfigurations, usually the "Test Scheme Action"."""
    name: Optional[str] = Field(None, alias="Name")
    test_targets: List[SchemeRecord] = Field(default_factory=list, alias="TestTargets")

    model_config = ConfigDict(extra="ignore")


class TestPlan(BaseModel):
    name: Optional[str] = Field(None, alias="Name")
    is_default: bool = Field(False, alias="IsDefault")

    model_config = ConfigDict(extra="ignore")


class XCTestRunV2(BaseModel):
    """Fixed-shape version 2 document."""
    container_info: ContainerInfo = Field(default_factory=ContainerInfo, alias="ContainerInfo")
    test_configurations: List[TestConfiguration] = Field(default_factory=list, alias="TestConfigurations")
    test_plan: Optional[TestPlan] = Field(None, alias="TestPlan")
    metadata: FormatMetadata = Field(default_factory=FormatMetadata, alias=METADATA_KEY)

    model_config = ConfigDict(extra="ignore")


def parse_format_v2(content: bytes) -> List[SchemeRecord]:
    """Return the test targets of the first test configuration, in file order.

    Raises SchemaMismatchError if the document does not have the version 2
    shape or has no test configuration at all.
    """
    root = load_plist(content)
    try:
        document = XCTestRunV2.model_validate(root)
    except ValidationError as e:
        raise SchemaMismatchError(f"failed to decode format version 2 document: {e}") from e

    if not document.test_configurations:
        raise SchemaMismatchError(
            "format version 2 document has no TestConfigurations",
            code=ErrorCode.NO_TEST_CONFIGURATIONS,
        )

    if len(document.test_configurations) > 1:
        logger.debug(
            "format version 2 document has %d test configurations, using the first",
            len(document.test_configurations),
        )
    targets = document.test_configurations[0].test_targets
    logger.debug("decoded %d test targets from format version 2 document", len(targets))
    return list(targets)
