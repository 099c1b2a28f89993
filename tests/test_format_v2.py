import plistlib

import pytest

from xctestrun.codes import ErrorCode
from xctestrun.kernel.errors import SchemaMismatchError
from xctestrun.kernel.format_v2 import XCTestRunV2, parse_format_v2


def _v2_document(test_configurations) -> bytes:
    return plistlib.dumps({
        "ContainerInfo": {"ContainerName": "MyApp", "SchemeName": "MyApp"},
        "TestConfigurations": test_configurations,
        "TestPlan": {"IsDefault": True, "Name": "MyApp"},
        "__xctestrun_metadata__": {"FormatVersion": 2},
    })


def test_parse_v2_returns_targets_in_order(v2_path):
    schemes = parse_format_v2(v2_path.read_bytes())
    assert [s.test_bundle_path for s in schemes] == [
        "__TESTHOST__/PlugIns/FakeApp3Tests.xctest",
        "__TESTHOST__/PlugIns/FakeApp3UITests.xctest",
    ]


def test_parse_v2_unit_test_target(v2_path):
    unit = parse_format_v2(v2_path.read_bytes())[0]
    assert unit.test_host_bundle_identifier == "saucelabs.FakeApp3"
    assert unit.is_ui_test_bundle is False
    assert unit.ui_target_app_path is None
    assert unit.testing_environment_variables == {
        "DYLD_INSERT_LIBRARIES": "__TESTHOST__/Frameworks/libXCTestBundleInject.dylib",
        "XCInjectBundleInto": "unused",
    }


def test_parse_v2_ui_test_target(v2_path):
    ui = parse_format_v2(v2_path.read_bytes())[1]
    assert ui.test_host_bundle_identifier == "saucelabs.FakeApp3UITests.xctrunner"
    assert ui.is_ui_test_bundle is True
    assert ui.ui_target_app_path == "__TESTROOT__/Debug-iphoneos/FakeApp3.app"
    assert ui.ui_target_app_environment_variables == {"APP_DISTRIBUTOR_ID_OVERRIDE": "com.apple.AppStore"}
    assert ui.testing_environment_variables == {}


def test_parse_v2_document_model(v2_path):
    document = XCTestRunV2.model_validate(plistlib.loads(v2_path.read_bytes()))
    assert document.container_info.container_name == "FakeApp3"
    assert document.test_plan.is_default is True
    assert document.metadata.format_version == 2
    assert document.test_configurations[0].name == "Test Scheme Action"


def test_parse_v2_uses_first_test_configuration_only():
    content = _v2_document([
        {"TestTargets": [{"TestBundlePath": "a.xctest"}, {"TestBundlePath": "b.xctest"}]},
        {"TestTargets": [{"TestBundlePath": "c.xctest"}]},
    ])
    assert [s.test_bundle_path for s in parse_format_v2(content)] == ["a.xctest", "b.xctest"]


def test_parse_v2_empty_test_targets():
    assert parse_format_v2(_v2_document([{"TestTargets": []}])) == []


def test_parse_v2_without_test_configurations_is_reported(fixtures_dir):
    content = (fixtures_dir / "metadata_only_v2.xctestrun").read_bytes()
    with pytest.raises(SchemaMismatchError) as excinfo:
        parse_format_v2(content)
    assert excinfo.value.code == ErrorCode.NO_TEST_CONFIGURATIONS


def test_parse_v2_structural_mismatch():
    content = plistlib.dumps({
        "TestConfigurations": {"TestTargets": []},
        "__xctestrun_metadata__": {"FormatVersion": 2},
    })
    with pytest.raises(SchemaMismatchError) as excinfo:
        parse_format_v2(content)
    assert excinfo.value.code == ErrorCode.SCHEMA_MISMATCH


def test_parse_v2_is_idempotent(v2_path):
    content = v2_path.read_bytes()
    assert parse_format_v2(content) == parse_format_v2(content)
