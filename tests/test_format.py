import plistlib

import pytest

from xctestrun.codes import ErrorCode
from xctestrun.kernel.errors import DecodeError, MalformedDocumentError
from xctestrun.kernel.format import detect_format_version, load_plist


def test_detect_format_version_v1(v1_path):
    assert detect_format_version(v1_path.read_bytes()) == 1


def test_detect_format_version_v2(v2_path):
    assert detect_format_version(v2_path.read_bytes()) == 2


def test_detect_format_version_binary_plist():
    content = plistlib.dumps(
        {"__xctestrun_metadata__": {"FormatVersion": 2}, "Other": [1, 2]},
        fmt=plistlib.FMT_BINARY,
    )
    assert detect_format_version(content) == 2


def test_missing_metadata_is_version_zero():
    content = plistlib.dumps({"RunnerTests": {"TestBundlePath": "x.xctest"}})
    assert detect_format_version(content) == 0


def test_missing_format_version_key_is_version_zero():
    content = plistlib.dumps({"__xctestrun_metadata__": {"ContainerInfo": {}}})
    assert detect_format_version(content) == 0


def test_indented_xml_prolog_is_accepted(v1_path):
    content = b"\n\t\t  " + v1_path.read_bytes()
    assert detect_format_version(content) == 1


def test_garbage_bytes_raise_malformed_document():
    with pytest.raises(MalformedDocumentError) as excinfo:
        detect_format_version(b"this is not a plist")
    assert isinstance(excinfo.value, DecodeError)
    assert excinfo.value.code == ErrorCode.MALFORMED_DOCUMENT


def test_truncated_xml_raises_malformed_document(v1_path):
    content = v1_path.read_bytes()[:200]
    with pytest.raises(MalformedDocumentError):
        detect_format_version(content)


def test_non_dict_root_raises_malformed_document():
    with pytest.raises(MalformedDocumentError) as excinfo:
        load_plist(plistlib.dumps(["a", "b"]))
    assert "expected dict" in str(excinfo.value)


def test_non_dict_metadata_raises_malformed_document():
    content = plistlib.dumps({"__xctestrun_metadata__": "1"})
    with pytest.raises(MalformedDocumentError):
        detect_format_version(content)


def test_load_plist_keeps_document_order():
    content = b"""<?xml version="1.0" encoding="UTF-8"?>
<plist version="1.0">
<dict>
	<key>Zeta</key><dict/>
	<key>Alpha</key><dict/>
	<key>__xctestrun_metadata__</key><dict/>
</dict>
</plist>
"""
    assert list(load_plist(content)) == ["Zeta", "Alpha", "__xctestrun_metadata__"]


def test_invalid_date_raises_malformed_document():
    content = b"""<?xml version="1.0" encoding="UTF-8"?>
<plist version="1.0">
<dict>
	<key>RunnerTests</key>
	<dict>
		<key>Created</key><date>not-a-date</date>
	</dict>
	<key>__xctestrun_metadata__</key>
	<dict>
		<key>FormatVersion</key><integer>1</integer>
	</dict>
</dict>
</plist>
"""
    with pytest.raises(MalformedDocumentError) as excinfo:
        detect_format_version(content)
    assert excinfo.value.code == ErrorCode.MALFORMED_DOCUMENT


def test_snake_case_format_version_key_is_ignored():
    content = plistlib.dumps({"__xctestrun_metadata__": {"format_version": 1}})
    assert detect_format_version(content) == 0
