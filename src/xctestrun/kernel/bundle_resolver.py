"""Resolve the bundle id of a UI test target app from the installed apps."""

import posixpath
from typing import Iterable, Tuple

from xctestrun.contracts import InstalledApp
from xctestrun.kernel.errors import AppNotFoundError

APP_SUFFIX = ".app"


def base_name(path: str) -> str:
    """Last path segment, ignoring trailing slashes."""
    return posixpath.basename((path or "").rstrip("/"))


def app_name_from_path(ui_target_app_path: str) -> str:
    """'__TESTROOT__/Debug-iphoneos/FakeApp.app' -> 'FakeApp'."""
    name = base_name(ui_target_app_path)
    if name.endswith(APP_SUFFIX):
        name = name[: -len(APP_SUFFIX)]
    return name


def find_bundle_id(installed_apps: Iterable[InstalledApp], ui_target_app_path: str) -> Tuple[str, bool]:
    """Return (bundle_id, found). The first app whose display name equals the app name wins."""
    app_name = app_name_from_path(ui_target_app_path)
    for app in installed_apps:
        if app.display_name == app_name:
            return app.bundle_identifier, True
    return "", False


def get_bundle_id(installed_apps: Iterable[InstalledApp], ui_target_app_path: str) -> str:
    """Like find_bundle_id, but raises AppNotFoundError when nothing matches."""
    bundle_id, found = find_bundle_id(installed_apps, ui_target_app_path)
    if not found:
        raise AppNotFoundError(app_name_from_path(ui_target_app_path))
    return bundle_id
