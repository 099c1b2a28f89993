"""xctestrun CLI: inspect and verify .xctestrun files."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import Optional


def main():
    """Main CLI entry point for xctestrun commands."""
    # Get version for --version argument (handle PackageNotFoundError)
    try:
        xctestrun_version = get_version("xctestrun")
    except PackageNotFoundError:
        xctestrun_version = "dev"

    parser = argparse.ArgumentParser(
        prog="xctestrun",
        description="xctestrun: normalize .xctestrun files into XCTest run configurations"
    )
    parser.add_argument("--version", action="version", version=f"xctestrun {xctestrun_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )
    parent_parser.add_argument(
        "--apps",
        type=Path,
        default=None,
        help="Path to a JSON list of installed apps (CFBundleName/CFBundleIdentifier)"
    )
    parent_parser.add_argument(
        "--format-version",
        dest="format_versions",
        type=int,
        choices=[1, 2],
        action="append",
        default=None,
        help="Accepted FormatVersion (repeatable, defaults to 1 and 2)"
    )
    parent_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory for the JSON result (defaults to stdout)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # configs command
    configs_parser = subparsers.add_parser(
        "configs",
        help="Print the normalized test configs of an xctestrun file",
        parents=[parent_parser]
    )
    configs_parser.add_argument(
        "xctestrun_path",
        type=Path,
        help="Path to the .xctestrun file"
    )
    configs_parser.add_argument(
        "--udid",
        default=None,
        help="Device UDID recorded in the configs"
    )
    configs_parser.add_argument(
        "--strict-bundle-id",
        action="store_true",
        help="Fail when the UI target app is not in --apps"
    )

    # verify command
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify an xctestrun file",
        parents=[parent_parser]
    )
    verify_parser.add_argument(
        "xctestrun_path",
        type=Path,
        help="Path to the .xctestrun file"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else (logging.ERROR if args.quiet else logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    from .api import load_installed_apps
    from ._internal.io.xctestrun_file import SUPPORTED_FORMAT_VERSIONS
    from ._internal.canonical_json import canonical_dumps

    supported_versions = tuple(args.format_versions) if args.format_versions else SUPPORTED_FORMAT_VERSIONS

    def _write_output(content: str, output_dir: Optional[Path], filename: str) -> None:
        if output_dir is not None:
            output_dir.mkdir(parents=True, exist_ok=True)
            out_path = output_dir / filename
            out_path.write_text(content + "\n", encoding="utf-8")
            if not args.quiet:
                print(f"  Output: {out_path}")
        elif not args.quiet:
            print(content)

    if args.command == "configs":
        from .api import build_test_configs

        try:
            installed_apps = load_installed_apps(args.apps) if args.apps else None
            configs = build_test_configs(
                args.xctestrun_path,
                device=args.udid,
                listener=None,
                installed_apps=installed_apps,
                strict_bundle_id=args.strict_bundle_id,
                supported_versions=supported_versions,
            )
            payload = [
                config.model_dump(mode="json", exclude={"device", "listener"})
                for config in configs
            ]
            if args.output_dir is not None and not args.quiet:
                print(f"[OK] {len(configs)} test configs")
            _write_output(canonical_dumps(payload), args.output_dir, "configs.json")
            sys.exit(0)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    elif args.command == "verify":
        from .api import validate

        try:
            installed_apps = load_installed_apps(args.apps) if args.apps else None
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        result = validate(args.xctestrun_path, installed_apps=installed_apps, supported_versions=supported_versions)
        if args.output_dir is not None:
            _write_output(canonical_dumps(result.model_dump()), args.output_dir, "verify.json")
        if not args.quiet:
            status = "OK" if result.ok else "FAILED"
            print(f"[{status}] Verification complete")
            print(f"  Status: {status}")
            print(f"  Format version: {result.format_version}")
            print(f"  Schemes: {result.scheme_count}")
            print(f"  Errors: {len(result.errors)}")
            print(f"  Warnings: {len(result.warnings)}")
            for issue in result.errors + result.warnings:
                print(f"  - [{issue.code}] {issue.message}")
        if not result.ok:
            sys.exit(1)


if __name__ == "__main__":
    main()
