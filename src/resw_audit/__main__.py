"""CLI entry-point for resw_audit.

Usage:
    python -m resw_audit --config resw-audit.yaml
    python -m resw_audit --root . --source-folder App --source-folder App.Core \\
        --lines-folder App.Core/Strings --reference en-US/Resources.resw
    python -m resw_audit unused --config resw-audit.yaml [--json]
    python -m resw_audit locales --config resw-audit.yaml [--exempt NewsContent]
    python -m resw_audit validate <result.json>
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from resw_audit import __version__
from resw_audit.errors import AuditError
from resw_audit.utils.exit_codes import ExitCode
from resw_audit.utils.json_norm import stable_json_dump


def _add_audit_arguments(p: argparse.ArgumentParser, *, suppress: bool = False) -> None:
    # Subcommand copies must not clobber values given before the subcommand.
    def default(value):
        return argparse.SUPPRESS if suppress else value

    p.add_argument(
        "--config",
        type=Path,
        default=default(None),
        help="YAML config file; command-line flags override its settings.",
    )
    p.add_argument("--root", type=Path, default=default(None), help="Project root directory.")
    p.add_argument(
        "--source-folder",
        dest="source_folders",
        action="append",
        default=default(None),
        metavar="DIR",
        help="Source folder to scan recursively, relative to root (repeatable).",
    )
    p.add_argument(
        "--ext",
        dest="source_extensions",
        action="append",
        default=default(None),
        metavar="EXT",
        help="Source file extension to include, e.g. cs (repeatable).",
    )
    p.add_argument(
        "--ignore-file",
        dest="ignore_files",
        action="append",
        default=default(None),
        metavar="NAME",
        help="File name to skip while scanning sources (repeatable).",
    )
    p.add_argument(
        "--ignore-dir",
        dest="ignore_dirs",
        action="append",
        default=default(None),
        metavar="NAME",
        help="Directory name whose contents are not scanned, e.g. bin (repeatable).",
    )
    p.add_argument(
        "--lines-folder",
        type=Path,
        default=default(None),
        help="Folder holding the locale documents, relative to root.",
    )
    p.add_argument(
        "--reference",
        dest="reference_file",
        type=Path,
        default=default(None),
        help="Reference document, relative to the lines folder.",
    )
    p.add_argument(
        "--exempt",
        dest="exempt_keys",
        action="append",
        default=default(None),
        metavar="KEY",
        help="Key never reported as missed (repeatable).",
    )
    p.add_argument("--workers", type=int, default=default(None), help="Worker pool size.")
    p.add_argument(
        "--fail-fast",
        dest="fail_fast",
        action="store_true",
        default=default(None),
        help="Abort on the first unreadable source or locale file.",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=default(False),
        help="Print the audit result as JSON instead of text.",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        default=default(False),
        help="Exit with 1 when any finding or per-file error is reported.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default(False),
        help="Enable debug logging on stderr.",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="resw-audit",
        description="Find unused, missing and untranslated .resw localization keys.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    _add_audit_arguments(p)
    sub = p.add_subparsers(dest="command")

    unused_p = sub.add_parser("unused", help="Only report reference keys unused in source.")
    _add_audit_arguments(unused_p, suppress=True)

    locales_p = sub.add_parser("locales", help="Only diff locale files against the reference.")
    _add_audit_arguments(locales_p, suppress=True)

    val_p = sub.add_parser(
        "validate",
        help="Validate a JSON audit result against the bundled schema.",
    )
    val_p.add_argument("instance", type=Path, help="Path to the JSON file to validate.")

    return p


def _config_from_args(args: argparse.Namespace):
    from resw_audit.core.config import AuditConfig

    overrides = {
        "root": args.root,
        "source_folders": args.source_folders,
        "source_extensions": args.source_extensions,
        "ignore_files": args.ignore_files,
        "ignore_dirs": args.ignore_dirs,
        "lines_folder": args.lines_folder,
        "reference_file": args.reference_file,
        "exempt_keys": args.exempt_keys,
        "workers": args.workers,
        "fail_fast": args.fail_fast,
    }
    if args.config is not None:
        return AuditConfig.from_yaml(args.config).with_overrides(**overrides)
    return AuditConfig.from_mapping(overrides)


def _handle_validate(args: argparse.Namespace) -> int:
    import jsonschema

    from resw_audit.api import RESULT_SCHEMA
    from resw_audit.contracts.load import validate_file

    try:
        validate_file(args.instance, RESULT_SCHEMA)
    except jsonschema.ValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print("OK")
    return ExitCode.SUCCESS


def _handle_audit(args: argparse.Namespace) -> int:
    from resw_audit.api import audit_project
    from resw_audit.reports.text import write_text_report

    try:
        config = _config_from_args(args)
        result, result_dict = audit_project(
            config,
            unused=args.command != "locales",
            locales=args.command != "unused",
        )
    except AuditError as e:
        # Bad configuration, unreadable reference catalog, or (with
        # --fail-fast) the first unreadable file.
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.json_out:
        stable_json_dump(result_dict, sys.stdout)
    else:
        write_text_report(result, sys.stdout)
        for err in result.errors:
            print(f"warning: {err}", file=sys.stderr)

    if args.strict and (result.has_findings or result.errors):
        return ExitCode.VIOLATION
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (see ``utils.exit_codes``)."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "validate":
        return _handle_validate(args)
    return _handle_audit(args)


if __name__ == "__main__":
    raise SystemExit(main())
