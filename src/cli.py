"""Command-line interface for abapgit-locate."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from artifacts.load import FindingsInputError
from artifacts.write import (
    ReportWriteError,
    generate_code_quality_report,
    write_repo_metadata,
)
from resolve.finding_resolver import create_finding_resolver, expected_filename
from rules.config import ConfigError, LocateConfig, load_config
from rules.folder_logic import resolve_repo_folder_logic
from rules.package_dir import package_dir

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _add_common_paths(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Repository root (default: .)",
    )


def _add_folder_logic_override(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--folder-logic",
        default=None,
        help="Folder logic override: prefix, full or full-with-root",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="abaplocate")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    report_parser = subparsers.add_parser(
        "report", help="Write a GitLab Code Quality report from ATC findings"
    )
    report_parser.add_argument("findings", help="ATC findings JSON file")
    _add_common_paths(report_parser)
    report_parser.add_argument(
        "--out",
        default=None,
        help="Report file (default: config report_file under root)",
    )
    report_parser.add_argument(
        "--src-dir",
        default=None,
        help="Source directory relative to root (default: config src_dir)",
    )
    report_parser.add_argument(
        "--jobs",
        type=int,
        default=None,
        help="Maximum concurrent resolutions (default: config max_workers)",
    )

    locate_parser = subparsers.add_parser(
        "locate", help="Resolve one object and method-relative line"
    )
    locate_parser.add_argument("object_type", help="Object type, e.g. CLAS")
    locate_parser.add_argument("object_name", help="Object name, e.g. ZCL_FOO")
    _add_common_paths(locate_parser)
    locate_parser.add_argument(
        "--line", type=int, default=1, help="Method-relative line (default: 1)"
    )
    locate_parser.add_argument("--method", default=None, help="Method name hint")

    folder_logic_parser = subparsers.add_parser(
        "folder-logic", help="Print the effective folder logic"
    )
    _add_common_paths(folder_logic_parser)
    _add_folder_logic_override(folder_logic_parser)

    package_dir_parser = subparsers.add_parser(
        "package-dir", help="Print the directory of a package hierarchy"
    )
    package_dir_parser.add_argument(
        "packages", nargs="+", help="Package hierarchy, root package first"
    )
    package_dir_parser.add_argument(
        "--root", default=".", help="Repository root (default: .)"
    )
    _add_folder_logic_override(package_dir_parser)

    metadata_parser = subparsers.add_parser(
        "write-metadata", help="Write .abapgit.xml declaring the folder logic"
    )
    _add_common_paths(metadata_parser)
    _add_folder_logic_override(metadata_parser)

    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _handle_report(
    root: Path,
    config: LocateConfig,
    findings: str,
    out: str | None,
    src_dir: str | None,
    jobs: int | None,
) -> int:
    if src_dir is not None:
        try:
            config = LocateConfig.model_validate(
                {**config.model_dump(), "src_dir": src_dir}
            )
        except ValidationError as exc:
            sys.stderr.write(f"error: invalid --src-dir: {exc}\n")
            return 2
    out_file = Path(out).expanduser().resolve() if out is not None else None

    try:
        summary = generate_code_quality_report(
            root=root,
            findings_path=Path(findings).expanduser(),
            out_file=out_file,
            config=config,
            max_workers=jobs,
        )
    except FindingsInputError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    except ReportWriteError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1

    sys.stdout.write(
        f"{summary['issue_count']} issues exported "
        f"({summary['resolved_count']} resolved) to {summary['report']}\n"
    )
    return 0


def _handle_locate(
    root: Path,
    config: LocateConfig,
    object_type: str,
    object_name: str,
    line: int,
    method: str | None,
) -> int:
    resolver = create_finding_resolver(
        root,
        config.src_dir,
        extensions=config.extensions,
        respect_gitignore=config.respect_gitignore,
    )
    location = resolver.resolve(object_type, object_name, max(line, 1), method)
    if location is None:
        filename = expected_filename(object_type, object_name)
        sys.stderr.write(f"not found: {filename} under {config.src_dir}\n")
        return 1

    sys.stdout.write(f"{location.path}:{location.line}\n")
    return 0


def _handle_folder_logic(root: Path, config: LocateConfig, override: str | None) -> int:
    folder_logic = resolve_repo_folder_logic(
        root, override=override, configured=config.folder_logic
    )
    sys.stdout.write(f"{folder_logic.value}\n")
    return 0


def _handle_package_dir(
    root: Path,
    config: LocateConfig,
    packages: list[str],
    override: str | None,
) -> int:
    folder_logic = resolve_repo_folder_logic(
        root, override=override, configured=config.folder_logic
    )
    sys.stdout.write(f"{package_dir(packages, folder_logic)}\n")
    return 0


def _handle_write_metadata(
    root: Path, config: LocateConfig, override: str | None
) -> int:
    folder_logic = resolve_repo_folder_logic(
        root, override=override, configured=config.folder_logic
    )
    try:
        path = write_repo_metadata(root, folder_logic)
    except ReportWriteError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    sys.stdout.write(f"{path}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    root = Path(args.root).expanduser().resolve()

    try:
        config = load_config(root)
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    if args.command == "report":
        return _handle_report(
            root, config, args.findings, args.out, args.src_dir, args.jobs
        )

    if args.command == "locate":
        return _handle_locate(
            root, config, args.object_type, args.object_name, args.line, args.method
        )

    if args.command == "folder-logic":
        return _handle_folder_logic(root, config, args.folder_logic)

    if args.command == "package-dir":
        return _handle_package_dir(root, config, args.packages, args.folder_logic)

    if args.command == "write-metadata":
        return _handle_write_metadata(root, config, args.folder_logic)

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
