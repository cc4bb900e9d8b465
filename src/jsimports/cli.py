"""CLI entry point for jsimports."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from jsimports import __version__, logger
from jsimports.exceptions import PackageError
from jsimports.extractor import persist_report, scan_paths
from jsimports.logging import configure_logging
from jsimports.settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="jsimports")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    extract_parser = subparsers.add_parser(
        "extract",
        help="List module paths referenced by JavaScript/TypeScript sources",
    )
    extract_parser.add_argument("paths", nargs="+", type=Path, help="Source files or directories")
    extract_parser.add_argument("--output", type=Path, default=None, dest="output_path")
    extract_parser.add_argument(
        "--keep-going",
        action="store_true",
        dest="keep_going",
        help="Record files with malformed literals and continue",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv (list[str] | None): Command-line arguments, defaults to `sys.argv`.

    Returns:
        int: Exit code (0 for success, 1 for error).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != "extract":
        parser.print_help()
        return 0

    if args.keep_going:
        settings = settings.model_copy(update={"fail_fast": False})

    try:
        report = scan_paths(args.paths, settings)
        if args.output_path is None:
            sys.stdout.write(report.model_dump_json(indent=2) + "\n")
        else:
            persist_report(report, args.output_path)
    except PackageError:
        logger.exception("Extraction failed")
        return 1
    except OSError:
        logger.exception("Cannot read sources or write report")
        return 1
    except KeyboardInterrupt:
        logger.info("Extraction aborted by user")
        return 130
    except Exception:
        logger.exception("Unexpected error during extraction")
        return 1

    logger.info(
        "Extraction completed",
        extra={
            "output_path": str(args.output_path) if args.output_path else "-",
            "files": len(report.files),
            "imports": report.import_count,
            "errors": report.errors,
        },
    )
    return 1 if report.errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
