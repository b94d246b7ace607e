from __future__ import annotations

import argparse
import logging
import shlex
import sys
from pathlib import Path

from .config import WrapConfig, default_formatter
from .errors import FormatError, GoWrapError
from .format import FORMATTERS

logger = logging.getLogger(__name__)

_EPILOG = """\
Examples:
  gowrap -p io -t ./metrics.tmpl -o reader_metrics.go Reader
"""


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gowrap",
        description="Generate a Go wrapper for a type from a Jinja2 template.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("type", help="Name of the type to wrap.")
    parser.add_argument("-t", "--template", required=True, help="Template path.")
    parser.add_argument("-o", "--out", required=True, help="Destination path.")
    parser.add_argument(
        "-p",
        "--package",
        default=".",
        help="Package path or pattern to search for the type (default: current package).",
    )
    parser.add_argument(
        "--target-package",
        default=None,
        help="Name of the package hosting the generated code (default: package in the current directory).",
    )
    parser.add_argument(
        "--formatter",
        choices=FORMATTERS,
        default=default_formatter(),
        help="Formatter applied to the generated source (default: gofmt or GOWRAP_FORMATTER).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    args = create_parser().parse_args(argv)
    setup_logging(args.verbose)

    from . import pipeline

    config = WrapConfig(
        template_path=Path(args.template),
        dest_path=Path(args.out),
        type_name=args.type,
        package=args.package,
        work_dir=Path.cwd(),
        target_package=args.target_package,
        formatter=args.formatter,
        generate_command=shlex.join(["gowrap", *argv]),
    )

    logger.debug("config: %s", config)
    try:
        pipeline.generate(config)
    except FormatError as e:
        print(e.source)
        _exit(e)
    except GoWrapError as e:
        _exit(e)


def _exit(err: Exception) -> None:
    print(f"gowrap: {err}", file=sys.stderr)
    raise SystemExit(2) from err
