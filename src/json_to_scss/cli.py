"""``json-to-scss`` command-line entry point.

Usage::

    json-to-scss <source> [destination] [options]
    python -m json_to_scss tokens/*.json build/ --sass
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .converter import convert_files
from .errors import OptionsError
from .model import Dialect
from .options import FormatOptions
from .paths import destination_paths, resolve_sources

logger = logging.getLogger(__name__)

PROG = "json-to-scss"

_QUOTE_FLAGS = {"sq": "single", "dq": "double"}


# ---------------------------------------------------------------------------
# Banner / usage
# ---------------------------------------------------------------------------

def banner(name: str | None, version: str | None) -> str:
    return f"[bold]{name or 'NO NAME'} v{version or '0.0.0'}[/bold]"


def usage(name: str | None) -> str:
    name = name or "NO NAME"
    return f"""
    [bold]Usage[/bold]: [yellow]{name}[/yellow] <source> \\[destination] \\[options]

           [bold]source[/bold]:           the path to a javascript, json or group of files to be converted.
           (required)        - only '.js' and '.json' are processed.

           [bold]destination[/bold]:      the full or partial destination of the converted files.
           (optional)        - when the destination is a directory path only, all generated
                               files are saved in it with a default '.scss' extension. If
                               a '.sass' extension is required instead, the --sass option must be included.

           [bold]options[/bold]:

            --h              (help)           Show this message.
            --p='prefix'     (prefix)         Prepend the converted sass/scss content with the prefix.
                                              Prefix is usually used & set to be used as sass variable name.
                                              Default '$<source-filename>: '.
            --no-underscore  (no leading _)   Remove any leading '_' (underscore) characters from the
                                              prefix when used as sass variable name.
            --s='suffix'     (suffix)         Append the converted sass/scss content with the suffix.
                                              Default: ';' (default not used if --sass)
            --tt='tabText'   (tab text)       Text to be used to indent or tabulate sass map.
                                              Default: '  ' (two space characters)
            --tn=tabNumber   (tab number)     Number of tabulations.
                                              Default: 1 (set to 0 if --sass)
            --es='sq'||'dq'  (empty string)   Sass/scss representation for an empty string.
                                              Default is '""': {{ "prop": "" }} => $xyzfilename: ( prop: "" );
            --sass           (sass ext.)      Use sass extension.
            -v, --verbose    (verbose)        Log every step.
"""


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class UsageError(Exception):
    """Invalid command line; the usage text is shown instead."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog=PROG, add_help=False)
    parser.add_argument("source", nargs="?")
    parser.add_argument("destination", nargs="?")
    parser.add_argument("-h", "--h", "--help", dest="help", action="store_true")
    parser.add_argument("--p", dest="prefix", default=None)
    parser.add_argument("--s", dest="suffix", default=None)
    parser.add_argument("--tt", dest="indent_unit", default=None)
    parser.add_argument("--tn", dest="indent_depth", type=int, default=None)
    parser.add_argument("--es", dest="empty_string", choices=sorted(_QUOTE_FLAGS), default=None)
    parser.add_argument("--no-underscore", dest="underscore", action="store_false")
    parser.add_argument("--sass", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def build_options(args: argparse.Namespace) -> FormatOptions:
    """Turn parsed arguments into FormatOptions; unset flags keep the dialect defaults."""
    return FormatOptions(
        prefix=args.prefix or "",
        suffix=args.suffix,
        empty_string_quote=_QUOTE_FLAGS[args.empty_string or "dq"],
        indent_unit=args.indent_unit or "  ",
        indent_base_depth=args.indent_depth,
        strip_leading_underscore=not args.underscore,
        dialect=Dialect.INDENTATION if args.sass else Dialect.BLOCK,
    )


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    pkg_logger = logging.getLogger("json_to_scss")
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(
            RichHandler(console=console or Console(stderr=True), show_path=False, show_time=False)
        )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, console: Console | None = None, cwd: str | Path | None = None) -> int:
    """Parse *argv*, convert the matching files and return the exit status.

    0 on success, on ``--help`` and when nothing matches the source; 1 when
    at least one file failed; 2 on an invalid command line.
    """
    console = console or Console()
    console.print(banner(PROG, __version__))

    try:
        args = build_parser().parse_args(argv)
        options = build_options(args)
    except (UsageError, OptionsError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        console.print(usage(PROG))
        return 2

    if args.help or not args.source:
        console.print(usage(PROG))
        return 0

    configure_logging(args.verbose)

    sources = resolve_sources(args.source, cwd)
    if not sources:
        console.print(
            f"Hmmm strange... [red]{escape(args.source)}[/red] does not seem to exist. Mind checking it?"
        )
        return 0

    destinations = destination_paths(sources, args.destination, options.dialect, cwd, forced=args.sass)
    report = convert_files(sources, destinations, options)
    logger.debug(
        "%d converted, %d skipped, %d failed",
        len(report.converted), len(report.skipped), len(report.failed),
    )
    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
