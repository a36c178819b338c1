"""Command line entrypoint: ``tq pattern=<path> [file=<doc>] [key=value ...]``."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import chz
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from .config import TQ_CONFIG, ColorChoice, Format, parse_color, parse_format
from .core import extract_pattern
from .errors import PatternParseError, TqError
from .runtime.logging import configure_logging, get_logger
from .serialization import dump_value, load_document, read_input


@chz.chz
class TqArgs:
    # Pattern selecting the value to print; empty selects the whole document.
    pattern: str
    # Document to read; stdin when omitted.
    file: str | None = None
    input: str = chz.field(default_factory=lambda: TQ_CONFIG.input_format)
    output: str = chz.field(default_factory=lambda: TQ_CONFIG.output_format)
    pretty: bool = False
    color: str = chz.field(default_factory=lambda: TQ_CONFIG.color)


def run(args: TqArgs, *, console: Console | None = None) -> None:
    """Read the document, extract ``args.pattern`` and print the result."""

    logger = get_logger()
    input_format = parse_format(args.input, "input")
    output_format = parse_format(args.output, "output")
    color = parse_color(args.color, "color")

    text = read_input(args.file)
    document = load_document(text, input_format)
    logger.debug("loaded %s document with %d top-level keys", input_format, len(document))

    result = extract_pattern(document, args.pattern)
    rendered = dump_value(result, output_format, pretty=args.pretty)
    emit(rendered, output_format, color, console=console)


def emit(
    rendered: str,
    fmt: Format,
    color: ColorChoice,
    *,
    console: Console | None = None,
) -> None:
    if console is None:
        console = Console(
            force_terminal=True if color == "always" else None,
            no_color=color == "never",
        )
    text = rendered.rstrip("\n")

    if color == "always" or (color == "auto" and console.is_terminal):
        console.print(
            Syntax(text, fmt, background_color="default", word_wrap=False),
            soft_wrap=True,
        )
        return

    console.file.write(text + "\n")


def report_error(exc: TqError, *, console: Console | None = None) -> None:
    if console is None:
        console = Console(stderr=True)
    console.print(f"[bold red]error:[/] {escape(str(exc))}", soft_wrap=True)
    if isinstance(exc, PatternParseError):
        console.print(exc.caret(), markup=False, highlight=False, soft_wrap=True)


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging()
    args = chz.entrypoint(TqArgs, argv=list(sys.argv[1:] if argv is None else argv))
    get_logger().debug("running with %s", args)
    try:
        run(args)
    except TqError as exc:
        report_error(exc)
        return 1
    return 0


def cli() -> None:
    raise SystemExit(main())
