"""Command-line argument parser.

Pure function: never prints, never exits. Usage problems are raised
as UsageError, -V as the VersionRequested signal; the entry point
decides what to do with them.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from singleton_detector import __version__
from singleton_detector.domain.exceptions.usage import UsageError, VersionRequested
from singleton_detector.domain.model.arguments import ParsedArguments
from singleton_detector.domain.model.flags import Flags

if TYPE_CHECKING:
    from collections.abc import Sequence

PROG = "gsd"

USAGE = f"""\
Usage: {PROG} [-(VvshmfoSb)] [-t <threshold>] <classes dir/jar> <output file> [<package>]
 -V       - Print version and exit
 -v       - Enable verbose mode
 -s       - Hide singletons
 -h       - Hide hingletons
 -m       - Hide mingletons
 -f       - Hide fingletons
 -o       - Hide others
 -S       - Print statistics upon completion
 -b       - Add stats banner to the graph
 -t <val> - Threshold (minimum edges required to draw a node)"""

THRESHOLD_FLAG = "-t"

# short flag character -> Flags field
FLAG_FIELDS = {
    "v": "verbose",
    "S": "show_stats",
    "b": "show_banner",
    "s": "ignore_singletons",
    "h": "ignore_hingletons",
    "m": "ignore_mingletons",
    "f": "ignore_fingletons",
    "o": "ignore_others",
}

_INTEGER = re.compile(r"[+-]?[0-9]+")


def normalize_prefix(package: str) -> str:
    """Convert a dotted package to a slash-terminated path prefix.

    "" stays "" (root package).

    Example:
        >>> normalize_prefix("com.example")
        'com/example/'
    """
    prefix = package.replace(".", "/").lstrip("/")
    if prefix and not prefix.endswith("/"):
        prefix += "/"
    return prefix


def parse_threshold(value: str) -> int:
    """Parse the -t value.

    Raises:
        UsageError: If value is not an integer
    """
    if not _INTEGER.fullmatch(value):
        raise UsageError(f"-t value must be an integer, got {value!r}")
    return int(value)


def parse_arguments(args: Sequence[str]) -> ParsedArguments:
    """Parse raw command-line arguments.

    Arguments starting with "-" are flags, "-t" consumes the next
    argument as threshold, everything else is positional. Combined
    short flags ("-vS") set each letter; "-" characters are ignored.

    Args:
        args: Arguments without the program name

    Returns:
        Flags plus input path, output path and normalized prefix

    Raises:
        UsageError: Missing -t value, bad threshold, unknown flag,
            or not exactly 2 or 3 positional arguments
        VersionRequested: -V was given (stops parsing at once)
    """
    toggles: dict[str, bool] = {}
    threshold = 0
    positional: list[str] = []

    tokens = iter(args)
    for arg in tokens:
        if arg == THRESHOLD_FLAG:
            value = next(tokens, None)
            if value is None:
                raise UsageError("-t must be followed by a value")
            threshold = parse_threshold(value)
        elif arg.startswith("-"):
            _apply_flags(arg, toggles)
        else:
            positional.append(arg)

    if len(positional) > 2:
        positional[2] = normalize_prefix(positional[2])
    else:
        positional.append("")

    if len(positional) != 3:
        raise UsageError("invalid arguments")

    input_path, output_path, prefix = positional
    if not input_path or not output_path:
        raise UsageError("input and output paths must not be empty")

    return ParsedArguments(
        flags=Flags(threshold=threshold, **toggles),
        input_path=input_path,
        output_path=output_path,
        prefix=prefix,
    )


def _apply_flags(arg: str, toggles: dict[str, bool]) -> None:
    """Dispatch each character of a flag token."""
    for char in arg:
        if char == "-":
            continue
        if char == "V":
            raise VersionRequested(__version__)
        field = FLAG_FIELDS.get(char)
        if field is None:
            raise UsageError(f"option -{char} unrecognized")
        toggles[field] = True
