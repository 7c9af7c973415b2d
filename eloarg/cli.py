"""
cli.py
turns library errors into the command-line contract: one line on stderr
prefixed with the library tag, then exit status 1.
"""
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence, TextIO

from .context import EloArg
from .errors import LIBRARY_NAME, EloArgError
from .option import ArgValueType

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def report(error: EloArgError, stream: Optional[TextIO] = None) -> None:
    print(f"{LIBRARY_NAME}: {error}", file=stream or sys.stderr)


@contextmanager
def exit_on_error(context: EloArg) -> Iterator[EloArg]:
    try:
        yield context
    except EloArgError as exc:
        report(exc)
        context.close()
        sys.exit(EXIT_FAILURE)


def parse_or_exit(context: EloArg, argv: Optional[Sequence[str]] = None) -> EloArg:
    with exit_on_error(context):
        context.parse(argv)
    return context


# Example usage
if __name__ == "__main__":
    args = EloArg()
    with exit_on_error(args):
        args.add("h", "help", "Displays help information about the available options and usage.", ArgValueType.INFO)
        args.add(None, "version", "Displays the version number of the program.", ArgValueType.INFO)
        args.add(None, "port", "Specifies the port number to listen on.", ArgValueType.REQUIRED)
        args.add("f", "file", "Path to the input file.", ArgValueType.OPTIONAL)
        args.add("v", "verbose", "Increase verbosity level.")
        args.parse(sys.argv)

    if args.has("help"):
        args.help("CustomTool 1.0", "Arguments for long options apply equally to their short options.")
    elif args.has("version"):
        print("v1.0.0")
    else:
        print(f"Port: {args.get('port')}")
        if args.has("file"):
            print(f"File: {args.get('file')}")
        print(f"Verbosity: {args.count('v')}")
    args.close()
