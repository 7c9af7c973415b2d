"""
context.py
the EloArg context: declare options, parse argv, query the result.

    args = EloArg()
    args.add("h", "help", "Show this help.", ArgValueType.INFO)
    args.add(None, "port", "Port to listen on.", ArgValueType.REQUIRED)
    args.parse(sys.argv)
    if args.has("help"):
        args.help("mytool 1.0")
    port = args.get("port")

Contexts are independent of each other. `init()` additionally hands out a
single process-wide context and refuses a second one while it is open.
"""
import logging
import sys
from typing import Optional, Sequence

from .errors import ContextActiveError
from .help import format_help
from .option import ArgValueType, Option
from .parser import Parser
from .registry import OptionRegistry

LOGGER = logging.getLogger(__name__)

_process_context: Optional["EloArg"] = None


class EloArg:
    def __init__(self):
        self.registry = OptionRegistry()
        self.parser = Parser(self.registry)
        self.closed = False

    def __enter__(self) -> "EloArg":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def add(self, short: Optional[str], long: Optional[str], description: Optional[str],
            value_type: ArgValueType = ArgValueType.NONE) -> Option:
        return self.registry.declare(short, long, description, value_type)

    def parse(self, argv: Optional[Sequence[str]] = None) -> None:
        if argv is None:
            argv = sys.argv
        self.parser.parse(argv)

    def has(self, key: str) -> bool:
        option = self.registry.lookup(key)
        return option is not None and option.provided

    def get(self, key: str) -> Optional[str]:
        option = self.registry.lookup(key)
        if option is None or not option.provided:
            return None
        return option.value

    def count(self, key: str) -> int:
        option = self.registry.lookup(key)
        if option is None or not option.provided:
            return 0
        return option.count

    def format_help(self, header: Optional[str] = None, footer: Optional[str] = None) -> str:
        return format_help(self.registry.options(), header, footer)

    def help(self, header: Optional[str] = None, footer: Optional[str] = None) -> None:
        """Print the option listing and exit with status 0.

        Returns without output when no option has been declared.
        """
        text = self.format_help(header, footer)
        if not text:
            return
        sys.stdout.write(text)
        sys.stdout.flush()
        self.close()
        sys.exit(0)

    def close(self) -> None:
        global _process_context
        if self.closed:
            return
        self.registry.release()
        self.closed = True
        if _process_context is self:
            _process_context = None
        LOGGER.debug("context closed")


def init() -> EloArg:
    """Create the process-wide context."""
    global _process_context
    if _process_context is not None:
        raise ContextActiveError()
    _process_context = EloArg()
    return _process_context


def current() -> Optional[EloArg]:
    return _process_context
