"""
parser.py
state machine over the command-line token sequence.

argv[0] is the program name. Long options are `--name`, `--name value` or
`--name=value`; short options come in clusters such as `-vvv`, `-p 8080` or
`-p8080`. `--` ends option processing.
"""
import logging
from typing import List, Optional, Sequence

from .errors import (
    MissingRequiredError,
    MissingValueError,
    UnexpectedValueError,
    UnknownOptionError,
)
from .option import ArgValueType, Option
from .registry import OptionRegistry

LOGGER = logging.getLogger(__name__)


class Parser:
    def __init__(self, registry: OptionRegistry):
        self.registry = registry

    def parse(self, argv: Sequence[str]) -> None:
        if not argv or self.registry.table.count() == 0:
            return

        current = 1
        while current < len(argv):
            arg = argv[current]
            if arg == "--":
                LOGGER.debug("option terminator at token %d", current)
                return

            if arg.startswith("--"):
                next_index = self._parse_long_option(arg, argv, current)
            elif arg.startswith("-"):
                next_index = self._parse_short_options(arg, argv, current)
            else:
                LOGGER.debug("skipping non-option token %r", arg)
                next_index = current

            # an INFO option short-circuits everything, required check included
            if next_index is None:
                LOGGER.debug("info option %r stops parsing", arg)
                return
            current = next_index + 1

        self._check_required()

    def _parse_long_option(self, arg: str, argv: Sequence[str], current: int) -> Optional[int]:
        name, eq, value = arg[2:].partition("=")
        option = self.registry.lookup(name)

        if eq:
            if option is None:
                raise UnknownOptionError(f"--{name}")
            display = f"--{option.long or name}"
            if not option.value_type.takes_value():
                raise UnexpectedValueError(display, value)
            if not value:
                raise MissingValueError(f"{display}=")
            option.match()
            option.capture(value)
            return current

        if option is None:
            raise UnknownOptionError(arg)

        option.match()
        if option.value_type is ArgValueType.INFO:
            return None
        if option.value_type.takes_value():
            if not self._has_value_token(argv, current):
                raise MissingValueError(f"--{option.long or name}")
            option.capture(argv[current + 1])
            return current + 1
        return current

    def _parse_short_options(self, arg: str, argv: Sequence[str], current: int) -> Optional[int]:
        cluster = arg[1:]
        for position, opt in enumerate(cluster):
            option = self.registry.lookup(opt)
            if option is None:
                raise UnknownOptionError(opt, cluster=True)

            option.match()
            if option.value_type is ArgValueType.INFO:
                return None
            if not option.value_type.takes_value():
                continue

            rest = cluster[position + 1:]
            if rest:
                option.capture(rest)
                return current
            if self._has_value_token(argv, current):
                option.capture(argv[current + 1])
                return current + 1
            raise MissingValueError(f"-{opt}")
        return current

    @staticmethod
    def _has_value_token(argv: Sequence[str], current: int) -> bool:
        return current + 1 < len(argv) and not argv[current + 1].startswith("-")

    def _check_required(self) -> None:
        missing = self.missing_required()
        if missing:
            raise MissingRequiredError(missing[0].name)

    def missing_required(self) -> List[Option]:
        return [
            option for option in self.registry.options()
            if option.value_type is ArgValueType.REQUIRED and option.value is None
        ]
