from .context import EloArg, current, init
from .errors import (
    AllocationFailure,
    ConfigurationError,
    ContextActiveError,
    EloArgError,
    MissingDescriptionError,
    MissingIdentifierError,
    MissingRequiredError,
    MissingValueError,
    OptionExistsError,
    OptionTooLongError,
    ParseError,
    UnexpectedValueError,
    UnknownOptionError,
)
from .help import format_help
from .option import ArgValueType, Option

__all__ = [
    "AllocationFailure",
    "ArgValueType",
    "ConfigurationError",
    "ContextActiveError",
    "EloArg",
    "EloArgError",
    "MissingDescriptionError",
    "MissingIdentifierError",
    "MissingRequiredError",
    "MissingValueError",
    "Option",
    "OptionExistsError",
    "OptionTooLongError",
    "ParseError",
    "UnexpectedValueError",
    "UnknownOptionError",
    "current",
    "format_help",
    "init",
]
