"""
help.py
formats declared options into a usage listing.

Every option prefix is padded to HELP_OPTION_COLUMN and descriptions are
wrapped at HELP_DESCRIPTION_WIDTH characters, continuation lines being
indented to the same column.
"""
from typing import Iterable, List, Optional

from .option import Option

HELP_OPTION_COLUMN = 46
HELP_DESCRIPTION_WIDTH = 70


def format_prefix(option: Option) -> str:
    if option.short and option.long:
        prefix = f"  -{option.short}, --{option.long}"
    elif option.short:
        prefix = f"  -{option.short}"
    else:
        prefix = f"      --{option.long}"
    return prefix.ljust(HELP_OPTION_COLUMN)


def wrap_description(text: str, width: int = HELP_DESCRIPTION_WIDTH) -> List[str]:
    lines = []
    current_line = ""
    for word in text.split():
        if not current_line:
            current_line = word
        elif len(current_line) + 1 + len(word) <= width:
            current_line += " " + word
        else:
            lines.append(current_line)
            current_line = word
    if current_line:
        lines.append(current_line)
    return lines


def format_help(options: Iterable[Option], header: Optional[str] = None,
                footer: Optional[str] = None) -> str:
    options = list(options)
    if not options:
        return ""

    result = []
    if header is not None:
        result.append(header)
    result.append("Options:")

    indent = " " * HELP_OPTION_COLUMN
    for option in options:
        desc_lines = wrap_description(option.description) or [""]
        result.append(format_prefix(option) + desc_lines[0])
        for line in desc_lines[1:]:
            result.append(indent + line)

    if footer is not None:
        result.append("")
        result.append(footer)

    return "\n".join(result) + "\n"
