import logging
from typing import List, Optional

from .errors import (
    AllocationFailure,
    ConfigurationError,
    MissingDescriptionError,
    MissingIdentifierError,
    OptionExistsError,
    OptionTooLongError,
)
from .option import ArgValueType, Option
from .store import HashTable

SHORT_OPTION_LENGTH = 1
LONG_OPTION_LENGTH = 32
DESCRIPTION_LENGTH = 150

LOGGER = logging.getLogger(__name__)


class OptionRegistry:
    def __init__(self):
        self.table = HashTable()
        self.declared = 0

    def __len__(self):
        return self.declared

    def declare(self, short: Optional[str], long: Optional[str], description: Optional[str],
                value_type: ArgValueType = ArgValueType.NONE) -> Option:
        if not short and not long:
            raise MissingIdentifierError()
        if description is None:
            raise MissingDescriptionError(long or short)

        if self.table.has(short):
            raise OptionExistsError("short", short)
        if self.table.has(long) or (long and long == short):
            raise OptionExistsError("long", long)

        if short and len(short) > SHORT_OPTION_LENGTH:
            raise OptionTooLongError("short option", SHORT_OPTION_LENGTH)
        if long and len(long) > LONG_OPTION_LENGTH:
            raise OptionTooLongError("long option", LONG_OPTION_LENGTH)
        if len(description) > DESCRIPTION_LENGTH:
            raise OptionTooLongError("description", DESCRIPTION_LENGTH)

        if not isinstance(value_type, ArgValueType):
            raise ConfigurationError(f"Invalid value type '{value_type}' for option '{long or short}'.")

        try:
            option = Option(short, long, description, value_type, self.declared)
        except MemoryError as exc:
            raise AllocationFailure("EloArgOption") from exc

        for key in option.keys():
            option.share_count += 1
            self.table.set(key, option)

        self.declared += 1
        LOGGER.debug("declared %s as %s (tag %d)", option.name, value_type.name, option.tag)
        return option

    def lookup(self, key: Optional[str]) -> Optional[Option]:
        return self.table.get(key)

    def options(self) -> List[Option]:
        """Every declared option once, in store order."""
        seen = set()
        result = []
        for _, option in self.table.slots():
            if option.tag in seen:
                continue
            seen.add(option.tag)
            result.append(option)
        return result

    def release(self) -> None:
        if self.table.count() == 0:
            return
        for _, option in self.table.slots():
            option.release()
        self.table.free()
