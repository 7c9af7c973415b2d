from enum import Enum
from typing import List, Optional

from .errors import AllocationFailure


class ArgValueType(Enum):
    NONE = 0      # flag only
    INFO = 1      # flag that stops parsing (help, version)
    OPTIONAL = 2  # value may be given
    REQUIRED = 3  # value must be given

    def takes_value(self) -> bool:
        return self in (ArgValueType.OPTIONAL, ArgValueType.REQUIRED)


class Option:
    def __init__(self, short: Optional[str], long: Optional[str], description: str,
                 value_type: ArgValueType, tag: int):
        self.short = short or ""
        self.long = long or ""
        self.description = description
        self.value_type = value_type
        self.tag = tag

        self.value: Optional[str] = None
        self.provided = False
        self.count = 0
        # number of store keys pointing at this record
        self.share_count = 0
        self.released = False

    def __repr__(self):
        return f"Option({self.name!r}, {self.value_type.name}, count={self.count})"

    @property
    def name(self) -> str:
        """Display name, preferring the long identifier."""
        if self.long:
            return f"--{self.long}"
        return f"-{self.short}"

    def keys(self) -> List[str]:
        return [key for key in (self.short, self.long) if key]

    def match(self) -> None:
        self.provided = True
        self.count += 1

    def capture(self, text: str) -> None:
        try:
            self.value = str(text)
        except MemoryError as exc:
            raise AllocationFailure("EloArgOption value") from exc

    def release(self) -> None:
        """Drop one key's reference; the record is freed with the last one."""
        if self.share_count == 0:
            return
        self.share_count -= 1
        if self.share_count == 0:
            self.value = None
            self.released = True
