"""Container types and enums."""

from enum import Enum, auto


class Lifetime(Enum):
    """Service registration lifetime."""

    SCOPED = auto()
    TRANSIENT = auto()
    SINGLETON = auto()

    def __str__(self) -> str:
        return self.name.capitalize()
