"""LogLevel enumeration: log urgency levels, most urgent first."""

from dataclasses import dataclass
from typing import Optional

from enumerations.core.catalog import CatalogBuilder, EnumItem, Enumeration
from enumerations.core.identifier import EnumID
from enumerations.core.validated import ValidatedID

# loguru has no PANIC/FATAL levels and spells WARN out
_LOGURU_LEVELS = {
    "PANIC": "CRITICAL",
    "FATAL": "CRITICAL",
    "WARN": "WARNING",
}


class LogLevelID(EnumID):
    """Identifier of a LogLevel item."""


class ValidatedLogLevelID(ValidatedID, id_type=LogLevelID):
    """Capturing LogLevel identifier."""


@dataclass(frozen=True, eq=False)
class LogLevelItem(EnumItem):
    """A single LogLevel item. Lower sort order means more urgent."""

    def is_more_urgent_than(self, other: Optional["LogLevelItem"]) -> bool:
        """Return True if this level is more urgent than ``other``.

        A logger set to level L drops a message at level M when M is less
        urgent than L. Anything is more urgent than no level at all.
        """
        if other is None:
            return True

        return self.sort_order < other.sort_order

    @property
    def loguru_level(self) -> str:
        """Name of the matching loguru level."""
        return _LOGURU_LEVELS.get(str(self.id), str(self.id))


def is_more_urgent(level: Optional[LogLevelItem], other: Optional[LogLevelItem]) -> bool:
    """``level.is_more_urgent_than(other)`` that also accepts an absent ``level``."""
    if level is None:
        # nothing is more urgent than no level
        return False

    return level.is_more_urgent_than(other)


class EnumLogLevel(Enumeration[LogLevelItem]):
    """Collection of LogLevel items."""

    id_type = LogLevelID

    panic: LogLevelItem
    fatal: LogLevelItem
    error: LogLevelItem
    warn: LogLevelItem
    info: LogLevelItem
    debug: LogLevelItem
    trace: LogLevelItem


LogLevel: EnumLogLevel = (
    CatalogBuilder(EnumLogLevel, name="EnumLogLevel", description="log urgency levels")
    .add(LogLevelItem(LogLevelID("PANIC"), "Panic", "Panic", 0))
    .add(LogLevelItem(LogLevelID("FATAL"), "Fatal", "Fatal", 1))
    .add(LogLevelItem(LogLevelID("ERROR"), "Error", "Error", 2))
    .add(LogLevelItem(LogLevelID("WARN"), "Warn", "Warn", 3))
    .add(LogLevelItem(LogLevelID("INFO"), "Info", "Info", 4))
    .add(LogLevelItem(LogLevelID("DEBUG"), "Debug", "Debug", 5))
    .add(LogLevelItem(LogLevelID("TRACE"), "Trace", "Trace", 6))
    .build()
)
