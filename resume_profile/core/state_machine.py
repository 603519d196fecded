"""
Entry-boundary state machine shared by the experience, education and project parsers.

A section is scanned line by line in a single forward pass. The only state
carried between lines is the entry being built:

    NoCurrentEntry --start(entry)--> BuildingEntry(entry)
    BuildingEntry  --start(entry)--> finalize, then BuildingEntry(entry)
    BuildingEntry  --finalize()----> NoCurrentEntry

``finalize`` emits the entry only when the parser's emit predicate accepts it,
so a started-but-empty entry is dropped instead of reaching the profile.
"""

import logging
from typing import Callable, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NoCurrentEntry:
    """Nothing is being built; non-trigger lines are ignored."""

    def __repr__(self) -> str:
        return "NoCurrentEntry()"


class BuildingEntry(Generic[T]):
    """An entry has been started and is accumulating fields."""

    def __init__(self, entry: T):
        self.entry = entry

    def __repr__(self) -> str:
        return f"BuildingEntry({self.entry!r})"


class EntryStateMachine(Generic[T]):
    def __init__(self, kind: str, should_emit: Callable[[T], bool]):
        self.kind = kind
        self.should_emit = should_emit
        self.state: "NoCurrentEntry | BuildingEntry[T]" = NoCurrentEntry()
        self.entries: List[T] = []

    @property
    def current(self) -> Optional[T]:
        if isinstance(self.state, BuildingEntry):
            return self.state.entry
        return None

    def start(self, entry: T) -> None:
        self.finalize()
        self.state = BuildingEntry(entry)

    def finalize(self) -> None:
        if isinstance(self.state, BuildingEntry):
            entry = self.state.entry
            if self.should_emit(entry):
                self.entries.append(entry)
                logger.debug(f"Finalized {self.kind} entry #{len(self.entries)}")
            else:
                logger.debug(f"Discarded empty {self.kind} entry")
        self.state = NoCurrentEntry()

    def finish(self) -> List[T]:
        """End of input: finalize whatever is in progress and return the entries."""
        self.finalize()
        return self.entries
