"""Close trackers for file-backed documents and unsaved buffers.

Each tracker owns one ``BoundedHistory``. ``record`` is the close hook;
the ``restore_*`` methods consume entries and hand them back to the host.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from reclose.errors import NothingToRestore
from reclose.history import BoundedHistory

if TYPE_CHECKING:
    from reclose.hosts.base import Document, DocumentHost, Picker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BufferEntry:
    """A closed non-file document: its name and full text."""

    name: str
    content: str


class FileCloseTracker:
    """Remembers paths of closed file-backed documents."""

    kind = "file"

    def __init__(self, history: BoundedHistory[str]) -> None:
        self.history = history

    def record(self, doc: Document) -> None:
        if not doc.has_file:
            return
        self.history.push(doc.path)
        logger.debug("Recorded closed file %s (%d tracked)", doc.path, len(self.history))

    def restore_most_recent(self, host: DocumentHost) -> str:
        path = self.history.peek()
        if path is None:
            raise NothingToRestore(self.kind)
        # Entry stays listed if the host fails to open it
        host.open_file(path)
        self.history.pop()
        logger.info("Restored file %s", path)
        return path

    def restore_select(self, host: DocumentHost, picker: Picker) -> str | None:
        if not self.history:
            raise NothingToRestore(self.kind)
        path = picker.pick(
            "Restore file: ",
            self.history.items(),
            default=self.history.peek(),
        )
        if not path:
            return None
        host.open_file(path)
        # Free text is allowed, so the path may not be in the list at all
        self.history.discard(path)
        logger.info("Restored file %s", path)
        return path


class BufferCloseTracker:
    """Remembers name and content of closed documents that have no file."""

    kind = "buffer"

    def __init__(self, history: BoundedHistory[BufferEntry], max_size: int | Callable[[], int]) -> None:
        self.history = history
        self._max_size = max_size

    @property
    def max_size(self) -> int:
        return self._max_size() if callable(self._max_size) else self._max_size

    def record(self, doc: Document) -> None:
        if doc.has_file:
            return
        if doc.size > self.max_size:
            logger.debug("Skipped closed buffer %s: %d chars > %d", doc.name, doc.size, self.max_size)
            return
        self.history.push(BufferEntry(name=doc.name, content=doc.text))
        logger.debug("Recorded closed buffer %s (%d tracked)", doc.name, len(self.history))

    def _reopen(self, host: DocumentHost, entry: BufferEntry) -> None:
        host.switch_to_buffer(entry.name)
        host.insert(entry.content)
        logger.info("Restored buffer %s (%d chars)", entry.name, len(entry.content))

    def restore_most_recent(self, host: DocumentHost) -> BufferEntry:
        entry = self.history.peek()
        if entry is None:
            raise NothingToRestore(self.kind)
        self._reopen(host, entry)
        self.history.pop()
        return entry

    def restore_select(self, host: DocumentHost, picker: Picker) -> BufferEntry | None:
        if not self.history:
            raise NothingToRestore(self.kind)
        names = list(dict.fromkeys(e.name for e in self.history))
        name = picker.pick(
            "Restore buffer: ",
            names,
            default=names[0],
            require_match=True,
        )
        if not name:
            return None
        entry = next((e for e in self.history if e.name == name), None)
        if entry is None:
            return None
        self._reopen(host, entry)
        self.history.take_first(lambda e: e is entry)
        return entry
