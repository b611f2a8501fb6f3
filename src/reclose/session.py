"""Reclose session: owns both close histories and the command surface.

Responsibilities:
1. Own the file and buffer histories (injectable, no module globals)
2. Attach/detach close hooks on the host via subscription handles
3. Route restore commands to the right tracker with the session's picker
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from reclose.config import RecloseConfig
from reclose.history import BoundedHistory
from reclose.trackers import BufferCloseTracker, BufferEntry, FileCloseTracker

if TYPE_CHECKING:
    from reclose.hosts.base import DocumentHost, Picker, Subscription

logger = logging.getLogger(__name__)


class RecloseSession:
    """Tracks closed documents for one host and restores them on request."""

    def __init__(
        self,
        host: DocumentHost,
        picker: Picker,
        config: RecloseConfig | None = None,
        *,
        file_history: BoundedHistory[str] | None = None,
        buffer_history: BoundedHistory[BufferEntry] | None = None,
    ) -> None:
        self.host = host
        self.picker = picker
        self.config = config or RecloseConfig()
        # Caps are looked up through self.config on every push
        self.files = FileCloseTracker(
            file_history
            if file_history is not None
            else BoundedHistory(lambda: self.config.history.file_list_max_length)
        )
        self.buffers = BufferCloseTracker(
            buffer_history
            if buffer_history is not None
            else BoundedHistory(lambda: self.config.history.buffer_list_max_length),
            max_size=lambda: self.config.history.buffer_max_saved_size,
        )
        self._subscriptions: list[Subscription] = []

    # ── Tracking toggle ──────────────────────────────────────

    @property
    def tracking_enabled(self) -> bool:
        return bool(self._subscriptions)

    def set_tracking_enabled(self, enabled: bool) -> None:
        """Attach or detach both close hooks. History is kept either way."""
        if enabled:
            if self._subscriptions:
                return
            self._subscriptions = [
                self.host.on_close(self.files.record),
                self.host.on_close(self.buffers.record),
            ]
            logger.info("Close tracking enabled")
        else:
            if not self._subscriptions:
                return
            for sub in self._subscriptions:
                sub.cancel()
            self._subscriptions = []
            logger.info("Close tracking disabled")

    def toggle_tracking(self) -> bool:
        self.set_tracking_enabled(not self.tracking_enabled)
        return self.tracking_enabled

    # ── Restore commands ─────────────────────────────────────

    def restore_file_most_recent(self) -> str:
        return self.files.restore_most_recent(self.host)

    def restore_file_select(self) -> str | None:
        return self.files.restore_select(self.host, self.picker)

    def restore_buffer_most_recent(self) -> BufferEntry:
        return self.buffers.restore_most_recent(self.host)

    def restore_buffer_select(self) -> BufferEntry | None:
        return self.buffers.restore_select(self.host, self.picker)

    # ── History management ───────────────────────────────────

    def closed_files(self) -> list[str]:
        return self.files.history.items()

    def closed_buffers(self) -> list[BufferEntry]:
        return self.buffers.history.items()

    def clear_file_history(self) -> int:
        dropped = self.files.history.clear()
        logger.info("Cleared %d closed files", dropped)
        return dropped

    def clear_buffer_history(self) -> int:
        dropped = self.buffers.history.clear()
        logger.info("Cleared %d closed buffers", dropped)
        return dropped
