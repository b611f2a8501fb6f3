"""Document host and picker protocols, plus shared types."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Document:
    """Snapshot of a document as seen by a close hook."""

    name: str
    path: str | None = None
    text: str = ""

    @property
    def has_file(self) -> bool:
        return self.path is not None

    @property
    def size(self) -> int:
        """Length of the document text in characters."""
        return len(self.text)


# Callback type: invoked synchronously with the document being closed
CloseHook = Callable[[Document], None]


class Subscription:
    """Handle for an attached close hook. ``cancel()`` detaches it."""

    def __init__(self, hook: CloseHook, detach: Callable[[CloseHook], None]) -> None:
        self.hook = hook
        self._detach = detach
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._detach(self.hook)

    def __repr__(self) -> str:
        state = "active" if self._active else "cancelled"
        return f"<Subscription {getattr(self.hook, '__qualname__', self.hook)!s} {state}>"


@runtime_checkable
class DocumentHost(Protocol):
    """Protocol for the editor that owns the documents."""

    def on_close(self, hook: CloseHook) -> Subscription:
        """Attach ``hook`` to close events.

        Attaching a hook that is already attached returns its live
        subscription instead of registering it twice.
        """
        ...

    def open_file(self, path: str) -> None:
        """Open a document for ``path`` and make it active."""
        ...

    def switch_to_buffer(self, name: str) -> None:
        """Get or create the document called ``name`` and make it active."""
        ...

    def insert(self, text: str) -> None:
        """Insert ``text`` into the active document at point."""
        ...


@runtime_checkable
class Picker(Protocol):
    """Protocol for choosing one value from an ordered list of candidates."""

    def pick(
        self,
        prompt: str,
        candidates: Sequence[str],
        *,
        default: str | None = None,
        require_match: bool = False,
    ) -> str | None:
        """Return the chosen (or typed) value, or None if the user gave nothing."""
        ...
