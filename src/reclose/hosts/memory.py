"""In-process document host for the REPL and tests."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from reclose.hosts.base import CloseHook, Document, Subscription

logger = logging.getLogger(__name__)


@dataclass
class _LiveDocument:
    name: str
    path: str | None = None
    text: str = ""
    point: int = 0

    def snapshot(self) -> Document:
        return Document(name=self.name, path=self.path, text=self.text)


class InMemoryHost:
    """Keeps named documents in a dict; one of them is active."""

    def __init__(self) -> None:
        self._docs: dict[str, _LiveDocument] = {}
        self._active: str | None = None
        self._subscriptions: list[Subscription] = []

    # ── Close hooks ──────────────────────────────────────────

    def on_close(self, hook: CloseHook) -> Subscription:
        # Bound methods are recreated on each attribute access: compare with ==
        for sub in self._subscriptions:
            if sub.hook == hook:
                return sub
        sub = Subscription(hook, self._detach)
        self._subscriptions.append(sub)
        logger.debug("Close hook attached: %r", sub)
        return sub

    def _detach(self, hook: CloseHook) -> None:
        self._subscriptions = [s for s in self._subscriptions if s.hook != hook]
        logger.debug("Close hook detached: %s", getattr(hook, "__qualname__", hook))

    @property
    def hook_count(self) -> int:
        return len(self._subscriptions)

    # ── Document access ──────────────────────────────────────

    @property
    def active(self) -> Document | None:
        if self._active is None:
            return None
        return self._docs[self._active].snapshot()

    def documents(self) -> list[Document]:
        return [d.snapshot() for d in self._docs.values()]

    def get(self, name: str) -> Document | None:
        doc = self._docs.get(name)
        return doc.snapshot() if doc else None

    def _unique_name(self, base: str) -> str:
        if base not in self._docs:
            return base
        n = 2
        while f"{base}<{n}>" in self._docs:
            n += 1
        return f"{base}<{n}>"

    # ── Creating documents ───────────────────────────────────

    def visit(self, path: str) -> Document:
        """Open a file-backed document, reusing one already visiting ``path``."""
        for doc in self._docs.values():
            if doc.path == path:
                self._active = doc.name
                return doc.snapshot()

        p = Path(path)
        text = p.read_text(encoding="utf-8", errors="replace") if p.is_file() else ""
        name = self._unique_name(p.name or path)
        self._docs[name] = _LiveDocument(name=name, path=path, text=text)
        self._active = name
        logger.debug("Visited %s as %s", path, name)
        return self._docs[name].snapshot()

    def new_buffer(self, name: str, text: str = "") -> Document:
        """Create a document with no file and make it active."""
        name = self._unique_name(name)
        self._docs[name] = _LiveDocument(name=name, text=text, point=len(text))
        self._active = name
        return self._docs[name].snapshot()

    def open_file(self, path: str) -> None:
        self.visit(path)

    def switch_to_buffer(self, name: str) -> None:
        if name not in self._docs:
            self._docs[name] = _LiveDocument(name=name)
        self._active = name

    def insert(self, text: str) -> None:
        if self._active is None:
            raise RuntimeError("No active document to insert into")
        doc = self._docs[self._active]
        doc.text = doc.text[: doc.point] + text + doc.text[doc.point :]
        doc.point += len(text)

    # ── Closing ──────────────────────────────────────────────

    def close(self, name: str | None = None) -> Document:
        """Close ``name`` (default: the active document), running close hooks first."""
        if name is None:
            name = self._active
        if name is None or name not in self._docs:
            raise KeyError(f"No such document: {name}")

        snapshot = self._docs[name].snapshot()
        for sub in list(self._subscriptions):
            sub.hook(snapshot)

        del self._docs[name]
        if self._active == name:
            self._active = next(reversed(self._docs), None)
        return snapshot
