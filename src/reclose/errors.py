"""User-facing error types."""

from __future__ import annotations


class RecloseError(Exception):
    """Base class for errors surfaced to the user by reclose commands."""


class NothingToRestore(RecloseError):
    """A restore command ran against an empty history list.

    Non-fatal: front ends report the message and carry on. No state has
    changed when this is raised.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"No closed {kind}s to restore")
