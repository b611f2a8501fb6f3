"""User-invokable commands.

These functions are meant to be bound to editor commands or typed into the
REPL; each acts on the session's implicit current state.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reclose.session import RecloseSession


def get_commands(session: RecloseSession) -> dict[str, Callable[..., str]]:
    """Return a dict of command_name -> callable for the session.

    Each callable returns a short status line for the front end to show.
    ``NothingToRestore`` propagates so callers can report it as a notice.
    """

    def restore_file_most_recent() -> str:
        """Reopen the most recently closed file."""
        path = session.restore_file_most_recent()
        return f"Reopened {path}"

    def restore_file_select() -> str:
        """Pick a closed file (or type any path) and reopen it."""
        path = session.restore_file_select()
        return f"Reopened {path}" if path else "Nothing selected"

    def restore_buffer_most_recent() -> str:
        """Recreate the most recently closed buffer with its content."""
        entry = session.restore_buffer_most_recent()
        return f"Restored buffer {entry.name} ({len(entry.content)} chars)"

    def restore_buffer_select() -> str:
        """Pick a closed buffer by name and recreate it."""
        entry = session.restore_buffer_select()
        if entry is None:
            return "Nothing selected"
        return f"Restored buffer {entry.name} ({len(entry.content)} chars)"

    def set_tracking_enabled(enabled: bool) -> str:
        """Turn close tracking on or off. History is kept."""
        session.set_tracking_enabled(enabled)
        return f"Close tracking {'enabled' if session.tracking_enabled else 'disabled'}"

    def toggle_tracking() -> str:
        """Flip close tracking."""
        state = session.toggle_tracking()
        return f"Close tracking {'enabled' if state else 'disabled'}"

    def clear_file_history() -> str:
        """Forget every closed file."""
        return f"Cleared {session.clear_file_history()} closed files"

    def clear_buffer_history() -> str:
        """Forget every closed buffer."""
        return f"Cleared {session.clear_buffer_history()} closed buffers"

    return {
        "restore-file-most-recent": restore_file_most_recent,
        "restore-file-select": restore_file_select,
        "restore-buffer-most-recent": restore_buffer_most_recent,
        "restore-buffer-select": restore_buffer_select,
        "set-tracking-enabled": set_tracking_enabled,
        "toggle-tracking": toggle_tracking,
        "clear-file-history": clear_file_history,
        "clear-buffer-history": clear_buffer_history,
    }
