"""Interactive REPL over an in-memory host, for trying reclose by hand."""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable
from dataclasses import fields
from typing import TYPE_CHECKING

from reclose.commands import get_commands
from reclose.errors import RecloseError
from reclose.picker import read_line

if TYPE_CHECKING:
    from reclose.hosts.memory import InMemoryHost
    from reclose.session import RecloseSession

logger = logging.getLogger(__name__)

HELP = """\
Documents:
  open PATH            visit a file
  new NAME [TEXT]      create a buffer with no file
  insert TEXT          insert into the active document (\\n for newline)
  close [NAME]         close a document (default: active)
  ls                   list open documents
Reclose:
  restore-file-most-recent | restore-file-select
  restore-buffer-most-recent | restore-buffer-select
  tracking [on|off]    show or set close tracking
  history              show closed files and buffers
  clear-file-history | clear-buffer-history
  set KEY VALUE        change a [history] setting
  help | exit"""

_ON = {"on", "1", "true", "yes"}
_OFF = {"off", "0", "false", "no"}


class RecloseREPL:
    """Reads commands line by line and applies them to a host and session."""

    def __init__(
        self,
        session: RecloseSession,
        host: InMemoryHost,
        read: Callable[[str], str | None] = read_line,
        write: Callable[[str], None] = print,
    ) -> None:
        self.session = session
        self.host = host
        self._read = read
        self._write = write
        self._commands = get_commands(session)

    def run(self) -> None:
        self._write("reclose (type 'help' for commands, 'exit' to quit)")
        self._write("-" * 48)
        while True:
            try:
                line = self._read("\nreclose> ")
            except (EOFError, KeyboardInterrupt):
                self._write("\nBye!")
                break
            if line is None:
                self._write("Bye!")
                break
            if not self.handle(line):
                self._write("Bye!")
                break

    def handle(self, line: str) -> bool:
        """Execute one command line. Returns False when the user asked to quit."""
        try:
            argv = shlex.split(line)
        except ValueError as e:
            self._write(f"Parse error: {e}")
            return True
        if not argv:
            return True

        cmd, args = argv[0].lower(), argv[1:]
        if cmd in ("exit", "quit"):
            return False

        try:
            self._dispatch(cmd, args)
        except RecloseError as e:
            self._write(str(e))
        except OSError as e:
            logger.debug("Command %s failed: %s", cmd, e)
            self._write(f"Error: {e.strerror or e}")
        except (KeyError, ValueError, RuntimeError) as e:
            logger.debug("Command %s failed: %s", cmd, e)
            self._write(f"Error: {e.args[0] if e.args else e}")
        return True

    def _dispatch(self, cmd: str, args: list[str]) -> None:
        if cmd == "help":
            self._write(HELP)
        elif cmd == "open":
            if not args:
                raise ValueError("usage: open PATH")
            doc = self.host.visit(args[0])
            self._write(f"Visiting {doc.path} as {doc.name}")
        elif cmd == "new":
            if not args:
                raise ValueError("usage: new NAME [TEXT]")
            doc = self.host.new_buffer(args[0], " ".join(args[1:]).replace("\\n", "\n"))
            self._write(f"Created buffer {doc.name}")
        elif cmd == "insert":
            self.host.insert(" ".join(args).replace("\\n", "\n"))
        elif cmd == "close":
            doc = self.host.close(args[0] if args else None)
            self._write(f"Closed {doc.name}")
        elif cmd == "ls":
            self._list_documents()
        elif cmd == "history":
            self._show_history()
        elif cmd in ("tracking", "set-tracking-enabled"):
            self._tracking(args)
        elif cmd == "set":
            self._set(args)
        elif cmd in self._commands:
            self._write(self._commands[cmd]())
        else:
            raise ValueError(f"unknown command {cmd!r} (try 'help')")

    def _list_documents(self) -> None:
        docs = self.host.documents()
        if not docs:
            self._write("(no open documents)")
            return
        active = self.host.active
        for doc in docs:
            marker = "*" if active and doc.name == active.name else " "
            where = doc.path or "(no file)"
            self._write(f" {marker} {doc.name:<20} {doc.size:>7}  {where}")

    def _show_history(self) -> None:
        files = self.session.closed_files()
        buffers = self.session.closed_buffers()
        self._write(f"Closed files ({len(files)}):")
        for path in files:
            self._write(f"  {path}")
        self._write(f"Closed buffers ({len(buffers)}):")
        for entry in buffers:
            self._write(f"  {entry.name} ({len(entry.content)} chars)")

    def _tracking(self, args: list[str]) -> None:
        if not args:
            state = "enabled" if self.session.tracking_enabled else "disabled"
            self._write(f"Close tracking {state}")
            return
        value = args[0].lower()
        if value in _ON:
            self._write(self._commands["set-tracking-enabled"](True))
        elif value in _OFF:
            self._write(self._commands["set-tracking-enabled"](False))
        elif value == "toggle":
            self._write(self._commands["toggle-tracking"]())
        else:
            raise ValueError("usage: tracking [on|off|toggle]")

    def _set(self, args: list[str]) -> None:
        settings = self.session.config.history
        names = [f.name for f in fields(settings) if f.name != "track_on_start"]
        if len(args) != 2 or args[0] not in names:
            raise ValueError(f"usage: set KEY VALUE, KEY one of {', '.join(names)}")
        setattr(settings, args[0], int(args[1]))
        self._write(f"{args[0]} = {getattr(settings, args[0])}")
