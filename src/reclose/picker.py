"""Candidate matching and an interactive terminal picker."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from difflib import SequenceMatcher

FUZZY_CUTOFF = 0.5


def _similarity(a: str, b: str) -> float:
    return SequenceMatcher(a=a.lower(), b=b.lower()).ratio()


def rank(query: str, candidates: Sequence[str], cutoff: float = FUZZY_CUTOFF) -> list[str]:
    """Order ``candidates`` by how well they match ``query``.

    Case-insensitive substring hits come first, in their original order.
    The rest follow by descending similarity if they clear ``cutoff``.
    An empty query matches everything.
    """
    q = query.strip().lower()
    if not q:
        return list(candidates)

    hits = [c for c in candidates if q in c.lower()]
    scored = [(_similarity(q, c), i, c) for i, c in enumerate(candidates) if c not in hits]
    fuzzy = [c for score, _, c in sorted(scored, key=lambda t: (-t[0], t[1])) if score >= cutoff]
    return hits + fuzzy


def read_line(prompt: str) -> str | None:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    raw = sys.stdin.readline()
    if not raw:
        return None
    return raw.rstrip("\n")


class PromptPicker:
    """Line-oriented picker.

    Blank answer takes the default, ``#N`` picks row N, ``?text``
    narrows the list, anything else is returned as typed. With
    ``require_match`` a typed answer must be a candidate or the unique
    prefix of one; otherwise the pick yields None.
    """

    def __init__(
        self,
        read: Callable[[str], str | None] = read_line,
        write: Callable[[str], None] = print,
    ) -> None:
        self._read = read
        self._write = write

    def _show(self, rows: Sequence[str], default: str | None) -> None:
        for i, c in enumerate(rows, 1):
            marker = "*" if c == default else " "
            self._write(f" {marker}#{i:<3}{c}")

    def pick(
        self,
        prompt: str,
        candidates: Sequence[str],
        *,
        default: str | None = None,
        require_match: bool = False,
    ) -> str | None:
        shown = list(candidates)
        self._show(shown, default)
        suffix = f"[{default}] " if default else ""

        while True:
            answer = self._read(f"{prompt}{suffix}")
            if answer is None:
                return None
            answer = answer.strip()

            if not answer:
                return default
            if answer in candidates:
                return answer
            if answer.startswith("#") and answer[1:].isdigit():
                n = int(answer[1:])
                if 1 <= n <= len(shown):
                    return shown[n - 1]
                self._write(f"No row {n}")
                continue
            if answer.startswith("?"):
                shown = rank(answer[1:], candidates)
                if not shown:
                    self._write("No matches")
                    shown = list(candidates)
                self._show(shown, default)
                continue
            if require_match:
                prefixed = [c for c in candidates if c.startswith(answer)]
                if len(prefixed) == 1:
                    return prefixed[0]
                self._write(f"No match for {answer}")
                return None
            return answer
