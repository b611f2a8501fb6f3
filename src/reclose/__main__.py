"""Entry point: python -m reclose [repl]

- No args / "repl": Interactive REPL over an in-memory document host
"""

from __future__ import annotations

import logging
import sys

from reclose.config import load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _run_repl() -> None:
    """Interactive REPL mode."""
    config = load_config()
    _setup_logging(config.log_level)

    from reclose.hosts.memory import InMemoryHost
    from reclose.picker import PromptPicker
    from reclose.repl import RecloseREPL
    from reclose.session import RecloseSession

    host = InMemoryHost()
    session = RecloseSession(host, PromptPicker(), config)
    if config.history.track_on_start:
        session.set_tracking_enabled(True)

    try:
        RecloseREPL(session, host).run()
    except KeyboardInterrupt:
        pass


def main() -> None:
    cmd = sys.argv[1] if len(sys.argv) > 1 else "repl"

    if cmd == "repl":
        _run_repl()
    else:
        print("Usage: python -m reclose [repl]")
        print("  repl   — Interactive REPL over in-memory documents (default)")
        sys.exit(1)


if __name__ == "__main__":
    main()
