"""reclose — track closed documents and bring them back.

Layout:
    config.py        HistoryConfig caps, reclose.toml + env loading
    history.py       BoundedHistory: most-recent-first, capped
    trackers.py      FileCloseTracker (paths), BufferCloseTracker (name + content)
    session.py       RecloseSession: owns both tracks, hook subscriptions
    commands.py      name -> callable table for editor bindings / the REPL
    hosts/           DocumentHost / Picker protocols, in-memory host
"""
