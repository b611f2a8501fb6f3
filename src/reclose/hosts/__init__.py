"""Document hosts: the editor side of close tracking.

``base`` declares what the core needs from an editor; ``memory`` is a
self-contained host used by the REPL and the test suite.
"""
