"""Tests for the in-memory document host and subscription handles."""

from __future__ import annotations

import pytest
from pathlib import Path

from reclose.hosts.base import Document, DocumentHost, Subscription
from reclose.hosts.memory import InMemoryHost


@pytest.fixture
def host() -> InMemoryHost:
    return InMemoryHost()


class TestDocument:
    def test_has_file_and_size(self):
        assert Document(name="a", path="/a").has_file is True
        assert Document(name="b", text="abc").has_file is False
        assert Document(name="b", text="abc").size == 3


class TestSubscription:
    def test_cancel_detaches_once(self):
        detached = []
        hook = lambda doc: None  # noqa: E731
        sub = Subscription(hook, detached.append)
        assert sub.active
        sub.cancel()
        sub.cancel()
        assert detached == [hook]
        assert not sub.active


class TestInMemoryHost:
    def test_satisfies_protocol(self, host: InMemoryHost):
        assert isinstance(host, DocumentHost)

    def test_visit_names_by_basename_and_uniquifies(self, host: InMemoryHost):
        a = host.visit("/x/notes.txt")
        b = host.visit("/y/notes.txt")
        assert a.name == "notes.txt"
        assert b.name == "notes.txt<2>"

    def test_visit_same_path_reuses_document(self, host: InMemoryHost):
        host.visit("/x/a.txt")
        host.visit("/x/a.txt")
        assert len(host.documents()) == 1

    def test_visit_reads_existing_file(self, host: InMemoryHost, tmp_path: Path):
        f = tmp_path / "f.txt"
        f.write_text("content", encoding="utf-8")
        assert host.visit(str(f)).text == "content"

    def test_insert_at_point(self, host: InMemoryHost):
        host.switch_to_buffer("buf")
        host.insert("hello")
        host.insert(" world")
        assert host.get("buf").text == "hello world"

    def test_insert_without_active_raises(self, host: InMemoryHost):
        with pytest.raises(RuntimeError):
            host.insert("x")

    def test_switch_to_existing_buffer_activates_it(self, host: InMemoryHost):
        host.new_buffer("one", "1")
        host.new_buffer("two", "2")
        host.switch_to_buffer("one")
        assert host.active.name == "one"
        assert len(host.documents()) == 2

    def test_close_runs_hooks_with_snapshot(self, host: InMemoryHost):
        seen: list[Document] = []
        host.on_close(seen.append)
        host.new_buffer("scratch", "text")
        host.close()
        assert seen == [Document(name="scratch", text="text")]
        assert host.documents() == []
        assert host.active is None

    def test_close_activates_remaining_document(self, host: InMemoryHost):
        host.new_buffer("one")
        host.new_buffer("two")
        host.close("two")
        assert host.active.name == "one"

    def test_close_unknown_raises(self, host: InMemoryHost):
        with pytest.raises(KeyError):
            host.close("missing")

    def test_on_close_is_idempotent(self, host: InMemoryHost):
        calls = []

        def hook(doc):
            calls.append(doc.name)

        first = host.on_close(hook)
        second = host.on_close(hook)
        assert first is second
        assert host.hook_count == 1

        host.new_buffer("a")
        host.close()
        assert calls == ["a"]

    def test_cancelled_hook_not_called(self, host: InMemoryHost):
        calls = []
        sub = host.on_close(calls.append)
        sub.cancel()
        host.new_buffer("a")
        host.close()
        assert calls == []
        assert host.hook_count == 0

    def test_close_empty_name_does_not_close_active(self, host: InMemoryHost):
        host.new_buffer("keep")
        with pytest.raises(KeyError):
            host.close("")
        assert host.active.name == "keep"
