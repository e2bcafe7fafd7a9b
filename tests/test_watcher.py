"""Tests for ConversationWatcher."""

import os
import pytest
from pathlib import Path

from timeline_tui.data.watcher import ConversationWatcher


def _bump_mtime(path: Path) -> None:
    stat = path.stat()
    os.utime(path, (stat.st_atime, stat.st_mtime + 10))


class TestConversationWatcher:
    """Tests for polling and callback dispatch."""

    @pytest.mark.asyncio
    async def test_no_change_no_callback(self, conversation_file: Path):
        watcher = ConversationWatcher(conversation_file)
        calls = []

        async def on_change():
            calls.append(1)

        watcher.on_change(on_change)
        watcher._mtime = watcher._get_mtime()

        assert await watcher.poll_once() is False
        assert calls == []

    @pytest.mark.asyncio
    async def test_change_notifies_callbacks(self, conversation_file: Path):
        watcher = ConversationWatcher(conversation_file)
        calls = []

        async def first():
            calls.append("first")

        async def second():
            calls.append("second")

        watcher.on_change(first)
        watcher.on_change(second)
        watcher._mtime = watcher._get_mtime()

        _bump_mtime(conversation_file)

        assert await watcher.poll_once() is True
        assert calls == ["first", "second"]
        # Same mtime again: no second notification
        assert await watcher.poll_once() is False

    @pytest.mark.asyncio
    async def test_failing_callback_does_not_stop_others(self, conversation_file: Path):
        watcher = ConversationWatcher(conversation_file)
        calls = []

        async def broken():
            raise RuntimeError("boom")

        async def ok():
            calls.append("ok")

        watcher.on_change(broken)
        watcher.on_change(ok)

        assert await watcher.poll_once() is True
        assert calls == ["ok"]

    @pytest.mark.asyncio
    async def test_deleted_file_counts_as_change(self, conversation_file: Path):
        watcher = ConversationWatcher(conversation_file)
        watcher._mtime = watcher._get_mtime()

        conversation_file.unlink()

        assert await watcher.poll_once() is True
        assert watcher._get_mtime() == 0

    @pytest.mark.asyncio
    async def test_start_and_stop(self, conversation_file: Path):
        watcher = ConversationWatcher(conversation_file, poll_interval=0.01)

        watcher.start()
        assert watcher._task is not None
        assert watcher._mtime == conversation_file.stat().st_mtime

        # Starting twice is a no-op
        task = watcher._task
        watcher.start()
        assert watcher._task is task

        watcher.stop()
        assert watcher._task is None
