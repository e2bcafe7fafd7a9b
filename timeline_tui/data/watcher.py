"""File watcher that reloads the conversation log when it changes."""

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)


class ConversationWatcher:
    """Poll a conversation file's mtime and notify callbacks on change."""

    def __init__(self, path: Path, poll_interval: float = 2.0):
        """Initialize watcher.

        Args:
            path: Conversation file to watch.
            poll_interval: Seconds between polls (default 2.0).
        """
        self.path = path
        self.poll_interval = poll_interval
        self._running = False
        self._task: asyncio.Task | None = None
        self._mtime: float = 0
        self._callbacks: list[Callable[[], Awaitable[None]]] = []

    def on_change(self, callback: Callable[[], Awaitable[None]]) -> None:
        """Register callback for conversation file changes."""
        self._callbacks.append(callback)

    def _get_mtime(self) -> float:
        """Get modification time of the file, 0 if it does not exist."""
        try:
            return self.path.stat().st_mtime
        except OSError:
            return 0

    async def _notify(self) -> None:
        """Notify all callbacks."""
        for callback in self._callbacks:
            try:
                await callback()
            except Exception:
                # One failing callback must not stop the others or the watcher.
                logger.exception("Conversation change callback failed")

    async def poll_once(self) -> bool:
        """Check the file once, notifying callbacks if it changed.

        Returns:
            True if a change was detected.
        """
        mtime = self._get_mtime()
        if mtime == self._mtime:
            return False
        self._mtime = mtime
        logger.info("Conversation file changed: %s", self.path)
        await self._notify()
        return True

    async def _poll(self) -> None:
        """Poll for changes until stopped."""
        while self._running:
            await self.poll_once()
            await asyncio.sleep(self.poll_interval)

    def start(self) -> None:
        """Start watching for changes from the file's current state."""
        if self._running:
            return
        self._running = True
        self._mtime = self._get_mtime()
        self._task = asyncio.create_task(self._poll())

    def stop(self) -> None:
        """Stop watching for changes."""
        self._running = False
        if self._task:
            self._task.cancel()
            self._task = None
