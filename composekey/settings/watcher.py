"""Debounced watching of the settings file."""

import os
from pathlib import Path
import threading
from typing import Callable

from loguru import logger
from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from composekey.utils.constants import Constants
from composekey.utils.helpers import ensure_directory_exists

_RELEVANT_EVENTS = {EVENT_TYPE_CREATED, EVENT_TYPE_MODIFIED, EVENT_TYPE_MOVED}


class Debouncer:
    """Coalesce bursts of notifications into one delayed callback.

    The first ``trigger()`` while idle arms a timer; later triggers are
    ignored until it fires. The slot is cleared before the callback runs,
    so a notification arriving during the callback starts a new cycle.
    """

    def __init__(self, callback: Callable[[], None], delay: float = Constants.RELOAD_DELAY):
        self.delay = delay
        self._callback = callback
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def trigger(self) -> bool:
        """Arm the timer unless one is already pending.

        Returns:
            True if a new timer was started
        """
        with self._lock:
            if self._timer is not None:
                return False
            timer = threading.Timer(self.delay, self._fire)
            timer.daemon = True
            self._timer = timer
            timer.start()
            return True

    def _fire(self) -> None:
        with self._lock:
            # A cancelled timer may still get here
            if self._timer is not threading.current_thread():
                return
            self._timer = None
        try:
            self._callback()
        except Exception:  # pylint: disable=broad-except
            logger.exception("Debounced callback failed")

    def cancel(self) -> None:
        """Dispose of a pending timer, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


class _ConfigFileHandler(FileSystemEventHandler):
    """Forward changes to one file name of a watched directory."""

    def __init__(self, filename: str, on_change: Callable[[], None]):
        super().__init__()
        self.filename = filename
        self.on_change = on_change

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in _RELEVANT_EVENTS:
            return
        paths = [event.src_path, getattr(event, "dest_path", "")]
        if any(p and Path(os.fsdecode(p)).name == self.filename for p in paths):
            logger.debug(f"Settings file event: {event.event_type}")
            self.on_change()


class ConfigWatcher:
    """Watch the directory of ``config_file`` and call ``on_change`` once per burst."""

    def __init__(
        self,
        config_file: str | Path,
        on_change: Callable[[], None],
        delay: float = Constants.RELOAD_DELAY,
    ):
        self.config_file = Path(config_file)
        self._debouncer = Debouncer(on_change, delay)
        self._observer = None

    @property
    def is_running(self) -> bool:
        return self._observer is not None

    def notify(self) -> None:
        """Report a change of the settings file."""
        self._debouncer.trigger()

    def start(self) -> None:
        if self._observer is not None:
            return
        watch_dir = self.config_file.parent
        ensure_directory_exists(watch_dir)

        observer = Observer()
        observer.daemon = True
        observer.schedule(
            _ConfigFileHandler(self.config_file.name, self.notify),
            str(watch_dir),
            recursive=False,
        )
        observer.start()
        self._observer = observer
        logger.debug(f"Watching {self.config_file}")

    def stop(self) -> None:
        """Stop watching; a pending reload is dropped.

        Events delivered while the observer shuts down are dropped as well:
        the debouncer is cancelled only after the observer thread has ended.
        """
        observer, self._observer = self._observer, None
        if observer is not None:
            observer.stop()
            observer.join()
        self._debouncer.cancel()
        if observer is not None:
            logger.debug(f"Stopped watching {self.config_file}")
