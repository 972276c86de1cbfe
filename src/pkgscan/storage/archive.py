"""Lazy, read-once cache of an archive's entry names."""

import logging
import threading
import zipfile
from collections.abc import Callable
from pathlib import Path

from pkgscan.exceptions import StorageIOError

logger = logging.getLogger("pkgscan.storage")


class ArchiveCache:
    """Entry names of one archive, read on first use and kept for good.

    The archive is assumed not to change while the process runs, so the list
    is never invalidated. A failed read is kept too: later calls raise a
    StorageIOError from the same cause without touching the archive again.
    """

    def __init__(
        self,
        path: Path,
        opener: Callable[[Path], zipfile.ZipFile] | None = None,
    ):
        self.path = path
        self._opener = opener if opener is not None else zipfile.ZipFile
        self._lock = threading.Lock()
        self._entries: tuple[str, ...] | None = None
        self._error: OSError | zipfile.BadZipFile | None = None

    def entries(self) -> tuple[str, ...]:
        """Get all entry names in archive order.

        Raises:
            StorageIOError: If the archive cannot be opened or read (now or
                on the first call)
        """
        if self._entries is None and self._error is None:
            with self._lock:
                if self._entries is None and self._error is None:
                    self._populate()

        if self._error is not None:
            raise StorageIOError(
                f"Cannot read archive {self.path}: {self._error}"
            ) from self._error
        return self._entries

    def _populate(self) -> None:
        try:
            with self._opener(self.path) as archive:
                entries = tuple(archive.namelist())
        except (OSError, zipfile.BadZipFile) as e:
            self._error = e
            return

        logger.debug("Read %d entries from %s", len(entries), self.path)
        self._entries = entries
