"""String interning: one canonical object per distinct byte content."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from dataclasses import dataclass

from lazi.buf import GrowBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class InternedString:
    """Immutable interned bytes. Compares and hashes by identity."""

    data: bytes

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        return self.data.decode("utf-8", errors="replace")


class StringInterner:
    """Table mapping byte content to a single InternedString.

    Entries are never removed, so an identity handed out stays valid for the
    interner's lifetime and two identities are equal exactly when their
    contents are.
    """

    def __init__(self) -> None:
        self._entries: GrowBuffer[InternedString] = GrowBuffer()
        self._index: dict[bytes, InternedString] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[InternedString]:
        return iter(self._entries)

    def __contains__(self, data: object) -> bool:
        if isinstance(data, str):
            data = data.encode("utf-8")
        if not isinstance(data, (bytes, bytearray, memoryview)):
            return False
        return bytes(data) in self._index

    def intern(self, data: bytes | bytearray | memoryview | str) -> InternedString:
        """Return the canonical InternedString for *data*, adding it if new."""
        key = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        with self._lock:
            existing = self._index.get(key)
            if existing is not None:
                return existing
            entry = InternedString(key)
            self._entries.push(entry)
            self._index[key] = entry
        logger.debug("interned %r (%d entries)", key, len(self._entries))
        return entry
