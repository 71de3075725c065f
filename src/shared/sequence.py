"""Sequential identifiers whose lexical order matches generation order."""

import threading
from contextlib import contextmanager

from shared.repository import count


class IdSequence:
    """Numbers records of one aggregate ``<prefix>-000001``, ``<prefix>-000002``...

    The next number is derived from how many records are stored, so records
    must never be deleted, and the caller must save the new record before
    leaving ``allocate``. Ids stay contiguous because a number is only handed
    out to a record that is about to be saved.
    """

    def __init__(self, prefix: str, aggregate_cls, width: int = 6):
        self.prefix = prefix
        self.aggregate_cls = aggregate_cls
        self.width = width
        self._lock = threading.Lock()

    @contextmanager
    def allocate(self):
        with self._lock:
            number = count(self.aggregate_cls) + 1
            yield f"{self.prefix}-{number:0{self.width}d}"
