"""Keyed mutual exclusion for catalogue and cart mutations.

Locks are taken around a whole command, unit-of-work commit included, so
that check-then-write sequences on the same key never interleave.

Keys are acquired in the order given. Every caller follows one ordering:
the catalogue key (``category:*``, ``product:*``) first, then cart keys in
sorted order. Cart creation takes ``user:*`` alone. Locks are re-entrant,
so a thread may nest ``locked`` blocks over keys it already holds.

A key stays registered only while some thread holds or waits for it.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field


@dataclass
class _Entry:
    lock: threading.RLock = field(default_factory=threading.RLock)
    users: int = 0


_LOCKS: dict[str, _Entry] = {}
_REGISTRY_LOCK = threading.Lock()


def _checkout(key: str) -> _Entry:
    with _REGISTRY_LOCK:
        entry = _LOCKS.get(key)
        if entry is None:
            entry = _LOCKS[key] = _Entry()
        entry.users += 1
        return entry


def _checkin(key: str, entry: _Entry) -> None:
    with _REGISTRY_LOCK:
        entry.users -= 1
        if entry.users == 0 and _LOCKS.get(key) is entry:
            del _LOCKS[key]


def cart_keys(cart_ids) -> list[str]:
    return [f"cart:{cart_id}" for cart_id in sorted({str(c) for c in cart_ids})]


@contextmanager
def locked(*keys: str) -> Iterator[None]:
    """Hold the locks for all ``keys``, acquired left to right, for the duration of the block."""
    checked_out = []
    acquired = []
    try:
        for key in dict.fromkeys(keys):
            entry = _checkout(key)
            checked_out.append((key, entry))
            entry.lock.acquire()
            acquired.append(entry.lock)
        yield
    finally:
        for lock in reversed(acquired):
            lock.release()
        for key, entry in reversed(checked_out):
            _checkin(key, entry)


def registered_keys() -> list[str]:
    with _REGISTRY_LOCK:
        return sorted(_LOCKS)
