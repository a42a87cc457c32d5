"""
Per-user serialization for primary address changes.

Demoting the previous primary and promoting the new one are two writes; they
run under the lock returned by `user_lock` so two requests for the same user
cannot interleave inside one process. The partial unique index on
`useraddresses` rejects any interleaving that still happens across processes.
"""

import threading
from contextlib import contextmanager
from typing import Dict

_registry_lock = threading.Lock()
_user_locks: Dict[str, threading.Lock] = {}


def get_lock(user_id) -> threading.Lock:
    key = str(user_id)
    with _registry_lock:
        lock = _user_locks.get(key)
        if lock is None:
            lock = threading.Lock()
            _user_locks[key] = lock
        return lock


@contextmanager
def user_lock(user_id):
    lock = get_lock(user_id)
    with lock:
        yield


def reset():
    """Forget all locks (tests only)."""
    with _registry_lock:
        _user_locks.clear()
