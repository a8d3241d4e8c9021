# Copyright (c) 2025 The MoodGarden Authors
# This file is part of the MoodGarden - Your Wellness Garden project.
# Licensed under the MIT License - see the LICENSE file for details.


import threading
from contextlib import contextmanager

_registry_lock = threading.Lock()
_user_locks = {}

# Shared pool of anonymous kindness messages
kindness_lock = threading.Lock()


def get_user_lock(user_id: str) -> threading.Lock:
    with _registry_lock:
        lock = _user_locks.get(user_id)
        if lock is None:
            lock = _user_locks[user_id] = threading.Lock()
        return lock


@contextmanager
def user_lock(user_id: str):
    """Serializes every read-modify-write of one user's progress row."""
    lock = get_user_lock(user_id)
    with lock:
        yield
