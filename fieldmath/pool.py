#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Provide a fork-join worker pool and the package wide concurrency settings."""

from concurrent.futures import ThreadPoolExecutor, Future, wait
from contextlib import contextmanager
import logging
import threading
from typing import Callable, Dict, Iterator, List, Optional

import psutil

from .names import THRESHOLD, MAX_WORKERS, DEFAULT_THRESHOLD

LOG = logging.getLogger(__name__)

__all__ = ("ForkJoinPool", "configure", "get_config", "get_pool", "shared_pool", "shutdown")


def _default_workers() -> int:
    return psutil.cpu_count(logical=True) or 1


class ForkJoinPool:
    """Thread pool for structured fork-join computations

    Tasks are forked with fork() and joined with join(). join() blocks until
    every given future has finished, successful or not, and then returns
    the results in the order of the futures, re-raising the first failure
    in that order. No task outlives the join of its caller.

    Workers never block on other tasks, callers fork all leaves of a task
    tree first and join afterwards, so the pool cannot dead-lock on nested
    waits regardless of its size.

    A computation holds the pool with running() from its first fork to its
    last join. A retired pool keeps accepting tasks from computations that
    still hold it and stops once the last of them has left.
    """

    def __init__(self, max_workers: Optional[int] = None):
        if max_workers is None:
            max_workers = _default_workers()
        if max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="fieldmath")
        self._state_lock = threading.Lock()
        self._active = 0
        self._retired = False
        LOG.debug("Started fork-join pool with %d workers.", max_workers)

    def fork(self, fn: Callable, *args) -> Future:
        """Schedule fn(*args) on a worker"""
        return self._executor.submit(fn, *args)

    @staticmethod
    def join(futures: List[Future]) -> list:
        """Wait for all futures and return their results in order"""
        wait(futures)
        return [f.result() for f in futures]

    def acquire(self) -> None:
        with self._state_lock:
            self._active += 1

    def release(self) -> None:
        with self._state_lock:
            self._active -= 1
            stop = self._retired and self._active == 0
        if stop:
            self.shutdown(wait_for_tasks=False)

    @contextmanager
    def running(self) -> Iterator['ForkJoinPool']:
        """Hold the pool for the duration of one computation"""
        self.acquire()
        try:
            yield self
        finally:
            self.release()

    def retire(self) -> None:
        """Stop the pool as soon as no computation holds it anymore"""
        with self._state_lock:
            self._retired = True
            active = self._active
        if active == 0:
            self.shutdown(wait_for_tasks=False)
        else:
            LOG.debug("Retired fork-join pool still used by %d computations.", active)

    def shutdown(self, wait_for_tasks: bool = True) -> None:
        self._executor.shutdown(wait=wait_for_tasks)
        LOG.debug("Stopped fork-join pool.")

    def __enter__(self):
        return self

    def __exit__(self, *args, **kwargs):
        """Clean up resources when leaving a context"""
        self.shutdown()


_lock = threading.Lock()
_config = {THRESHOLD: DEFAULT_THRESHOLD, MAX_WORKERS: None}
_pool: Optional[ForkJoinPool] = None


def configure(**kwargs) -> None:
    """Change the package wide concurrency settings

    Example:
        fieldmath.pool.configure(threshold=64, max_workers=4)

    Args:
        threshold (int):
            Column ranges of at least this width are split and computed
            concurrently during matrix multiplication (default 32).

        max_workers (int or None):
            Number of worker threads of the shared pool. None selects the
            number of logical CPUs. A new value replaces the shared pool;
            multiplications already running finish on the old one.
    """
    global _pool
    allowed_keys = {THRESHOLD, MAX_WORKERS}
    for key, value in kwargs.items():
        if key not in allowed_keys:
            raise ValueError("Key " + key + " is not supported.")
        if key == THRESHOLD and (not isinstance(value, int) or value < 2):
            raise ValueError(f"threshold must be an integer >= 2, got {value}")
        if key == MAX_WORKERS and value is not None and (not isinstance(value, int) or value < 1):
            raise ValueError(f"max_workers must be a positive integer or None, got {value}")
    old = None
    with _lock:
        restart = MAX_WORKERS in kwargs and kwargs[MAX_WORKERS] != _config[MAX_WORKERS]
        _config.update(kwargs)
        if restart and _pool is not None:
            old = _pool
            _pool = None
    if old is not None:
        old.retire()
    LOG.debug("Concurrency settings: %s", _config)


def get_config() -> Dict:
    """Return a copy of the active concurrency settings"""
    with _lock:
        return dict(_config)


def _shared() -> ForkJoinPool:
    # caller holds _lock
    global _pool
    if _pool is None:
        _pool = ForkJoinPool(_config[MAX_WORKERS])
    return _pool


def get_pool() -> ForkJoinPool:
    """Return the shared pool, creating it on first use"""
    with _lock:
        return _shared()


@contextmanager
def shared_pool() -> Iterator[ForkJoinPool]:
    """Hold the shared pool; configure() cannot stop it before the context is left"""
    with _lock:
        pool = _shared()
        pool.acquire()
    try:
        yield pool
    finally:
        pool.release()


def shutdown() -> None:
    """Stop the shared pool; a later get_pool() starts a new one"""
    global _pool
    with _lock:
        if _pool is not None:
            _pool.shutdown()
            _pool = None
