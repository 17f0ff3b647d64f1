"""Caller-owned registry of extension prototypes."""

from __future__ import annotations

import threading
from typing import Iterable, Iterator

from syndikit.extensions.base import ExtensionFactory


class ExtensionRegistry:
    """Copy-on-write collection of prototypes keyed by namespace.

    Writers swap in a new immutable snapshot under a lock; readers only ever
    see a complete snapshot, so lookups during concurrent fills need no lock.
    """

    def __init__(self, prototypes: Iterable[ExtensionFactory] = ()) -> None:
        self._lock = threading.Lock()
        self._prototypes: tuple[ExtensionFactory, ...] = ()
        for prototype in prototypes:
            self.register(prototype)

    def register(self, prototype: ExtensionFactory) -> None:
        """Add ``prototype``, replacing any prototype of the same type."""

        if prototype is None:
            raise ValueError("Extension prototype cannot be None")
        if not isinstance(prototype, ExtensionFactory):
            raise TypeError(f"{type(prototype).__name__} does not implement matches()/create()")

        with self._lock:
            current = self._prototypes
            for index, existing in enumerate(current):
                if type(existing) is type(prototype):
                    self._prototypes = current[:index] + (prototype,) + current[index + 1 :]
                    return
            self._prototypes = current + (prototype,)

    def unregister(self, extension_type: type) -> bool:
        """Remove the prototype of ``extension_type``; return False if absent."""

        with self._lock:
            current = self._prototypes
            kept = tuple(prototype for prototype in current if type(prototype) is not extension_type)
            if len(kept) == len(current):
                return False
            self._prototypes = kept
            return True

    def lookup(self, namespace: str) -> tuple[ExtensionFactory, ...]:
        """Return every prototype whose namespace matches ``namespace``."""

        snapshot = self._prototypes
        return tuple(prototype for prototype in snapshot if prototype.matches(namespace))

    def snapshot(self) -> tuple[ExtensionFactory, ...]:
        return self._prototypes

    def __iter__(self) -> Iterator[ExtensionFactory]:
        return iter(self._prototypes)

    def __len__(self) -> int:
        return len(self._prototypes)

    def __contains__(self, item: object) -> bool:
        wanted = item if isinstance(item, type) else type(item)
        return any(type(prototype) is wanted for prototype in self._prototypes)
