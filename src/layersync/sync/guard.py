"""Re-entrancy guard for the sync propagators.

Every mutation a propagator performs on one side echoes back as a
notification from that side. The propagator raises a guard flag around the
mutation, and the handler that would react to the echo checks the flag at
entry and does nothing while it is raised.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

T = TypeVar("T")


class Guard(enum.Flag):
    NONE = 0
    ADDING = enum.auto()
    REMOVING = enum.auto()


class GuardState:
    """Guard flags of one store/collection binding."""

    def __init__(self) -> None:
        self.flags = Guard.NONE

    def active(self, guard: Guard) -> bool:
        return bool(self.flags & guard)

    @contextmanager
    def guard(self, guard: Guard) -> Iterator[None]:
        previous = self.flags
        self.flags = previous | guard
        try:
            yield
        finally:
            self.flags = previous

    def with_guard(self, guard: Guard, fn: Callable[[], T]) -> T:
        with self.guard(guard):
            return fn()

    def __repr__(self) -> str:
        return f"GuardState({self.flags!r})"
