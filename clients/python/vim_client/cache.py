# Copyright 2026 vim-client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Lazily resolved value that can be reset."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Unresolved:
    """Nothing cached yet, or the cached value was invalidated."""


@dataclass(frozen=True)
class Resolved(Generic[T]):
    """A cached value."""

    value: T


UNRESOLVED = Unresolved()

SlotState = Union[Unresolved, Resolved[T]]


class LazySlot(Generic[T]):
    """Holds one value, resolving it on first use and again after :meth:`reset`.

    The lock is re-entrant and exposed so a caller can make a mutation and the
    reset atomic with respect to :meth:`get`.
    """

    def __init__(self, resolve: Callable[[], T]) -> None:
        self._resolve = resolve
        self._state: SlotState[T] = UNRESOLVED
        self.lock = threading.RLock()

    @property
    def state(self) -> SlotState[T]:
        return self._state

    def get(self) -> T:
        with self.lock:
            state = self._state
            if isinstance(state, Resolved):
                return state.value
            value = self._resolve()
            self._state = Resolved(value)
            return value

    def reset(self) -> None:
        with self.lock:
            self._state = UNRESOLVED
