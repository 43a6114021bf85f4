# Copyright 2026 vim-client Contributors
# SPDX-License-Identifier: Apache-2.0
"""References to remote managed objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .connection import Connection


@dataclass(frozen=True)
class ManagedObjectReference:
    """Identity of a remote object: its kind and its server-side id."""

    kind: str
    identity: str

    def __str__(self) -> str:
        return f"{self.kind}:{self.identity}"


class ManagedObject:
    """Callable proxy for one remote object.

    Remote methods are reached as attributes whose name starts with an
    upper-case letter::

        si = ManagedObject(conn, "ServiceInstance", "ServiceInstance")
        content = si.RetrieveServiceContent()
        sm.Login(userName="root", password="secret")
    """

    def __init__(self, conn: Connection, kind: str, identity: str) -> None:
        self._conn = conn
        self.ref = ManagedObjectReference(kind, identity)

    @property
    def kind(self) -> str:
        return self.ref.kind

    @property
    def identity(self) -> str:
        return self.ref.identity

    @property
    def connection(self) -> Connection:
        return self._conn

    def invoke(self, method: str, params: dict[str, Any] | None = None) -> Any:
        """Invoke ``method`` on this object through the connection."""
        return self._conn.invoke(self.ref, method, params or {})

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if not name[:1].isupper():
            raise AttributeError(name)

        def method(**params: Any) -> Any:
            return self.invoke(name, params)

        method.__name__ = name
        return method

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ManagedObject):
            return NotImplemented
        return self.ref == other.ref and self._conn is other._conn

    def __hash__(self) -> int:
        return hash(self.ref)

    def __repr__(self) -> str:
        return f"{self.kind}({self.identity!r})"
