# Copyright 2026 vim-client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Session facade over one VIM SDK connection."""

from __future__ import annotations

import logging
from typing import Any

from . import protocol
from .cache import LazySlot
from .connection import Connection
from .errors import FaultError, TransportError
from .objects import ManagedObject

logger = logging.getLogger(__name__)


class VIM:
    """An authenticated session with one vSphere SDK endpoint.

    Returned by :func:`vim_client.connect` and
    :func:`vim_client.connect_with_certificate`. The service content is
    fetched on first use and cached until the protocol revision changes.

    Example::

        vim = vim_client.connect({"host": "vc.example", "password": "pw"})
        try:
            root = vim.root_folder()
        finally:
            vim.close()
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn
        self._content: LazySlot[Any] = LazySlot(self._retrieve_service_content)

    @property
    def connection(self) -> Connection:
        return self._conn

    @property
    def host(self) -> str | None:
        return self._conn.host

    @property
    def rev(self) -> str | None:
        return self._conn.rev

    @rev.setter
    def rev(self, value: str) -> None:
        self.set_revision(value)

    @property
    def logged_in(self) -> bool:
        return self._conn.is_authenticated

    def set_revision(self, rev: str) -> None:
        """Switch the protocol revision and drop the cached service content."""
        with self._content.lock:
            self._conn.rev = rev
            self._content.reset()
        logger.debug(
            "Revision of %s set to %s, service content invalidated", self.host, rev
        )

    def service_instance(self) -> ManagedObject:
        """The ServiceInstance, root of the inventory."""
        return ManagedObject(
            self._conn, protocol.SERVICE_INSTANCE, protocol.SERVICE_INSTANCE
        )

    def service_content(self) -> Any:
        """Cached result of ``ServiceInstance.RetrieveServiceContent``."""
        return self._content.get()

    def _retrieve_service_content(self) -> Any:
        logger.debug("Retrieving service content from %s", self.host)
        return self.service_instance().RetrieveServiceContent()

    def session_manager(self) -> ManagedObject:
        """Alias for ``service_content().sessionManager``."""
        return self.service_content().sessionManager

    def root_folder(self) -> ManagedObject:
        """Alias for ``service_content().rootFolder``."""
        return self.service_content().rootFolder

    root = root_folder

    def property_collector(self) -> ManagedObject:
        """Alias for ``service_content().propertyCollector``."""
        return self.service_content().propertyCollector

    def search_index(self) -> ManagedObject:
        """Alias for ``service_content().searchIndex``."""
        return self.service_content().searchIndex

    def close(self) -> None:
        """Log out and release the connection.

        Logout is best effort: the server may already have dropped the
        session, so faults and transport failures are logged and ignored.
        Calling close again does nothing.
        """
        if self._conn.is_closed:
            return
        session_manager = ManagedObject(
            self._conn, protocol.SESSION_MANAGER, protocol.SESSION_MANAGER
        )
        try:
            session_manager.Logout()
        except (FaultError, TransportError) as e:
            logger.warning("Logout from %s failed: %s", self.host, e)
        finally:
            self._conn.cookie = None
            self._conn.close()
        logger.info("Session with %s closed", self.host)

    def __enter__(self) -> VIM:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"VIM({self.host})"
