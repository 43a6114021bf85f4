# Copyright 2026 vim-client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Transport handle for one VIM SDK endpoint.

:class:`Connection` is the seam between this package and whatever actually
carries remote calls (SOAP, JSON, a test double). Subclasses implement
:meth:`Connection.invoke` and, when they hold OS resources, :meth:`Connection._release`.
"""

from __future__ import annotations

import abc
import logging
from typing import Any

from .objects import ManagedObjectReference
from .options import ConnectionOptions

logger = logging.getLogger(__name__)


class Connection(abc.ABC):
    """Low-level handle: endpoint options, negotiated revision, session cookie."""

    def __init__(self, options: ConnectionOptions) -> None:
        self.options = options
        self._rev = options.rev
        self.cookie: str | None = None
        self._closed = False

    @property
    def rev(self) -> str | None:
        """Protocol revision sent with every call."""
        return self._rev

    @rev.setter
    def rev(self, value: str) -> None:
        self._rev = value

    @property
    def host(self) -> str | None:
        """Configured endpoint host."""
        return self.options.host

    @property
    def is_authenticated(self) -> bool:
        """Whether a session cookie is held."""
        return bool(self.cookie)

    @property
    def is_closed(self) -> bool:
        """Whether close() has run."""
        return self._closed

    @abc.abstractmethod
    def invoke(
        self,
        ref: ManagedObjectReference,
        method: str,
        params: dict[str, Any],
    ) -> Any:
        """Invoke ``method`` on the remote object ``ref``.

        Implementations set :attr:`cookie` when a login call succeeds.

        Raises:
            FaultError: If the server answers with a fault.
            TransportError: If the call cannot be delivered or answered.
        """

    def close(self) -> None:
        """Release the transport. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self.cookie = None
        self._release()
        logger.debug("Connection to %s closed", self.host)

    def _release(self) -> None:
        """Hook for subclasses holding sockets or sessions."""

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
