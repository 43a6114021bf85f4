# Copyright 2026 vim-client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Process-wide client settings read from the environment."""

from __future__ import annotations

import importlib
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Mapping

from .errors import ConfigurationError

if TYPE_CHECKING:
    from .connection import Connection
    from .options import ConnectionOptions

    ConnectionFactory = Callable[[ConnectionOptions], Connection]

DEBUG_ENV = "VIM_CLIENT_DEBUG"
EXTENSION_PATH_ENV = "VIM_CLIENT_EXTENSION_PATH"
VMODL_ENV = "VMODL"
CONNECTION_ENV = "VIM_CLIENT_CONNECTION"


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by every connection made in this process.

    Build one with :meth:`from_environ` at program start and pass it to
    :func:`vim_client.connect`. Nothing below the entry point reads the
    environment.
    """

    debug: bool = False
    extension_paths: tuple[str, ...] = ()
    vmodl_path: str | None = None
    connection_factory: str | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        env = os.environ if environ is None else environ
        return cls(
            debug=bool(env.get(DEBUG_ENV)),
            extension_paths=tuple(
                p for p in env.get(EXTENSION_PATH_ENV, "").split(":") if p
            ),
            vmodl_path=env.get(VMODL_ENV) or None,
            connection_factory=env.get(CONNECTION_ENV) or None,
        )

    def resolve_factory(self) -> ConnectionFactory:
        """Import the configured ``module:attribute`` connection factory."""
        if not self.connection_factory:
            raise ConfigurationError(
                f"No connection factory configured (set {CONNECTION_ENV} "
                "or pass connection_factory)"
            )
        module_name, sep, attr = self.connection_factory.partition(":")
        if not sep or not module_name or not attr:
            raise ConfigurationError(
                f"Connection factory must look like 'module:attribute', "
                f"got {self.connection_factory!r}"
            )
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise ConfigurationError(
                f"Cannot import connection factory module {module_name!r}: {e}"
            ) from e
        try:
            factory: ConnectionFactory = getattr(module, attr)
        except AttributeError:
            raise ConfigurationError(
                f"Module {module_name!r} has no attribute {attr!r}"
            ) from None
        return factory
