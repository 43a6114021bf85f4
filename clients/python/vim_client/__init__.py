# Copyright 2026 vim-client Contributors
# SPDX-License-Identifier: Apache-2.0
"""VIM Client: session bootstrap for vSphere SDK endpoints."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from .cache import LazySlot, Resolved, Unresolved
from .config import ClientConfig
from .connection import Connection
from .errors import (
    AuthenticationError,
    ConfigurationError,
    CredentialFileError,
    FaultError,
    InvalidRevisionError,
    TransportError,
    VimError,
)
from .objects import ManagedObject, ManagedObjectReference
from .options import (
    ConnectionOptions,
    normalize_certificate_options,
    normalize_password_options,
)
from .revision import Revision, negotiate
from .vim import VIM
from . import protocol

__version__ = "0.1.0"

__all__ = [
    # Top-level functions
    "connect",
    "connect_with_certificate",
    # Classes
    "VIM",
    "ClientConfig",
    "Connection",
    "ConnectionOptions",
    "ManagedObject",
    "ManagedObjectReference",
    "Revision",
    "negotiate",
    "LazySlot",
    "Resolved",
    "Unresolved",
    # Errors
    "VimError",
    "ConfigurationError",
    "CredentialFileError",
    "InvalidRevisionError",
    "AuthenticationError",
    "TransportError",
    "FaultError",
]

logger = logging.getLogger(__name__)

ConnectionFactory = Callable[[ConnectionOptions], Connection]
OptionsLike = ConnectionOptions | Mapping[str, Any]


def connect(
    options: OptionsLike,
    *,
    config: ClientConfig | None = None,
    connection_factory: ConnectionFactory | None = None,
) -> VIM:
    """Connect to a vSphere SDK endpoint with a username and password.

    Args:
        options: A :class:`ConnectionOptions` or a mapping with the same keys.
            ``host`` is required; ``user`` defaults to ``root``, ``password``
            to ``""``, ``ssl`` to true, ``port`` to 443 (80 without SSL),
            ``path`` to ``/sdk``.
        config: Process-wide settings; read from the environment if omitted.
        connection_factory: Builds the transport from the normalized options.
            Defaults to the factory named by ``config.connection_factory``.

    Returns:
        An authenticated VIM session.

    Raises:
        ConfigurationError: If the options are malformed or incomplete.
        AuthenticationError: If the server rejects the login.
    """
    config = config if config is not None else ClientConfig.from_environ()
    opts, rev_given = normalize_password_options(options, config)
    factory = connection_factory or config.resolve_factory()
    params = protocol.login_request(opts.user, opts.password)
    return _establish(factory, opts, rev_given, protocol.LOGIN, params)


def connect_with_certificate(
    options: OptionsLike,
    *,
    config: ClientConfig | None = None,
    connection_factory: ConnectionFactory | None = None,
) -> VIM:
    """Connect as a registered extension, authenticating with a certificate.

    Args:
        options: A :class:`ConnectionOptions` or a mapping with the same keys.
            ``proxy_host``, ``extension_key``, ``cert`` and ``key`` are
            required; ``cert`` and ``key`` are file paths. ``host`` defaults
            to ``sdkTunnel``, ``port`` to 8089, ``proxy_port`` to 80,
            ``path`` to ``/sdkTunnel``.
        config: Process-wide settings; read from the environment if omitted.
        connection_factory: Builds the transport from the normalized options.

    Returns:
        An authenticated VIM session.

    Raises:
        ConfigurationError: If a required option is missing.
        CredentialFileError: If the certificate or key cannot be read.
        AuthenticationError: If the server rejects the login.
    """
    config = config if config is not None else ClientConfig.from_environ()
    opts, rev_given = normalize_certificate_options(options, config)
    factory = connection_factory or config.resolve_factory()
    params = protocol.login_extension_request(opts.extension_key)
    return _establish(
        factory, opts, rev_given, protocol.LOGIN_EXTENSION_BY_CERTIFICATE, params
    )


def _establish(
    factory: ConnectionFactory,
    opts: ConnectionOptions,
    rev_given: bool,
    login_method: str,
    login_params: dict[str, Any],
) -> VIM:
    try:
        conn = factory(opts)
    except TransportError as e:
        raise AuthenticationError(f"Cannot reach {opts.host}: {e}") from e
    vim = VIM(conn)
    try:
        vim.session_manager().invoke(login_method, login_params)
    except (FaultError, TransportError) as e:
        conn.close()
        raise AuthenticationError(f"{login_method} to {opts.host} failed: {e}") from e
    except BaseException:
        conn.close()
        raise
    logger.info("Logged in to %s", opts.host)

    if not rev_given:
        try:
            advertised = vim.service_content().about.apiVersion
            vim.set_revision(negotiate(advertised))
        except BaseException:
            try:
                vim.close()
            except Exception as e:
                logger.warning(
                    "Teardown of %s after failed negotiation: %s", opts.host, e
                )
            raise
        logger.info(
            "Negotiated revision %s with %s (server offers %s)",
            vim.rev, opts.host, advertised,
        )
    return vim
