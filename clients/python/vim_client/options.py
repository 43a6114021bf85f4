# Copyright 2026 vim-client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Connection options and their defaulting rules.

Every field of :class:`ConnectionOptions` starts as ``None`` ("not given") so
the defaulting functions can tell an explicit ``False``/``0``/``""`` from an
absent value. Defaults are applied in dependency order: ``ssl`` is settled
before ``port`` is derived from it, and whether ``rev`` was given is recorded
before ``rev`` itself is defaulted.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .config import ClientConfig
from .errors import ConfigurationError, CredentialFileError, InvalidRevisionError
from .revision import DEFAULT_REVISION, Revision

DEFAULT_USER = "root"
DEFAULT_PASSWORD = ""
DEFAULT_PATH = "/sdk"
DEFAULT_NAMESPACE = "urn:vim25"
HTTPS_PORT = 443
HTTP_PORT = 80

TUNNEL_HOST = "sdkTunnel"
TUNNEL_PORT = 8089
TUNNEL_PATH = "/sdkTunnel"
DEFAULT_PROXY_PORT = 80

# Keys of the loosely-typed option bag that map onto differently named fields.
_ALIASES = {
    "no-ssl": "no_ssl",
    "ns": "namespace",
    "proxyHost": "proxy_host",
    "proxyPort": "proxy_port",
    "extensionKey": "extension_key",
}


@dataclass
class ConnectionOptions:
    """Options for one connection to a VIM SDK endpoint.

    ``cert`` and ``key`` hold file paths as given by the caller; after
    :func:`normalize_certificate_options` they hold the file contents.
    """

    host: str | None = None
    port: int | None = None
    ssl: bool | None = None
    no_ssl: bool | None = None
    insecure: bool | None = None
    user: str | None = None
    password: str | None = field(default=None, repr=False)
    path: str | None = None
    namespace: str | None = None
    rev: str | None = None
    debug: bool | None = None
    proxy_host: str | None = None
    proxy_port: int | None = None
    extension_key: str | None = None
    cert: str | Path | bytes | None = field(default=None, repr=False)
    key: str | Path | bytes | None = field(default=None, repr=False)
    extension_paths: tuple[str, ...] | None = None
    vmodl_path: str | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> ConnectionOptions:
        """Build options from a plain mapping, accepting camelCase aliases."""
        known = {f.name for f in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}
        for raw_key, value in values.items():
            name = _ALIASES.get(raw_key, raw_key)
            if name not in known:
                raise ConfigurationError(f"Unknown connection option: {raw_key!r}")
            if name in kwargs:
                raise ConfigurationError(f"Connection option given twice: {name!r}")
            kwargs[name] = value
        return cls(**kwargs)


def coerce_options(options: ConnectionOptions | Mapping[str, Any]) -> ConnectionOptions:
    """Return a private copy of ``options`` as a :class:`ConnectionOptions`."""
    if isinstance(options, ConnectionOptions):
        return dataclasses.replace(options)
    if isinstance(options, Mapping):
        return ConnectionOptions.from_mapping(options)
    raise ConfigurationError(
        f"Connection options must be a mapping or ConnectionOptions, "
        f"got {type(options).__name__}"
    )


def normalize_password_options(
    options: ConnectionOptions | Mapping[str, Any],
    config: ClientConfig,
) -> tuple[ConnectionOptions, bool]:
    """Apply the username/password defaults.

    Returns:
        The normalized options and whether ``rev`` was given explicitly.

    Raises:
        ConfigurationError: If the options are malformed or ``host`` is missing.
    """
    opts = coerce_options(options)
    if not opts.host:
        raise ConfigurationError("host option required")
    if opts.user is None:
        opts.user = DEFAULT_USER
    if opts.password is None:
        opts.password = DEFAULT_PASSWORD
    _apply_ssl(opts)
    if opts.port is None:
        opts.port = HTTPS_PORT if opts.ssl else HTTP_PORT
    if opts.path is None:
        opts.path = DEFAULT_PATH
    rev_given = _apply_common(opts, config)
    return opts, rev_given


def normalize_certificate_options(
    options: ConnectionOptions | Mapping[str, Any],
    config: ClientConfig,
) -> tuple[ConnectionOptions, bool]:
    """Apply the extension/certificate defaults and load the credential files.

    Returns:
        The normalized options, with ``cert`` and ``key`` replaced by the
        file contents, and whether ``rev`` was given explicitly.

    Raises:
        ConfigurationError: If a required option is missing.
        CredentialFileError: If the certificate or key cannot be read.
    """
    opts = coerce_options(options)
    if not opts.proxy_host:
        raise ConfigurationError("proxy host option required")
    if not opts.extension_key:
        raise ConfigurationError("extension key required")
    if not opts.cert:
        raise ConfigurationError("certificate required")
    if not opts.key:
        raise ConfigurationError("private key required")

    if opts.host is None:
        opts.host = TUNNEL_HOST
    if opts.port is None:
        opts.port = TUNNEL_PORT
    if opts.proxy_port is None:
        opts.proxy_port = DEFAULT_PROXY_PORT
    _apply_ssl(opts)
    if opts.path is None:
        opts.path = TUNNEL_PATH
    opts.cert = read_credential(opts.cert, "certificate")
    opts.key = read_credential(opts.key, "private key")
    rev_given = _apply_common(opts, config)
    return opts, rev_given


def read_credential(source: str | Path | bytes, what: str) -> bytes:
    """Read a certificate or key file fully into memory."""
    if isinstance(source, bytes):
        return source
    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise CredentialFileError(
            e.errno, f"Cannot read {what} {str(source)!r}: {e.strerror}"
        ) from e


def _apply_ssl(opts: ConnectionOptions) -> None:
    # ssl=False and no_ssl are equivalent; either one disables TLS.
    opts.ssl = opts.ssl is not False and not opts.no_ssl
    opts.no_ssl = not opts.ssl
    if opts.insecure is None:
        opts.insecure = False


def _apply_common(opts: ConnectionOptions, config: ClientConfig) -> bool:
    if opts.namespace is None:
        opts.namespace = DEFAULT_NAMESPACE
    rev_given = opts.rev is not None
    if rev_given:
        try:
            Revision.parse(opts.rev)
        except InvalidRevisionError as e:
            raise ConfigurationError(str(e)) from e
        opts.rev = str(opts.rev)
    else:
        opts.rev = DEFAULT_REVISION
    if opts.debug is None:
        opts.debug = config.debug
    if opts.extension_paths is None:
        opts.extension_paths = config.extension_paths
    if opts.vmodl_path is None:
        opts.vmodl_path = config.vmodl_path
    return rev_given
