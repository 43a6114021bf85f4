# Copyright 2026 vim-client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Exception types for the VIM client."""


class VimError(Exception):
    """Base exception for all VIM client errors."""


class ConfigurationError(VimError):
    """Connection options are missing, malformed, or inconsistent."""


class CredentialFileError(ConfigurationError, OSError):
    """A certificate or private key file could not be read."""


class InvalidRevisionError(VimError, ValueError):
    """A protocol revision string could not be parsed."""


class AuthenticationError(VimError):
    """The login handshake was rejected or never completed."""


class TransportError(VimError):
    """A remote call failed below the protocol level."""


class FaultError(VimError):
    """The server answered a remote call with a fault."""

    def __init__(self, fault_name: str, message: str = "") -> None:
        self.fault_name = fault_name
        self.message = message
        super().__init__(f"{fault_name}: {message}" if message else fault_name)
