# Copyright 2026 vim-client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Method names, well-known objects, and parameter builders for the session calls."""

from __future__ import annotations

from typing import Any

SERVICE_INSTANCE = "ServiceInstance"
SESSION_MANAGER = "SessionManager"

LOGIN = "Login"
LOGIN_EXTENSION_BY_CERTIFICATE = "LoginExtensionByCertificate"
LOGOUT = "Logout"
RETRIEVE_SERVICE_CONTENT = "RetrieveServiceContent"


def login_request(user_name: str, password: str) -> dict[str, Any]:
    """Build a Login request."""
    return {"userName": user_name, "password": password}


def login_extension_request(extension_key: str) -> dict[str, Any]:
    """Build a LoginExtensionByCertificate request."""
    return {"extensionKey": extension_key}
