# Copyright 2026 vim-client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Unit tests for environment-derived client settings."""

from __future__ import annotations

import pytest

from vim_client import ClientConfig, ConfigurationError
from vim_client.connection import Connection


class TestFromEnviron:
    def test_empty_environment(self) -> None:
        cfg = ClientConfig.from_environ({})
        assert cfg == ClientConfig()
        assert cfg.debug is False
        assert cfg.extension_paths == ()
        assert cfg.vmodl_path is None
        assert cfg.connection_factory is None

    def test_all_variables(self) -> None:
        cfg = ClientConfig.from_environ(
            {
                "VIM_CLIENT_DEBUG": "1",
                "VIM_CLIENT_EXTENSION_PATH": "/opt/ext::/home/me/ext:",
                "VMODL": "/opt/vmodl.db",
                "VIM_CLIENT_CONNECTION": "mypkg.soap:SoapConnection",
            }
        )
        assert cfg.debug is True
        assert cfg.extension_paths == ("/opt/ext", "/home/me/ext")
        assert cfg.vmodl_path == "/opt/vmodl.db"
        assert cfg.connection_factory == "mypkg.soap:SoapConnection"

    def test_empty_debug_is_off(self) -> None:
        assert ClientConfig.from_environ({"VIM_CLIENT_DEBUG": ""}).debug is False

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIM_CLIENT_DEBUG", "yes")
        monkeypatch.delenv("VMODL", raising=False)
        cfg = ClientConfig.from_environ()
        assert cfg.debug is True
        assert cfg.vmodl_path is None

    def test_frozen(self) -> None:
        cfg = ClientConfig()
        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]


class TestResolveFactory:
    def test_resolves_attribute(self) -> None:
        cfg = ClientConfig(connection_factory="vim_client.connection:Connection")
        assert cfg.resolve_factory() is Connection

    def test_not_configured(self) -> None:
        with pytest.raises(ConfigurationError, match="No connection factory"):
            ClientConfig().resolve_factory()

    @pytest.mark.parametrize("spec", ["vim_client.connection", ":Connection", "vim_client:"])
    def test_malformed(self, spec: str) -> None:
        with pytest.raises(ConfigurationError, match="module:attribute"):
            ClientConfig(connection_factory=spec).resolve_factory()

    def test_missing_module(self) -> None:
        cfg = ClientConfig(connection_factory="vim_client_no_such_module:Factory")
        with pytest.raises(ConfigurationError, match="Cannot import"):
            cfg.resolve_factory()

    def test_missing_attribute(self) -> None:
        cfg = ClientConfig(connection_factory="vim_client.connection:NoSuchThing")
        with pytest.raises(ConfigurationError, match="no attribute"):
            cfg.resolve_factory()
