"""Tests for environment-driven settings."""

from __future__ import annotations

import re

from network_bootstrap_operator import config


class TestGetNamespace:
    """Test cases for get_namespace."""

    def test_env_var_wins(self, monkeypatch):
        """Test that OPERATOR_NAMESPACE is used when set."""
        monkeypatch.setenv("OPERATOR_NAMESPACE", " platform ")
        assert config.get_namespace() == "platform"

    def test_service_account_file(self, monkeypatch, tmp_path):
        """Test reading the namespace from the service account file."""
        monkeypatch.delenv("OPERATOR_NAMESPACE", raising=False)
        namespace_file = tmp_path / "namespace"
        namespace_file.write_text("from-file\n")
        monkeypatch.setattr(config, "SERVICE_ACCOUNT_NAMESPACE_PATH", str(namespace_file))

        assert config.get_namespace() == "from-file"

    def test_default_namespace(self, monkeypatch, tmp_path):
        """Test fallback to the default namespace."""
        monkeypatch.delenv("OPERATOR_NAMESPACE", raising=False)
        monkeypatch.setattr(config, "SERVICE_ACCOUNT_NAMESPACE_PATH", str(tmp_path / "missing"))

        assert config.get_namespace() == "default"


class TestSettings:
    """Test cases for the remaining settings."""

    def test_magic_dns_default(self):
        """Test the default magic DNS service."""
        assert config.get_magic_dns() == "sslip.io"

    def test_magic_dns_override(self, monkeypatch):
        """Test overriding the magic DNS service."""
        monkeypatch.setenv("MAGIC_DNS", "nip.io")
        assert config.get_magic_dns() == "nip.io"

    def test_blank_magic_dns_uses_default(self, monkeypatch):
        """Test that a blank MAGIC_DNS falls back to the default."""
        monkeypatch.setenv("MAGIC_DNS", "  ")
        assert config.get_magic_dns() == "sslip.io"

    def test_pod_name_from_env(self, monkeypatch):
        """Test that POD_NAME is used when set."""
        monkeypatch.setenv("POD_NAME", "operator-7d9f")
        assert config.get_pod_name() == "operator-7d9f"

    def test_random_pod_name(self):
        """Test that a random DNS label is generated without POD_NAME."""
        first = config.get_pod_name()
        second = config.get_pod_name()

        assert re.fullmatch(r"a[0-9a-f]{20}", first)
        assert first != second

    def test_network_config_name(self, monkeypatch):
        """Test the network config name default and override."""
        assert config.get_network_config_name() == "network"
        monkeypatch.setenv("NETWORK_CONFIG_NAME", "net-cfg")
        assert config.get_network_config_name() == "net-cfg"

    def test_poll_settings(self, monkeypatch):
        """Test poll interval and timeout defaults and overrides."""
        monkeypatch.delenv("INGRESS_POLL_INTERVAL_SECONDS", raising=False)
        monkeypatch.delenv("INGRESS_WAIT_TIMEOUT_SECONDS", raising=False)
        assert config.get_poll_interval() == 10.0
        assert config.get_wait_timeout() == 1200.0

        monkeypatch.setenv("INGRESS_POLL_INTERVAL_SECONDS", "2")
        monkeypatch.setenv("INGRESS_WAIT_TIMEOUT_SECONDS", "30")
        assert config.get_poll_interval() == 2.0
        assert config.get_wait_timeout() == 30.0
