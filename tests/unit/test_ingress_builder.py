"""Tests for the ingress builder."""

from __future__ import annotations

import pytest

from network_bootstrap_operator.builders.ingress import (
    IngressConfig,
    build_hostname,
    build_ingress_rule,
    build_probe_ingress,
    create_ingress_config_from_data,
)
from network_bootstrap_operator.constants import LABEL_PROBE
from network_bootstrap_operator.utils.errors import IngressConfigError


class TestCreateIngressConfigFromData:
    """Test cases for create_ingress_config_from_data."""

    def test_defaults_for_empty_data(self):
        """Test that missing data yields defaults."""
        config = create_ingress_config_from_data(None)

        assert config.class_name is None
        assert config.annotations == {}
        assert config.path == "/"
        assert config.path_type == "ImplementationSpecific"

    def test_blank_values_use_defaults(self):
        """Test that whitespace-only values count as unset."""
        config = create_ingress_config_from_data({
            "ingress-class": "  ",
            "ingress-annotations": "\n",
            "ingress-path": " ",
            "ingress-path-type": "",
        })

        assert config == IngressConfig()

    def test_full_config(self):
        """Test parsing all ingress keys."""
        config = create_ingress_config_from_data({
            "ingress-class": " nginx ",
            "ingress-annotations": '{"nginx.ingress.kubernetes.io/ssl-redirect": "false"}',
            "ingress-path": "/api",
            "ingress-path-type": "Prefix",
        })

        assert config.class_name == "nginx"
        assert config.annotations == {"nginx.ingress.kubernetes.io/ssl-redirect": "false"}
        assert config.path == "/api"
        assert config.path_type == "Prefix"

    def test_invalid_annotations_json(self):
        """Test that invalid JSON names the key, configmap and value."""
        with pytest.raises(IngressConfigError) as exc_info:
            create_ingress_config_from_data({"ingress-annotations": "{not json"}, "network")

        message = str(exc_info.value)
        assert "ingress-annotations" in message
        assert "network" in message
        assert "{not json" in message

    def test_annotations_must_be_object_of_strings(self):
        """Test that non-object or non-string annotations are rejected."""
        with pytest.raises(IngressConfigError):
            create_ingress_config_from_data({"ingress-annotations": '["a", "b"]'})
        with pytest.raises(IngressConfigError):
            create_ingress_config_from_data({"ingress-annotations": '{"a": 1}'})


class TestBuildProbeIngress:
    """Test cases for build_probe_ingress."""

    def test_probe_ingress_shape(self):
        """Test the probe ingress metadata and rule."""
        config = IngressConfig(
            class_name="nginx",
            annotations={"a": "b"},
            path="/ignored",
            path_type="Exact",
        )

        ingress = build_probe_ingress(config, "ops", "operator-0")

        assert ingress.metadata.generate_name == "default-domain-"
        assert ingress.metadata.name is None
        assert ingress.metadata.namespace == "ops"
        assert ingress.metadata.annotations == {"a": "b"}
        assert ingress.metadata.labels[LABEL_PROBE] == "true"
        assert ingress.spec.ingress_class_name == "nginx"

        rule = ingress.spec.rules[0]
        assert rule.host == (
            "operator-0.this-is-yatai-in-order-to-generate-the-default-domain-suffix.yeah"
        )
        path = rule.http.paths[0]
        assert path.path == "/"
        assert path.path_type == "ImplementationSpecific"
        assert path.backend.service.name == "default-domain-service"
        assert path.backend.service.port.number == 3000

    def test_probe_ingress_without_class_or_annotations(self):
        """Test that an unset class and empty annotations are left out."""
        ingress = build_probe_ingress(IngressConfig(), "ops", "p")

        assert ingress.spec.ingress_class_name is None
        assert ingress.metadata.annotations is None

    def test_probe_annotations_are_copied(self):
        """Test that the probe does not share the config's annotation dict."""
        config = IngressConfig(annotations={"a": "b"})
        ingress = build_probe_ingress(config, "ops", "p")

        ingress.metadata.annotations["c"] = "d"
        assert config.annotations == {"a": "b"}


class TestHelpers:
    """Test cases for rule and hostname helpers."""

    def test_build_ingress_rule(self):
        """Test building a rule with a custom path."""
        rule = build_ingress_rule("svc.example.com", "svc", 8080, path="/v1", path_type="Prefix")

        path = rule.http.paths[0]
        assert rule.host == "svc.example.com"
        assert path.path == "/v1"
        assert path.path_type == "Prefix"
        assert path.backend.service.port.number == 8080

    def test_build_hostname(self):
        """Test the default hostname format."""
        assert build_hostname("api", "prod", "10.0.0.1.sslip.io") == "api-prod.10.0.0.1.sslip.io"

    def test_build_hostname_trims_suffix(self):
        """Test that stray dots and spaces around the suffix are dropped."""
        assert build_hostname("api", "prod", " .example.com. ") == "api-prod.example.com"
