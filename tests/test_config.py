"""Tests for environment-driven settings."""

import ssl

import pytest
from pydantic import ValidationError

from paysimple.config import Environment, Settings
from paysimple.transport.web_request import WebServiceRequest
from paysimple.validation import ValidationPolicy


class TestEndpointRoot:
    def test_sandbox_by_default(self):
        assert Settings(_env_file=None).endpoint_root == "https://sandbox-api.paysimple.com/v4"

    def test_production(self):
        cfg = Settings(environment=Environment.PRODUCTION, _env_file=None)
        assert cfg.endpoint_root == "https://api.paysimple.com/v4"

    def test_base_url_override_strips_slash(self):
        assert Settings(base_url="http://localhost:8080/", _env_file=None).endpoint_root == "http://localhost:8080/v4"


class TestEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("PAYSIMPLE_USERNAME", "envuser")
        monkeypatch.setenv("PAYSIMPLE_RETRY_COUNT", "3")
        monkeypatch.setenv("PAYSIMPLE_VALIDATION_POLICY", "strict")

        cfg = Settings(_env_file=None)

        assert cfg.username == "envuser"
        assert cfg.retry_count == 3
        assert cfg.validation_policy is ValidationPolicy.STRICT

    def test_settings_are_frozen(self):
        cfg = Settings(_env_file=None)
        with pytest.raises(ValidationError):
            cfg.retry_count = 5


class TestTls:
    def test_minimum_version_applied_to_ssl_context(self):
        request = WebServiceRequest(Settings(minimum_tls_version="TLSv1_3", _env_file=None))
        assert request.ssl_context.minimum_version == ssl.TLSVersion.TLSv1_3

    def test_default_is_tls_1_2(self):
        assert Settings(_env_file=None).tls_version == ssl.TLSVersion.TLSv1_2

    def test_rejects_older_versions(self):
        with pytest.raises(ValidationError):
            Settings(minimum_tls_version="TLSv1", _env_file=None)
