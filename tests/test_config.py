"""Tests for audit configuration."""

import json

import pytest

from seo_audit.config import AuditConfig
from seo_audit.constants import DEFAULT_USER_AGENT
from seo_audit.models import DEFAULT_CHECKLIST, CheckKind


class TestAuditConfig:
    """Test cases for AuditConfig."""

    def test_defaults(self):
        """Test the documented defaults."""
        config = AuditConfig()

        assert config.fetch_timeout_ms == 10_000
        assert config.link_check_timeout_ms == 5_000
        assert config.global_timeout_ms == 60_000
        assert config.link_check_limit == 20
        assert config.concurrent_requests_limit == 5
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.locale == "en"
        assert config.checklist == DEFAULT_CHECKLIST
        assert len(config.checklist) == 21

    def test_invalid_locale(self):
        """Test that unknown locales are rejected."""
        with pytest.raises(ValueError):
            AuditConfig(locale="fr")

    def test_invalid_concurrency(self):
        """Test that a batch size below one is rejected."""
        with pytest.raises(ValueError):
            AuditConfig(concurrent_requests_limit=0)

    def test_empty_checklist(self):
        """Test that the checklist cannot be empty."""
        with pytest.raises(ValueError):
            AuditConfig(checklist=())

    def test_from_env(self, monkeypatch):
        """Test environment overrides, including the checklist."""
        monkeypatch.setenv("SEO_AUDIT_LINK_CHECK_LIMIT", "7")
        monkeypatch.setenv("SEO_AUDIT_LOCALE", "ca")
        monkeypatch.setenv("SEO_AUDIT_CLS_TARGET", "0.25")
        monkeypatch.setenv("SEO_AUDIT_CHECKLIST", "https, title_length")

        config = AuditConfig.from_env()

        assert config.link_check_limit == 7
        assert config.locale == "ca"
        assert config.cls_target == 0.25
        assert config.checklist == (CheckKind.HTTPS, CheckKind.TITLE_LENGTH)

    def test_from_env_ignores_unparseable_numbers(self, monkeypatch):
        """Test that a bad number keeps the default."""
        monkeypatch.setenv("SEO_AUDIT_FETCH_TIMEOUT_MS", "soon")

        assert AuditConfig.from_env().fetch_timeout_ms == 10_000

    def test_file_round_trip(self, tmp_path):
        """Test saving to and loading from a JSON file."""
        path = tmp_path / "config.json"
        original = AuditConfig(locale="es", checklist=(CheckKind.SCHEMA,))

        original.save_to_file(str(path))
        data = json.loads(path.read_text())
        loaded = AuditConfig.from_file(str(path))

        assert data["audit"]["checklist"] == ["schema"]
        assert loaded == original

    def test_from_missing_file(self, tmp_path):
        """Test that a missing file yields defaults."""
        assert AuditConfig.from_file(str(tmp_path / "nope.json")) == AuditConfig()
