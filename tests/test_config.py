"""
Tests for Configuration
=======================
Tests app.yaml settings access and affiliate configuration.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from settings import get_setting, require_setting, resolve_path
from namekit.config import Config, load_env, get_config


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.setenv("GODADDY_AFFILIATE_ID", "")
    monkeypatch.setenv("NAMECHEAP_AFFILIATE_ID", "")


class TestSettings:
    """Tests for app.yaml access."""

    def test_dotted_path(self):
        assert get_setting("name_generator.default_count") == 8
        assert get_setting("trademark.medium_threshold") == 0.8

    def test_missing_returns_default(self):
        assert get_setting("nope.nothing", "fallback") == "fallback"

    def test_require_missing(self):
        with pytest.raises(ValueError, match="must be set in app.yaml"):
            require_setting("nope.nothing")

    def test_known_marks_ordered(self):
        marks = list(get_setting("trademark.known_marks"))
        assert marks == ["apple", "nike", "amazon", "google", "microsoft"]

    def test_resolve_relative(self, tmp_path):
        assert resolve_path("a/b.json", tmp_path) == (tmp_path / "a" / "b.json").resolve()

    def test_resolve_absolute(self, tmp_path):
        assert resolve_path(str(tmp_path)) == tmp_path


class TestAffiliateConfig:
    """Tests for Config and .env loading."""

    def test_no_affiliates(self, clean_env, tmp_path):
        config = get_config(tmp_path / "missing.env")
        assert config.affiliate_ids == {}

    def test_env_file(self, clean_env, tmp_path):
        env = tmp_path / ".env"
        env.write_text('# registrar ids\nGODADDY_AFFILIATE_ID="gd-123"\n')
        config = get_config(env)
        assert config.affiliate_ids == {"godaddy": "gd-123"}

    def test_environment(self, clean_env, monkeypatch, tmp_path):
        monkeypatch.setenv("NAMECHEAP_AFFILIATE_ID", "nc-9")
        config = get_config(tmp_path / "missing.env")
        assert config.affiliate_ids == {"namecheap": "nc-9"}

    def test_load_env_strips_quotes(self, clean_env, monkeypatch, tmp_path):
        # Pre-set so load_env's setdefault leaves the real environment alone
        monkeypatch.setenv("A_KEY", "")
        monkeypatch.setenv("B_KEY", "")
        env = tmp_path / ".env"
        env.write_text("A_KEY='one'\nB_KEY = two\nnot a pair\n")
        assert load_env(env) == {"A_KEY": "one", "B_KEY": "two"}

    def test_config_dataclass(self):
        config = Config(godaddy_affiliate_id="g", namecheap_affiliate_id="n")
        assert config.affiliate_ids == {"godaddy": "g", "namecheap": "n"}

    def test_singleton(self):
        from namekit.config import config
        assert config() is config()
