"""Tests for configuration loading and context overrides."""

from pathlib import Path

import pytest

from src.catalog.runtime.config.config_data import (
    CacheConfig,
    ConfigData,
    JWTConfig,
    RedisConfig,
)
from src.catalog.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
)
from src.catalog.runtime.context import get_config, with_context

_YAML = """
config:
  app:
    environment: test
  redis:
    enabled: false
    url: ${REDIS_URL:-}
  cache:
    product_namespace: ${PRODUCT_ID_CACHE_KEY:-PRODUCT_ID}
  jwt:
    secret: ${JWT_SECRET:?signing secret required}
"""


class TestSubstituteEnvVars:
    def test_default_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("CATALOG_TEST_VAR", raising=False)

        assert substitute_env_vars("x=${CATALOG_TEST_VAR:-fallback}") == "x=fallback"

    def test_environment_wins_over_default(self, monkeypatch):
        monkeypatch.setenv("CATALOG_TEST_VAR", "from-env")

        assert substitute_env_vars("${CATALOG_TEST_VAR:-fallback}") == "from-env"

    def test_required_variable_missing(self, monkeypatch):
        monkeypatch.delenv("CATALOG_TEST_VAR", raising=False)

        with pytest.raises(ValueError, match="CATALOG_TEST_VAR"):
            substitute_env_vars("${CATALOG_TEST_VAR:?must be set}")


class TestLoadTemplatedYaml:
    def test_loads_config_section(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "yaml-secret")
        monkeypatch.setenv("PRODUCT_ID_CACHE_KEY", "PRODUCTS")
        monkeypatch.delenv("REDIS_URL", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(_YAML)

        config = load_templated_yaml(path)

        assert config.app.environment == "test"
        assert config.jwt.secret == "yaml-secret"
        assert config.cache.product_namespace == "PRODUCTS"
        assert config.redis.enabled is False
        assert config.redis.url is None
        assert config.redis.connection_string == ""

    def test_invalid_values_are_reported(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  app:\n    environment: staging\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)


class TestRedisConfig:
    def test_password_is_injected_and_masked(self):
        config = RedisConfig(url="redis://cache:6379/0", password="s3cret")

        assert config.connection_string == "redis://:s3cret@cache:6379/0"
        assert "s3cret" not in config.sanitized_connection_string


class TestWithContext:
    def test_override_only_replaces_set_fields(self):
        base = get_config()

        with with_context(ConfigData(cache=CacheConfig(product_namespace="OVERRIDE"))):
            current = get_config()
            assert current.cache.product_namespace == "OVERRIDE"
            assert current.jwt.secret == base.jwt.secret

        assert get_config().cache.product_namespace == base.cache.product_namespace

    def test_none_keeps_current_config(self):
        base = get_config()

        with with_context(None):
            assert get_config() is base

    def test_rejects_other_types(self):
        with pytest.raises(ValueError):
            with with_context(JWTConfig(secret="x")):
                pass
