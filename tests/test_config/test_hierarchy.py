"""Tests for config hierarchy."""

import pytest

from ogcache.cache.entry import ONE_YEAR_SECONDS
from ogcache.config import hierarchy
from ogcache.config.hierarchy import (
    _coerce_env_value,
    _load_yaml_config,
    load_config_hierarchy,
)


@pytest.fixture(autouse=True)
def _isolate_global_config(tmp_path, monkeypatch):
    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml")
    monkeypatch.chdir(tmp_path)


class TestLoadConfigHierarchy:
    def test_returns_defaults(self):
        config = load_config_hierarchy()
        assert config["brand"] == "127.io | Creative Articulation"
        assert config["store"] == "memory"
        assert config["artifact_ttl_seconds"] == 365 * 24 * 3600
        assert config["artifact_ttl_seconds"] == ONE_YEAR_SECONDS
        assert config["client_max_age"] == 3600

    def test_runtime_overrides(self):
        config = load_config_hierarchy(store="disk", port=9000)
        assert config["store"] == "disk"
        assert config["port"] == 9000

    def test_none_overrides_ignored(self):
        config = load_config_hierarchy(store=None)
        assert config["store"] == "memory"

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("OGCACHE_STORE", "redis")
        assert load_config_hierarchy()["store"] == "redis"

    def test_runtime_beats_env(self, monkeypatch):
        monkeypatch.setenv("OGCACHE_STORE", "redis")
        assert load_config_hierarchy(store="disk")["store"] == "disk"

    def test_env_numeric_coercion(self, monkeypatch):
        monkeypatch.setenv("OGCACHE_PORT", "9100")
        monkeypatch.setenv("OGCACHE_RENDER_TIMEOUT", "2.5")
        config = load_config_hierarchy()
        assert config["port"] == 9100
        assert config["render_timeout"] == 2.5

    def test_artifact_ttl_from_env(self, monkeypatch):
        monkeypatch.setenv("OGCACHE_ARTIFACT_TTL_SECONDS", "86400")
        assert load_config_hierarchy()["artifact_ttl_seconds"] == 86400.0

    def test_project_config(self, tmp_path):
        (tmp_path / "ogcache.yaml").write_text("store: disk\nbrand: My Site\n")
        config = load_config_hierarchy()
        assert config["store"] == "disk"
        assert config["brand"] == "My Site"

    def test_project_config_found_from_subdirectory(self, tmp_path, monkeypatch):
        (tmp_path / "ogcache.yaml").write_text("brand: Parent\n")
        sub = tmp_path / "a" / "b"
        sub.mkdir(parents=True)
        monkeypatch.chdir(sub)
        assert load_config_hierarchy()["brand"] == "Parent"

    def test_env_beats_project_config(self, tmp_path, monkeypatch):
        (tmp_path / "ogcache.yaml").write_text("brand: From YAML\n")
        monkeypatch.setenv("OGCACHE_BRAND", "From Env")
        assert load_config_hierarchy()["brand"] == "From Env"


class TestLoadYamlConfig:
    def test_missing_file(self, tmp_path):
        assert _load_yaml_config(tmp_path / "nope.yaml") is None

    def test_non_mapping_ignored(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        assert _load_yaml_config(path) is None

    def test_invalid_yaml_ignored(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("key: [unclosed\n")
        assert _load_yaml_config(path) is None


class TestCoerceEnvValue:
    def test_int(self):
        assert _coerce_env_value("port", "8080") == 8080

    def test_float(self):
        assert _coerce_env_value("memory_mb", "12.5") == 12.5

    def test_bad_number_kept_as_string(self):
        assert _coerce_env_value("port", "eighty") == "eighty"

    def test_untyped_passthrough(self):
        assert _coerce_env_value("brand", "x") == "x"
