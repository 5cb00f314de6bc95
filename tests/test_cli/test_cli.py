"""Tests for CLI commands."""

import pytest
from click.testing import CliRunner

from ogcache.cli import cli
from ogcache.config import hierarchy


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml")
    monkeypatch.chdir(tmp_path)
    return CliRunner()


class TestCLIGroup:
    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "ogcache" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0


class TestRenderCommand:
    def test_writes_png(self, runner, metadata_file, tmp_path):
        out = tmp_path / "out" / "card.png"
        result = runner.invoke(
            cli, ["render", "/blog/foo", "-o", str(out), "--metadata", str(metadata_file)]
        )
        assert result.exit_code == 0, result.output
        assert out.read_bytes().startswith(b"\x89PNG")
        assert "from renderer" in result.output

    def test_disk_store_hit_on_second_run(self, runner, metadata_file, tmp_path, monkeypatch):
        monkeypatch.setenv("OGCACHE_DISK_PATH", str(tmp_path / "artifacts.db"))
        args = [
            "render", "/blog/foo", "-o", str(tmp_path / "card.png"),
            "--metadata", str(metadata_file), "--store", "disk",
        ]
        assert runner.invoke(cli, args).exit_code == 0
        result = runner.invoke(cli, args)
        assert result.exit_code == 0
        assert "from cache" in result.output

    def test_missing_metadata_exits_nonzero(self, runner, tmp_path):
        result = runner.invoke(
            cli,
            ["render", "/x", "-o", str(tmp_path / "c.png"), "--metadata", str(tmp_path / "no")],
        )
        assert result.exit_code == 1

    def test_requires_output(self, runner):
        assert runner.invoke(cli, ["render", "/x"]).exit_code != 0


class TestKeyCommand:
    def test_shows_key(self, runner, metadata_file):
        result = runner.invoke(cli, ["key", "/blog/foo", "--metadata", str(metadata_file)])
        assert result.exit_code == 0
        assert "/blog/foo:" in result.output

    def test_fallback(self, runner, metadata_file):
        result = runner.invoke(cli, ["key", "/missing", "--metadata", str(metadata_file)])
        assert result.exit_code == 0
        assert "default:" in result.output
        assert "yes" in result.output


class TestCacheCommands:
    def test_cache_help(self, runner):
        result = runner.invoke(cli, ["cache", "--help"])
        assert result.exit_code == 0
        assert "stats" in result.output
        assert "clear" in result.output

    def test_stats(self, runner, tmp_path):
        result = runner.invoke(cli, ["cache", "stats", "--disk-path", str(tmp_path / "a.db")])
        assert result.exit_code == 0
        assert "Artifact Store" in result.output

    def test_clear(self, runner, tmp_path):
        result = runner.invoke(
            cli, ["cache", "clear", "--yes", "--disk-path", str(tmp_path / "a.db")]
        )
        assert result.exit_code == 0
        assert "cleared" in result.output


class TestServeCommand:
    def test_help(self, runner):
        result = runner.invoke(cli, ["serve", "--help"])
        assert result.exit_code == 0
        assert "--port" in result.output


class TestConfigurationErrors:
    def test_bad_env_number_exits_cleanly(self, runner, metadata_file, tmp_path, monkeypatch):
        monkeypatch.setenv("OGCACHE_MEMORY_MB", "lots")
        result = runner.invoke(
            cli,
            ["render", "/blog/foo", "-o", str(tmp_path / "c.png"), "--metadata", str(metadata_file)],
        )
        assert result.exit_code == 1
        assert "Configuration error" in result.output
        assert not isinstance(result.exception, ValueError)
