"""Tests for IgnoreService"""

import os
from pathlib import Path

import pytest
import yaml

from lintignore.application.ignore_service import IgnoreService
from lintignore.domain.exceptions import ConfigurationError
from lintignore.infrastructure.config.config_manager import CONFIG_FILE_NAME, ConfigManager


@pytest.fixture
def monorepo(tmp_path):
    """Repository with a root config and a package config"""
    (tmp_path / CONFIG_FILE_NAME).write_text(
        yaml.dump({"root": True, "ignore": {"patterns": ["/dist", "*.log"]}}), encoding="utf-8"
    )
    package = tmp_path / "packages" / "a"
    package.mkdir(parents=True)
    (package / CONFIG_FILE_NAME).write_text(
        yaml.dump({"ignore": {"patterns": ["/build", "!/keep.log"]}}), encoding="utf-8"
    )
    return tmp_path


def _service(cwd: Path, **kwargs) -> IgnoreService:
    return IgnoreService(config_manager=ConfigManager(cwd=cwd, env={}), cwd=cwd, **kwargs)


class TestIgnoreService:
    """Tests for IgnoreService"""

    def test_cascaded_configs(self, monorepo):
        """Test patterns from all configs are combined at the common ancestor"""
        service = _service(monorepo / "packages" / "a")

        assert service.build_predicate().base_path == str(monorepo)
        assert service.is_ignored("build/out.js") is True
        assert service.is_ignored(monorepo / "dist" / "bundle.js") is True
        assert service.is_ignored("src/index.js") is False
        assert service.is_ignored("debug.log") is True
        assert service.is_ignored("keep.log") is False

    def test_ignore_file_in_cwd(self, monorepo):
        """Test the .lintignore file in cwd is used"""
        package = monorepo / "packages" / "a"
        (package / ".lintignore").write_text("*.gen.js\n!/build\n", encoding="utf-8")

        service = _service(package)
        assert service.is_ignored("src/schema.gen.js") is True
        assert service.is_ignored("build/out.js") is False

    def test_ignore_file_disabled(self, tmp_path):
        """Test use_ignore_file=False skips the ignore file"""
        (tmp_path / CONFIG_FILE_NAME).write_text(
            yaml.dump({"root": True, "ignore": {"use_ignore_file": False}}), encoding="utf-8"
        )
        (tmp_path / ".lintignore").write_text("*.js\n", encoding="utf-8")

        assert _service(tmp_path).is_ignored("a.js") is False

    def test_explicit_ignore_path(self, tmp_path):
        """Test an explicit ignore file is anchored at its own directory"""
        (tmp_path / CONFIG_FILE_NAME).write_text(yaml.dump({"root": True}), encoding="utf-8")
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        ignore_path = config_dir / "lint.ignore"
        ignore_path.write_text("/fixtures\n", encoding="utf-8")
        work = tmp_path / "work"
        work.mkdir()

        service = _service(work, ignore_path=ignore_path)
        assert service.is_ignored(tmp_path / "config" / "fixtures" / "a.js") is True
        assert service.is_ignored(tmp_path / "work" / "fixtures" / "a.js") is False

    def test_missing_explicit_ignore_path(self, tmp_path):
        """Test a missing explicit ignore file is an error"""
        (tmp_path / CONFIG_FILE_NAME).write_text(yaml.dump({"root": True}), encoding="utf-8")
        service = _service(tmp_path, ignore_path=tmp_path / "nope")
        with pytest.raises(ConfigurationError):
            service.build_predicate()

    def test_extra_patterns_anchored_at_cwd(self, monorepo):
        """Test extra patterns are rooted at cwd and override config patterns"""
        service = _service(monorepo / "packages" / "a", extra_patterns=["/tmp", "!/build"])

        assert service.is_ignored("tmp/x.js") is True
        assert service.is_ignored(monorepo / "tmp" / "x.js") is False
        assert service.is_ignored("build/out.js") is False

    def test_dot_override(self, monorepo):
        """Test dot option overrides the configuration"""
        assert _service(monorepo).is_ignored(".eslintrc") is True
        assert _service(monorepo, dot=True).is_ignored(".eslintrc") is False

    def test_directory_paths(self, tmp_path):
        """Test a trailing slash keeps directory semantics"""
        (tmp_path / CONFIG_FILE_NAME).write_text(
            yaml.dump({"root": True, "ignore": {"patterns": ["cache/"]}}), encoding="utf-8"
        )
        service = _service(tmp_path)
        assert service.is_ignored("cache/") is True
        assert service.is_ignored("cache") is False

    def test_cwd_never_ignored(self, monorepo):
        """Test the ignore root is not ignored"""
        service = _service(monorepo, extra_patterns=["*"])
        assert service.is_ignored(monorepo) is False

    def test_predicate_cached(self, monorepo):
        """Test the predicate is built once"""
        service = _service(monorepo)
        assert service.build_predicate() is service.build_predicate()

    def test_filter_paths(self, monorepo):
        """Test paths are split into kept and ignored ones, preserving order"""
        service = _service(monorepo)
        paths = ["src/a.js", "dist/b.js", "node_modules/c/index.js", "src/d.js", "e.log"]

        kept, ignored = service.filter_paths(paths)

        assert kept == ["src/a.js", "src/d.js"]
        assert ignored == ["dist/b.js", "node_modules/c/index.js", "e.log"]

    def test_resolve_path(self, tmp_path):
        """Test relative paths are joined to cwd keeping a single trailing separator"""
        (tmp_path / CONFIG_FILE_NAME).write_text(yaml.dump({"root": True}), encoding="utf-8")
        service = _service(tmp_path)

        assert service.resolve_path("src/a.js") == str(tmp_path / "src" / "a.js")
        assert service.resolve_path("src/") == str(tmp_path / "src") + os.sep
        assert service.resolve_path(tmp_path / "x" / ".." / "y") == str(tmp_path / "y")

    @pytest.mark.skipif(os.sep != "/", reason="POSIX path layout")
    def test_resolve_root_directory(self, tmp_path):
        """Test the filesystem root is not given a second separator"""
        (tmp_path / CONFIG_FILE_NAME).write_text(yaml.dump({"root": True}), encoding="utf-8")
        service = _service(tmp_path)

        assert service.resolve_path("/") == "/"
        assert service.is_ignored("/") is False
