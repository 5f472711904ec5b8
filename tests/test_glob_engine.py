"""Tests for glob engines"""

import pathspec
import pytest

from lintignore.domain.exceptions import InvalidArgumentError
from lintignore.infrastructure.glob import GitIgnoreGlobEngine, GlobEngine, RecordingGlobEngine


def test_gitignore_engine_is_glob_engine():
    """Test engines implement the GlobEngine interface"""
    assert isinstance(GitIgnoreGlobEngine(), GlobEngine)
    assert isinstance(RecordingGlobEngine(), GlobEngine)


def test_glob_engine_is_abstract():
    """Test the base class cannot be instantiated"""
    with pytest.raises(TypeError):
        GlobEngine()


def test_gitignore_engine_empty():
    """Test an empty engine ignores nothing"""
    engine = GitIgnoreGlobEngine()
    assert engine.ignores("a.js") is False


def test_gitignore_engine_last_match_wins():
    """Test later patterns override earlier ones"""
    engine = GitIgnoreGlobEngine(["*.js", "!keep.js"])
    assert engine.ignores("a.js") is True
    assert engine.ignores("keep.js") is False

    engine.add("keep.js")
    assert engine.ignores("keep.js") is True


def test_gitignore_engine_rooted_pattern():
    """Test leading slash anchors a pattern at the root"""
    engine = GitIgnoreGlobEngine(["/dist"])
    assert engine.ignores("dist/a.js") is True
    assert engine.ignores("src/dist/a.js") is False


def test_gitignore_engine_unrooted_pattern():
    """Test patterns without slash match at any depth"""
    engine = GitIgnoreGlobEngine(["*.log"])
    assert engine.ignores("debug.log") is True
    assert engine.ignores("deep/nested/debug.log") is True


def test_gitignore_engine_patterns_copy():
    """Test patterns are returned in order and as a copy"""
    engine = GitIgnoreGlobEngine(["a", "b"])
    patterns = engine.patterns
    patterns.append("c")
    assert engine.patterns == ["a", "b"]


def test_gitignore_engine_invalid_pattern(monkeypatch):
    """Test a pattern that cannot be compiled"""

    def broken_from_lines(lines):
        raise ValueError("Invalid git pattern")

    monkeypatch.setattr(pathspec.GitIgnoreSpec, "from_lines", broken_from_lines)
    engine = GitIgnoreGlobEngine(["bad"])
    with pytest.raises(InvalidArgumentError, match="Invalid ignore pattern"):
        engine.prepare()


def test_recording_engine():
    """Test recording engine answers from its fixed set"""
    engine = RecordingGlobEngine(["x.js"])
    engine.add("*.js")
    assert engine.ignores("x.js") is True
    assert engine.ignores("y.js") is False
    assert engine.added == ["*.js"]
    assert engine.patterns == ["*.js"]
    assert engine.queries == ["x.js", "y.js"]


def test_gitignore_engine_excluded_parent_wins():
    """Test a negation cannot re-include a file under an ignored directory"""
    engine = GitIgnoreGlobEngine(["logs", "!logs/keep.txt"])
    assert engine.ignores("logs/keep.txt") is True
    assert engine.ignores("src/logs/keep.txt") is True
    assert engine.ignores("keep.txt") is False


def test_gitignore_engine_parent_relative_paths():
    """Test a re-included '../' directory keeps parent-relative paths included"""
    engine = GitIgnoreGlobEngine([".*", "!../"])
    assert engine.ignores("../a/b.js") is False
    assert engine.ignores(".cache/x") is True
