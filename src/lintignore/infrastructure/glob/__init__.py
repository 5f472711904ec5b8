"""Glob engines"""

from lintignore.infrastructure.glob.base import GlobEngine
from lintignore.infrastructure.glob.gitignore import GitIgnoreGlobEngine
from lintignore.infrastructure.glob.recording import RecordingGlobEngine

__all__ = ["GlobEngine", "GitIgnoreGlobEngine", "RecordingGlobEngine"]
