"""Recording glob engine for testing"""

from typing import Iterable, List, Optional, Set

from lintignore.infrastructure.glob.base import GlobEngine


class RecordingGlobEngine(GlobEngine):
    """Glob engine that records added patterns and queried paths

    It does not interpret patterns: ``ignores`` answers True only for the
    paths listed in ``ignored_paths``.
    """

    def __init__(self, ignored_paths: Optional[Iterable[str]] = None):
        self.ignored_paths: Set[str] = set(ignored_paths or [])
        self.added: List[str] = []
        self.queries: List[str] = []
        self.prepared = False

    def add(self, pattern: str) -> None:
        self.added.append(pattern)

    def ignores(self, relative_path: str) -> bool:
        self.queries.append(relative_path)
        return relative_path in self.ignored_paths

    @property
    def patterns(self) -> List[str]:
        return list(self.added)

    def prepare(self) -> None:
        self.prepared = True
