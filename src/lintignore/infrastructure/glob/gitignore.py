"""Glob engine backed by pathspec's gitignore implementation"""

import logging
from typing import Iterable, List, Optional

import pathspec

from lintignore.domain.exceptions import InvalidArgumentError
from lintignore.infrastructure.glob.base import GlobEngine

logger = logging.getLogger(__name__)


class GitIgnoreGlobEngine(GlobEngine):
    """Match paths with full gitignore semantics using ``pathspec.GitIgnoreSpec``"""

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        """Initialize engine

        Args:
            patterns: Optional initial patterns
        """
        self._patterns: List[str] = []
        self._spec: Optional[pathspec.GitIgnoreSpec] = None
        for pattern in patterns or []:
            self.add(pattern)

    def add(self, pattern: str) -> None:
        self._patterns.append(pattern)
        self._spec = None

    @property
    def patterns(self) -> List[str]:
        return list(self._patterns)

    def prepare(self) -> None:
        """Compile the accumulated patterns

        Raises:
            InvalidArgumentError: If a pattern cannot be compiled
        """
        if self._spec is not None:
            return
        try:
            self._spec = pathspec.GitIgnoreSpec.from_lines(self._patterns)
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid ignore pattern: {e}") from e
        logger.debug(f"Compiled {len(self._patterns)} ignore patterns")

    def ignores(self, relative_path: str) -> bool:
        """Check whether a path or any of its parent directories is ignored

        A file inside an ignored directory cannot be re-included by a later
        negated pattern, as in git.
        """
        self.prepare()
        for parent in _parent_dirs(relative_path):
            if self._spec.match_file(parent):
                return True
        return self._spec.match_file(relative_path)


def _parent_dirs(relative_path: str) -> List[str]:
    """Get ``a/``, ``a/b/`` ... for ``a/b/c``, excluding the path itself"""
    segments = relative_path.rstrip("/").split("/")[:-1]
    return ["/".join(segments[: i + 1]) + "/" for i in range(len(segments))]
