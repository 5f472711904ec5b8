"""IgnorePattern model - a set of glob patterns and the directory they are anchored at

``IgnorePattern.create_ignore`` combines several of them into one predicate.
Patterns that start with ``/`` are rooted at the ``base_path`` of their own set;
before they are loaded into a single glob engine they are rebased onto the
common ancestor of all base paths and the current working directory.
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable, List, Sequence

from lintignore.domain.exceptions import InvalidArgumentError, InvalidBasePathError
from lintignore.domain.paths import dir_suffix, get_common_ancestor_path, relative
from lintignore.infrastructure.glob.base import GlobEngine
from lintignore.infrastructure.glob.gitignore import GitIgnoreGlobEngine

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS = ("/node_modules/*", "/bower_components/*")
DOTFILE_PATTERNS = (".*", "!../")


class IgnorePredicate:
    """Decide whether an absolute path is ignored

    Holds the ignore root and a fully populated glob engine. Nothing is
    modified after construction, so one instance can be shared freely.
    """

    def __init__(self, base_path: str, engine: GlobEngine):
        self.base_path = base_path
        self._engine = engine

    @property
    def patterns(self) -> List[str]:
        """All patterns loaded into the engine, defaults included"""
        return self._engine.patterns

    def __call__(self, file_path: str) -> bool:
        """Check if a file or directory should be ignored

        Args:
            file_path: Absolute path; a trailing separator marks a directory

        Returns:
            True if the path is ignored. The ignore root itself never is.

        Raises:
            InvalidArgumentError: If file_path is not absolute
        """
        if not os.path.isabs(file_path):
            raise InvalidArgumentError(f"'file_path' should be an absolute path: {file_path}")

        rel_path = relative(self.base_path, file_path)
        if rel_path == "":
            return False
        return self._engine.ignores(rel_path + dir_suffix(file_path))

    def __repr__(self) -> str:
        return f"IgnorePredicate(base_path={self.base_path!r}, patterns={self.patterns!r})"


@dataclass(frozen=True)
class IgnorePattern:
    """Glob patterns that exclude files from linting, with their base path"""

    patterns: Sequence[str]  # Gitignore-style patterns, order matters
    base_path: str  # Absolute directory that rooted patterns are relative to

    def __post_init__(self):
        if not os.path.isabs(self.base_path):
            raise InvalidBasePathError(f"'base_path' should be an absolute path: {self.base_path}")

    def get_patterns_relative_to(self, new_base_path: str) -> Sequence[str]:
        """Get patterns as modified for another base path

        Rooted patterns (``/foo``, ``!/foo``) get the path from ``new_base_path``
        to this set's base path prepended. Other patterns match at any depth
        and are returned unchanged.

        Args:
            new_base_path: Absolute path of the new base

        Returns:
            ``self.patterns`` itself if the base path is unchanged, otherwise a
            new list

        Raises:
            InvalidBasePathError: If new_base_path is not absolute
        """
        if not os.path.isabs(new_base_path):
            raise InvalidBasePathError(f"'new_base_path' should be an absolute path: {new_base_path}")

        if new_base_path == self.base_path:
            return self.patterns

        rel_path = relative(new_base_path, self.base_path)
        prefix = f"/{rel_path}" if rel_path else ""

        rebased = []
        for pattern in self.patterns:
            negative = pattern.startswith("!")
            head = "!" if negative else ""
            body = pattern[1:] if negative else pattern
            rebased.append(f"{head}{prefix}{body}" if body.startswith("/") else pattern)
        return rebased

    @staticmethod
    def create_ignore(
        ignore_patterns: Sequence["IgnorePattern"],
        *,
        cwd: str,
        dot: bool = False,
        engine_factory: Callable[[], GlobEngine] = GitIgnoreGlobEngine,
    ) -> IgnorePredicate:
        """Create the predicate function from multiple IgnorePattern objects

        Args:
            ignore_patterns: Pattern sets, in increasing order of precedence
            cwd: Absolute path of the current working directory
            dot: If True, dotfiles are not ignored by default
            engine_factory: Creates the empty glob engine to load patterns into

        Returns:
            Predicate taking an absolute path and returning True if it is ignored

        Raises:
            InvalidBasePathError: If cwd is not absolute
        """
        if not os.path.isabs(cwd):
            raise InvalidBasePathError(f"'cwd' should be an absolute path: {cwd}")

        base_paths = [cwd] + [p.base_path for p in ignore_patterns]
        base_path = get_common_ancestor_path(base_paths)
        engine = engine_factory()

        logger.debug(
            f"Creating ignore predicate: base_path={base_path!r}, dot={dot}, base_paths={base_paths!r}"
        )

        for pattern in DEFAULT_PATTERNS:
            engine.add(pattern)
        if not dot:
            for pattern in DOTFILE_PATTERNS:
                engine.add(pattern)
        for ignore_pattern in ignore_patterns:
            for pattern in ignore_pattern.get_patterns_relative_to(base_path):
                logger.debug(f"  add {pattern!r}")
                engine.add(pattern)

        engine.prepare()
        return IgnorePredicate(base_path, engine)
