"""Service that assembles ignore patterns from all sources and filters paths"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from lintignore.domain.models.ignore_pattern import IgnorePattern, IgnorePredicate
from lintignore.infrastructure.config.config_manager import ConfigManager
from lintignore.infrastructure.ignore_file import load_ignore_file

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class IgnoreService:
    """Build the ignore predicate of a lint run and apply it to paths

    Pattern sources, in increasing order of precedence:
    1. ``ignore.patterns`` of every cascaded config file (farther first)
    2. The ignore file (``--ignore-path`` or ``<cwd>/.lintignore``)
    3. Extra patterns given on the command line, anchored at cwd
    """

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        cwd: Optional[PathLike] = None,
        extra_patterns: Sequence[str] = (),
        ignore_path: Optional[PathLike] = None,
        dot: Optional[bool] = None,
    ):
        """Initialize ignore service

        Args:
            config_manager: Configuration (discovered from cwd if None)
            cwd: Working directory (current dir if None)
            extra_patterns: Additional patterns, rooted ones relative to cwd
            ignore_path: Explicit ignore file, overrides the configured one
            dot: Overrides the configured dotfile policy when not None
        """
        self.cwd = os.path.abspath(cwd) if cwd is not None else os.getcwd()
        self.config_manager = config_manager or ConfigManager(cwd=Path(self.cwd))
        self.extra_patterns = list(extra_patterns)
        self.ignore_path = ignore_path
        ignore_config = self.config_manager.get_ignore_config()
        self.dot = ignore_config.dot if dot is None else dot
        self._predicate: Optional[IgnorePredicate] = None

    def collect_ignore_patterns(self) -> List[IgnorePattern]:
        """Collect IgnorePatterns from all sources, lowest precedence first"""
        ignore_config = self.config_manager.get_ignore_config()
        ignore_patterns = self.config_manager.get_ignore_patterns()

        if self.ignore_path is not None:
            ignore_patterns.append(load_ignore_file(Path(self.ignore_path)))
        elif ignore_config.use_ignore_file:
            candidate = Path(self.cwd) / ignore_config.ignore_file
            if candidate.is_file():
                ignore_patterns.append(load_ignore_file(candidate))
            else:
                logger.debug(f"No ignore file at {candidate}")

        if self.extra_patterns:
            ignore_patterns.append(IgnorePattern(self.extra_patterns, self.cwd))

        return ignore_patterns

    def build_predicate(self) -> IgnorePredicate:
        """Build (once) the predicate for this run

        Returns:
            IgnorePredicate instance
        """
        if self._predicate is None:
            self._predicate = IgnorePattern.create_ignore(
                self.collect_ignore_patterns(), cwd=self.cwd, dot=self.dot
            )
            logger.debug(f"Ignore root: {self._predicate.base_path}")
        return self._predicate

    def resolve_path(self, path: PathLike) -> str:
        """Make a path absolute against cwd

        A trailing separator is kept so that directory-only patterns apply.
        """
        raw = os.fspath(path)
        absolute = os.path.join(self.cwd, raw) if not os.path.isabs(raw) else raw
        absolute = os.path.normpath(absolute)
        if raw.endswith(("/", os.sep)) and not absolute.endswith(os.sep):
            absolute += os.sep
        return absolute

    def is_ignored(self, path: PathLike) -> bool:
        """Check if a path is ignored, resolving relative paths against cwd"""
        return self.build_predicate()(self.resolve_path(path))

    def filter_paths(self, paths: Iterable[PathLike]) -> Tuple[List[PathLike], List[PathLike]]:
        """Split paths into kept and ignored ones

        Args:
            paths: Paths to filter, in order

        Returns:
            Tuple of (kept_paths, ignored_paths)
        """
        kept = []
        ignored = []

        for path in paths:
            if self.is_ignored(path):
                ignored.append(path)
                logger.debug(f"Ignoring {path}")
            else:
                kept.append(path)

        if ignored:
            logger.info(f"Filtered out {len(ignored)} paths, {len(kept)} paths remaining")

        return kept, ignored
