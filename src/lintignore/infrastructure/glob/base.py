"""Base glob engine interface"""

from abc import ABC, abstractmethod
from typing import List


class GlobEngine(ABC):
    """Abstract base class for ignore-pattern matching engines

    An engine accumulates gitignore-style patterns and answers whether a
    relative, ``/``-separated path is ignored by them. Later patterns take
    precedence over earlier ones.
    """

    @abstractmethod
    def add(self, pattern: str) -> None:
        """Append a pattern

        Args:
            pattern: Gitignore-style pattern (may start with ``!``)
        """
        pass

    @abstractmethod
    def ignores(self, relative_path: str) -> bool:
        """Check whether a path is ignored

        Args:
            relative_path: Path relative to the ignore root, ``/``-separated,
                with a trailing ``/`` for directories

        Returns:
            True if the last matching pattern ignores the path
        """
        pass

    @property
    @abstractmethod
    def patterns(self) -> List[str]:
        """Patterns added so far, in order"""
        pass

    def prepare(self) -> None:
        """Called once after the last pattern is added.

        Override in subclasses that compile patterns.
        """
        pass
