"""Reading of gitignore-style pattern files (.lintignore)"""

import logging
import os
from pathlib import Path
from typing import List

from lintignore.domain.exceptions import ConfigurationError
from lintignore.domain.models.ignore_pattern import IgnorePattern

logger = logging.getLogger(__name__)


def read_patterns(path: Path) -> List[str]:
    """Read patterns from an ignore file

    Blank lines and comments (lines starting with ``#``) are dropped, trailing
    whitespace is stripped. Leading whitespace is significant in gitignore
    syntax and is kept.

    Args:
        path: Path to the ignore file

    Returns:
        Patterns in file order

    Raises:
        ConfigurationError: If the file cannot be read
    """
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except OSError as e:
        raise ConfigurationError(f"Failed to read ignore file: {path}") from e

    patterns = []
    for line in text.splitlines():
        stripped = line.rstrip()
        if not stripped or stripped.startswith("#"):
            continue
        patterns.append(stripped)
    return patterns


def load_ignore_file(path: Path) -> IgnorePattern:
    """Load an ignore file as an IgnorePattern anchored at its directory"""
    absolute = os.path.abspath(path)
    patterns = read_patterns(Path(absolute))
    logger.debug(f"Loaded {len(patterns)} patterns from {absolute}")
    return IgnorePattern(patterns, os.path.dirname(absolute))
