"""Path helpers used to reconcile ignore patterns declared in different directories.

All functions work on path strings only; nothing here touches the file system.
Relative paths handed to the glob engine always use ``/`` as separator,
whatever the host platform is.
"""

import os
from typing import Sequence

from lintignore.domain.exceptions import InvalidArgumentError

_SEPARATORS = os.sep + (os.altsep or "")


def _is_sep(char: str) -> bool:
    return char in _SEPARATORS


def _strip_trailing_sep(path: str) -> str:
    """Remove trailing separators, keeping the root (``/`` or ``C:\\``) intact"""
    drive, tail = os.path.splitdrive(path)
    stripped = tail.rstrip(_SEPARATORS)
    if not stripped and tail:
        return drive + tail[0]
    return drive + stripped


def _truncate_at(path: str, sep_index: int) -> str:
    if sep_index < 0:
        # No shared root at all (e.g. different drives)
        return ""
    return _strip_trailing_sep(path[: sep_index + 1])


def _common_ancestor_of(a: str, b: str) -> str:
    if a == b:
        return a
    if not a or not b:
        return ""

    shorter, longer = (a, b) if len(a) < len(b) else (b, a)
    last_sep = -1
    for index, (char_a, char_b) in enumerate(zip(a, b)):
        if char_a != char_b:
            return _truncate_at(a, last_sep)
        if _is_sep(char_a):
            last_sep = index

    # `shorter` is a character prefix of `longer`; it is only an ancestor
    # when the match ends on a segment boundary ("/a/b" vs "/a/bc" is not).
    if _is_sep(shorter[-1]) or _is_sep(longer[len(shorter)]):
        return _strip_trailing_sep(shorter)
    return _truncate_at(shorter, last_sep)


def get_common_ancestor_path(source_paths: Sequence[str]) -> str:
    """Get the deepest directory shared by all given absolute paths

    Paths are compared segment by segment, so ``/foo/bar`` and ``/foo/barbaz``
    share ``/foo`` rather than ``/foo/bar``.

    Args:
        source_paths: Non-empty sequence of absolute paths

    Returns:
        Common ancestor path without a trailing separator (except for the root),
        or an empty string when the paths share no root (different drives)

    Raises:
        InvalidArgumentError: If no paths are given
    """
    if not source_paths:
        raise InvalidArgumentError("At least one path is required to compute a common ancestor.")

    result = source_paths[0]
    for path in source_paths[1:]:
        result = _common_ancestor_of(result, path)
    return _strip_trailing_sep(result) if result else result


def relative(from_path: str, to_path: str) -> str:
    """Make a relative path using ``/`` as separator

    Args:
        from_path: The source path
        to_path: The destination path

    Returns:
        The relative path, or an empty string if both paths are the same
    """
    try:
        rel_path = os.path.relpath(to_path, from_path)
    except ValueError as e:
        # Windows: paths on different drives
        raise InvalidArgumentError(f"Cannot relate '{to_path}' to '{from_path}': {e}") from e

    if rel_path == os.curdir:
        return ""
    if os.sep == "/":
        return rel_path
    return rel_path.replace(os.sep, "/")


def dir_suffix(file_path: str) -> str:
    """Get the trailing slash if the path denotes a directory"""
    if file_path and _is_sep(file_path[-1]):
        return "/"
    return ""
