"""Ignore patterns configuration model."""

from typing import List

from pydantic import BaseModel, Field, field_validator


class IgnoreConfig(BaseModel):
    """Configuration for path filtering.

    Attributes:
        patterns: Gitignore-style patterns; rooted ones (``/build``) are
            relative to the directory of the config file
        dot: Whether dotfiles are linted (not ignored by default)
        ignore_file: Name of the pattern file looked up in the working directory
        use_ignore_file: Whether the pattern file is read at all
    """

    patterns: List[str] = Field(default_factory=list)
    dot: bool = False
    ignore_file: str = Field(".lintignore", min_length=1)
    use_ignore_file: bool = True

    @field_validator("patterns")
    @classmethod
    def _no_blank_patterns(cls, value: List[str]) -> List[str]:
        if any(not pattern.strip() for pattern in value):
            raise ValueError("patterns must not contain blank entries")
        return value
