"""Main application configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from lintignore.domain.config.ignore import IgnoreConfig


class AppConfig(BaseModel):
    """Contents of one ``.lintignore.yml`` file.

    Validation is performed at load time to fail fast on configuration errors.

    Attributes:
        root: Stop looking for configuration files in parent directories
        ignore: Path filtering configuration
    """

    root: bool = False
    ignore: IgnoreConfig = Field(default_factory=IgnoreConfig)

    model_config = ConfigDict(
        validate_assignment=True,  # Validate on attribute assignment
        extra="forbid",  # Reject unknown fields
        json_schema_extra={
            "example": {
                "root": True,
                "ignore": {
                    "patterns": ["/dist/*", "*.min.js", "!/dist/keep.js"],
                    "dot": False,
                    "ignore_file": ".lintignore",
                    "use_ignore_file": True,
                },
            }
        },
    )
