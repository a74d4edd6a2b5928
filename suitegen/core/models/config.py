"""
Generator configuration model — loaded from .suitegen.yml.

Every field is optional: a missing file is the same as an empty one.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Defaults(BaseModel):
    """Fallback values for CLI options the user left out."""

    model_config = ConfigDict(extra="forbid")

    api_version: str | None = None
    script_type: str = ""
    copyright: str = ""       # relative to the config file's directory
    modules: list[str] = Field(default_factory=list)

    @field_validator("api_version", mode="before")
    @classmethod
    def _unquoted_version(cls, value: object) -> object:
        # YAML reads an unquoted 2.1 as a float
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class SuitegenConfig(BaseModel):
    """Root of .suitegen.yml."""

    version: int = 1
    defaults: Defaults = Field(default_factory=Defaults)

    # Set by the loader, not read from YAML
    root: Path | None = Field(default=None, exclude=True)

    def copyright_path(self) -> str:
        """The default copyright file, resolved against the config directory."""
        raw = self.defaults.copyright
        if not raw:
            return ""
        path = Path(raw).expanduser()
        if not path.is_absolute() and self.root is not None:
            path = self.root / path
        return str(path)
