"""
Input validation — membership and filesystem checks for a ScriptRequest.

Every field has its own validator.  A validator returns None when the
value is acceptable and raises exactly one ``ValidationError`` subclass
when it is not.  ``validate_request`` runs all of them and collects the
failures, so a bad module name never hides a bad file extension.

The parent-directory probe in ``validate_file_path`` is the only place
that touches the filesystem; nothing is opened or created here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path, PurePath

from suitegen.core.data import is_api_version, is_module, is_script_type
from suitegen.core.models.script import ScriptRequest

logger = logging.getLogger(__name__)

SCRIPT_EXTENSION = "js"
COPYRIGHT_EXTENSION = "txt"


class ValidationError(Exception):
    """Base class for a rejected input field."""

    field: str = ""


class InvalidFileExtension(ValidationError):
    field = "path"


class ParentDirectoryMissing(ValidationError):
    field = "path"


class InvalidScriptType(ValidationError):
    field = "script_type"


class InvalidApiVersion(ValidationError):
    field = "api_version"


class InvalidModuleName(ValidationError):
    """Raised for the first module name not found in the catalog."""

    field = "modules"

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid module name: {name}")
        self.name = name


class InvalidCopyrightFileType(ValidationError):
    field = "copyright_path"


class CopyrightReadFailure(Exception):
    """Raised when the copyright file cannot be read.  Not a validation error:
    the path was acceptable, the read itself failed."""

    field = "copyright_path"


class ScriptWriteFailure(Exception):
    """Raised when a valid target path still cannot be written."""

    field = "path"


def _extension(path: str) -> str:
    return PurePath(path).suffix.lstrip(".")


def _parent_dir(path: str) -> str | None:
    """Directory part of ``path``, splitting on both separators on every OS.

    None when the path names a bare file (no separator at all).
    """
    cut = max(path.rfind("/"), path.rfind("\\"))
    if cut < 0:
        return None
    # "/foo.js" lives in the root directory
    return path[:cut] or path[0]


# ── Field validators ────────────────────────────────────────────


def validate_file_path(path: str) -> None:
    """The target must be a ``.js`` file whose parent directory exists."""
    ext = _extension(path)
    if not ext:
        raise InvalidFileExtension(f"File name missing extension: {path}")
    if ext != SCRIPT_EXTENSION:
        raise InvalidFileExtension(f"Invalid file type '.{ext}', expected .{SCRIPT_EXTENSION}: {path}")

    parent = _parent_dir(path)
    if parent is not None and not Path(parent).is_dir():
        raise ParentDirectoryMissing(f"Parent directory does not exist: {parent}")


def validate_script_type(raw: str) -> None:
    """Empty means "no script type"; anything else must be in the catalog."""
    if raw and not is_script_type(raw):
        raise InvalidScriptType(f"Invalid script type: {raw}")


def validate_api_version(raw: str) -> None:
    """Exact match only: ``'2.X'`` is not ``'2.x'``."""
    if not is_api_version(raw):
        raise InvalidApiVersion(f"Invalid API version: {raw}")


def validate_modules(names: Iterable[str]) -> None:
    """Reject the first unknown module, reporting it as typed."""
    for name in names:
        if name and not is_module(name):
            raise InvalidModuleName(name)


def validate_copyright_path(path: str) -> None:
    """Empty means "no copyright"; otherwise a ``.txt`` file is required.

    Existence is not checked here; reading it reports its own failure.
    """
    if path and _extension(path) != COPYRIGHT_EXTENSION:
        raise InvalidCopyrightFileType(
            f"Invalid copyright file type, expected .{COPYRIGHT_EXTENSION}: {path}"
        )


# ── Whole request ───────────────────────────────────────────────


def validate_request(request: ScriptRequest) -> list[ValidationError]:
    """Run every field validator and return all failures (empty when valid).

    ``request.api_version`` must already hold its default.
    """
    checks = (
        (validate_file_path, request.path),
        (validate_script_type, request.script_type),
        (validate_api_version, request.api_version or ""),
        (validate_modules, request.modules),
        (validate_copyright_path, request.copyright_path),
    )

    errors: list[ValidationError] = []
    for check, value in checks:
        try:
            check(value)
        except ValidationError as e:
            logger.debug("Rejected %s: %s", e.field, e)
            errors.append(e)
    return errors
