"""
Generate use case — turn a raw ScriptRequest into a written SuiteScript file.

Pipeline:
    1. Apply defaults (CLI > .suitegen.yml > catalog default), once
    2. Validate every field, collecting all errors
    3. Read the copyright file, if any
    4. Normalize script type and module names
    5. Assemble the file content
    6. Write it (unless ``write=False``)

Nothing is written unless steps 2 and 3 succeed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from suitegen.core.data import get_registry
from suitegen.core.models.config import SuitegenConfig
from suitegen.core.models.script import ScriptRequest
from suitegen.core.models.template import GeneratedFile
from suitegen.core.services.generators.suitescript import generate_suitescript
from suitegen.core.services.normalize import normalize_modules, normalize_script_type
from suitegen.core.services.validation import (
    CopyrightReadFailure,
    ScriptWriteFailure,
    ValidationError,
    validate_request,
)

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of one generation run."""

    request: ScriptRequest | None = None
    file: GeneratedFile | None = None
    written: bool = False
    errors: list[Exception] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors and self.file is not None

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "path": self.request.path if self.request else None,
            "written": self.written,
            "reason": self.file.reason if self.file else None,
            "content": self.file.content if self.file else None,
            "errors": [
                {"field": getattr(e, "field", ""), "type": type(e).__name__, "message": str(e)}
                for e in self.errors
            ],
        }


def apply_defaults(request: ScriptRequest, config: SuitegenConfig | None = None) -> ScriptRequest:
    """Fill unset request fields from the config, then the catalog default.

    The module list is taken from the config only when the request has none.
    """
    config = config or SuitegenConfig()
    defaults = config.defaults

    resolved = request.with_defaults(
        api_version=defaults.api_version or get_registry().default_api_version,
        script_type=defaults.script_type,
        copyright_path=config.copyright_path(),
    )
    if not resolved.modules and defaults.modules:
        resolved = resolved.model_copy(update={"modules": list(defaults.modules)})
    return resolved


def read_copyright(path: str) -> str | None:
    """Read and trim the copyright file; empty path means no copyright.

    Raises:
        CopyrightReadFailure: If the file cannot be opened or decoded.
    """
    if not path:
        return None
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CopyrightReadFailure(f"Cannot read copyright file {path}: {e}") from e
    return text.strip()


def write_file(generated: GeneratedFile) -> Path:
    """Persist a generated file verbatim, overwriting any existing file."""
    target = Path(generated.path)
    if target.exists() and not generated.overwrite:
        raise FileExistsError(f"Refusing to overwrite {target}")
    # newline="" keeps the content byte-exact on every platform
    with open(target, "w", encoding="utf-8", newline="") as f:
        f.write(generated.content)
    return target


def generate_script(
    request: ScriptRequest,
    config: SuitegenConfig | None = None,
    *,
    write: bool = True,
) -> GenerateResult:
    """Run the full generation pipeline for one request.

    Args:
        request: Raw user input.
        config: Loaded .suitegen.yml, or None for built-in defaults only.
        write: If False, assemble the file but leave the disk untouched.

    Returns:
        GenerateResult; ``errors`` lists every rejected field, or the
        copyright read or file write failure.
    """
    resolved = apply_defaults(request, config)
    result = GenerateResult(request=resolved)

    errors: list[ValidationError] = validate_request(resolved)
    if errors:
        result.errors.extend(errors)
        logger.info("Rejected request for %s: %d invalid field(s)", resolved.path, len(errors))
        return result

    try:
        copyright_text = read_copyright(resolved.copyright_path)
    except CopyrightReadFailure as e:
        result.errors.append(e)
        logger.info("%s", e)
        return result

    result.file = generate_suitescript(
        resolved.path,
        api_version=resolved.api_version or "",
        script_type=normalize_script_type(resolved.script_type),
        modules=normalize_modules(resolved.modules),
        copyright_text=copyright_text,
    )

    if write:
        try:
            path = write_file(result.file)
        except OSError as e:
            failure = ScriptWriteFailure(f"Cannot write {resolved.path}: {e}")
            failure.__cause__ = e
            result.errors.append(failure)
            logger.info("%s", failure)
            return result
        result.written = True
        logger.info("Wrote %s (%d bytes)", path, len(result.file.content.encode("utf-8")))

    return result
