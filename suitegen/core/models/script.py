"""
Script request model — the raw inputs of one generation run.

Values arrive exactly as the user typed them.  Nothing here is validated
or normalized; that is the job of ``suitegen.core.services.validation``
and ``suitegen.core.services.normalize``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScriptRequest(BaseModel):
    """One request to generate a SuiteScript file.

    ``api_version`` is ``None`` until a default has been applied; the
    pipeline resolves it exactly once, before validation.
    """

    path: str
    script_type: str = ""
    api_version: str | None = None
    modules: list[str] = Field(default_factory=list)
    copyright_path: str = ""

    def with_defaults(
        self,
        *,
        api_version: str,
        script_type: str = "",
        copyright_path: str = "",
    ) -> "ScriptRequest":
        """Return a copy with unset fields filled from the given defaults.

        Only unset (``None`` / empty) fields are filled.  A value the user
        supplied explicitly is never replaced, even if it is invalid.
        """
        return self.model_copy(
            update={
                "api_version": self.api_version if self.api_version is not None else api_version,
                "script_type": self.script_type or script_type,
                "copyright_path": self.copyright_path or copyright_path,
            }
        )
