"""
Domain models — Pydantic types for the generator.

    from suitegen.core.models import GeneratedFile, ScriptRequest, SuitegenConfig
"""

from suitegen.core.models.config import Defaults, SuitegenConfig
from suitegen.core.models.script import ScriptRequest
from suitegen.core.models.template import GeneratedFile

__all__ = [
    "Defaults",
    "GeneratedFile",
    "ScriptRequest",
    "SuitegenConfig",
]
