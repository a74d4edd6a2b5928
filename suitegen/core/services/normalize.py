"""
Name normalization — canonical display spellings for script types and modules.

Input is matched case-insensitively; output is the exact spelling that
must appear in the generated file.  These functions never reject
anything: call them only on values the validator has already accepted.
"""

from __future__ import annotations

from collections.abc import Iterable

from suitegen.core.data import get_registry


def normalize_script_type(raw: str) -> str | None:
    """Map a script type to its display spelling.

    ``'MAPREDUCE'`` → ``'MapReduce'``, ``'restlet'`` → ``'RESTlet'``.
    Empty or unknown input returns None (no script type declared).
    """
    return get_registry().script_type_names.get(raw.lower())


def normalize_module(raw: str) -> str:
    """Map a module name to its display form.

    Keys with a camel-cased override use it (``'currentrecord'`` →
    ``'currentRecord'``); every other key displays in lowercase.
    Idempotent: a display form normalizes to itself.
    """
    key = raw.lower()
    return get_registry().module_display_names.get(key, key)


def normalize_modules(names: Iterable[str]) -> list[str]:
    """Normalize a module list, preserving order and dropping empty entries."""
    return [normalize_module(name) for name in names if name]
