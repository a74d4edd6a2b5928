"""
Central data registry for the SuiteScript reference catalogs.

Loads the static catalogs from ``suitegen/core/data/catalogs/`` once at
first access and caches them for the process lifetime.  The validator,
the normalizer and the CLI ``catalog`` commands all read from this single
source of truth; nothing else hard-codes a script type, API version or
module name.

Usage::

    from suitegen.core.data import get_registry

    registry = get_registry()
    registry.module_keys            # frozenset[str]
    registry.script_type_names      # {"mapreduce": "MapReduce", ...}
    registry.api_versions           # ("2.1", "2", "2.x", "2.0")
"""

from __future__ import annotations

import json
import logging
from functools import cached_property
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent


def _load_json(relative_path: str) -> list | dict:
    """Load a JSON file relative to the data directory."""
    path = _DATA_DIR / relative_path
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class DataRegistry:
    """Registry for the script type, API version and module catalogs.

    Each property lazily loads its JSON file on first access and caches
    the result for the lifetime of the instance.  Every collection handed
    out is immutable (tuple, frozenset or read-only mapping).
    """

    # ── Script types ─────────────────────────────────────────────

    @cached_property
    def _script_types(self) -> tuple[dict, ...]:
        data = _load_json("catalogs/script_types.json")
        logger.debug("Loaded %d script type definitions", len(data))
        return tuple(data)

    @cached_property
    def script_type_keys(self) -> tuple[str, ...]:
        """Lowercase script type keys in catalog order."""
        return tuple(entry["key"] for entry in self._script_types)

    @cached_property
    def script_type_names(self) -> Mapping[str, str]:
        """Lowercase key → display spelling (``'restlet'`` → ``'RESTlet'``)."""
        return MappingProxyType({e["key"]: e["name"] for e in self._script_types})

    @cached_property
    def entry_point_types(self) -> frozenset[str]:
        """Display names of the script types tagged with a ``Script`` suffix."""
        return frozenset(e["name"] for e in self._script_types if e.get("entry_point"))

    # ── API versions ─────────────────────────────────────────────

    @cached_property
    def _api_catalog(self) -> dict:
        data = _load_json("catalogs/api_versions.json")
        logger.debug("Loaded API versions: %s", data.get("versions"))
        return data

    @cached_property
    def api_versions(self) -> tuple[str, ...]:
        """Accepted ``@NApiVersion`` values, compared exactly."""
        return tuple(self._api_catalog["versions"])

    @cached_property
    def api_aliases(self) -> Mapping[str, str]:
        """Short forms rewritten at assembly time (``'2'`` → ``'2.0'``)."""
        return MappingProxyType(dict(self._api_catalog.get("aliases", {})))

    @cached_property
    def default_api_version(self) -> str:
        """API version used when neither the CLI nor the config gives one."""
        return self._api_catalog["default"]

    # ── Modules ──────────────────────────────────────────────────

    @cached_property
    def modules(self) -> tuple[str, ...]:
        """Lowercase ``N/`` module keys in catalog order."""
        data = _load_json("catalogs/modules.json")
        logger.debug("Loaded %d SuiteScript module keys", len(data))
        return tuple(data)

    @cached_property
    def module_keys(self) -> frozenset[str]:
        return frozenset(self.modules)

    @cached_property
    def module_display_names(self) -> Mapping[str, str]:
        """Lowercase key → camel-cased display form, for the keys that differ."""
        data = _load_json("catalogs/module_display_names.json")
        logger.debug("Loaded %d module display overrides", len(data))
        return MappingProxyType(data)


# ── Module-level singleton ───────────────────────────────────────

_registry: DataRegistry | None = None


def get_registry() -> DataRegistry:
    """Return the process-level DataRegistry singleton.

    Creates the instance on first call; subsequent calls return the
    same object.
    """
    global _registry  # noqa: PLW0603
    if _registry is None:
        _registry = DataRegistry()
    return _registry


# ── Convenience helpers ──────────────────────────────────────────


def is_script_type(value: str) -> bool:
    """Case-insensitive membership test against the script type catalog."""
    return value.lower() in get_registry().script_type_names


def is_api_version(value: str) -> bool:
    """Exact membership test against the API version catalog."""
    return value in get_registry().api_versions


def is_module(value: str) -> bool:
    """Case-insensitive membership test against the module catalog."""
    return value.lower() in get_registry().module_keys
