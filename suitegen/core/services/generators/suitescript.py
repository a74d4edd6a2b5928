"""
SuiteScript generator — assemble a SuiteScript 2.x boilerplate file.

Output layout, in fixed order::

    <copyright text>            (optional, followed by one blank line)
    /**
     * @NScriptType <tag>        (only when a script type is given)
     * @NApiVersion <version>
     */

    define([
      'N/<module>',             (one line per module, caller order)
    ], (<module>, <module>) => {

    });

The result is byte-exact for a given input: golden-file comparisons
depend on it.  Inputs must already be validated and normalized.
"""

from __future__ import annotations

from collections.abc import Sequence

from suitegen.core.data import get_registry
from suitegen.core.models.template import GeneratedFile

MODULE_NAMESPACE = "N/"
_INDENT = "  "
_PATH_SEPARATORS = ("/", "\\")


# ── Pieces ──────────────────────────────────────────────────────


def resolve_api_version(api_version: str) -> str:
    """Expand alias versions (``'2'`` → ``'2.0'``); others pass through."""
    return get_registry().api_aliases.get(api_version, api_version)


def script_type_tag(script_type: str) -> str:
    """``@NScriptType`` value: entry-point types carry a ``Script`` suffix."""
    if script_type in get_registry().entry_point_types:
        return f"{script_type}Script"
    return script_type


def format_header(script_type: str | None, api_version: str) -> str:
    lines = ["/**"]
    if script_type:
        lines.append(f" * @NScriptType {script_type_tag(script_type)}")
    lines.append(f" * @NApiVersion {resolve_api_version(api_version)}")
    lines.append(" */")
    return "\n".join(lines) + "\n"


def format_imports(modules: Sequence[str]) -> str:
    """One quoted, indented ``N/`` import per module, each ending in a comma."""
    return "".join(f"{_INDENT}'{MODULE_NAMESPACE}{name}',\n" for name in modules)


def format_args(modules: Sequence[str]) -> str:
    """Callback parameter list: display names without path separators."""
    args = []
    for name in modules:
        for sep in _PATH_SEPARATORS:
            name = name.replace(sep, "")
        args.append(name)
    return ", ".join(args)


def format_define(modules: Sequence[str]) -> str:
    return (
        "define([\n"
        f"{format_imports(modules)}"
        f"], ({format_args(modules)}) => {{\n"
        "\n"
        "});"
    )


# ── Whole file ──────────────────────────────────────────────────


def render_script(
    copyright_text: str | None,
    script_type: str | None,
    api_version: str,
    modules: Sequence[str],
) -> str:
    """Assemble the complete file content.

    Args:
        copyright_text: Copyright block, or None/empty for none.  Trimmed here.
        script_type: Display spelling (``'MapReduce'``), or None.
        api_version: A catalog API version; aliases are resolved here.
        modules: Display names in output order.
    """
    parts = []
    if copyright_text and copyright_text.strip():
        parts.append(copyright_text.strip() + "\n\n")
    parts.append(format_header(script_type, api_version))
    parts.append("\n")
    parts.append(format_define(modules))
    return "".join(parts)


def generate_suitescript(
    path: str,
    *,
    api_version: str,
    script_type: str | None = None,
    modules: Sequence[str] = (),
    copyright_text: str | None = None,
) -> GeneratedFile:
    """Generate a SuiteScript file.

    Returns:
        GeneratedFile for ``path``, always marked overwrite.
    """
    content = render_script(copyright_text, script_type, api_version, modules)

    described = script_type or "untyped"
    reason = f"Generated {described} SuiteScript {resolve_api_version(api_version)}"
    if modules:
        reason += f" importing {', '.join(modules)}"

    return GeneratedFile(
        path=path,
        content=content,
        overwrite=True,
        reason=reason,
    )
