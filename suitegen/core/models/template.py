"""
Generated file model — returned by every generator.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by a generator, not yet written to disk.

    Attributes:
        path:      Target path as given by the caller.
        content:   Full file content, byte-exact.
        overwrite: Whether to overwrite if already exists.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = False
    reason: str = ""
