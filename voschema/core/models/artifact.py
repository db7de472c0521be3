"""
Artifact model — one unit of generated source handed to the host.
"""

from __future__ import annotations

from pydantic import BaseModel


class Artifact(BaseModel):
    """A source file produced by a generator.

    Attributes:
        name:    Fixed hint name the host files the source under.
        content: Full, ready-to-compile source text.
        reason:  Why this artifact was generated.
    """

    name: str
    content: str
    reason: str = ""
