"""
Work item model — one discovered value object.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WorkItem(BaseModel):
    """A value-object declaration found by the upstream scanner.

    The same item may appear more than once in a run; each occurrence
    is rendered on its own.
    """

    model_config = ConfigDict(frozen=True)

    type_name: str
    underlying_type_name: str
