"""The value every tzconv operation hands back to its caller.

A conversion either succeeds with display strings in ``data`` or fails
with a :class:`ServiceError` whose ``code`` is an
:class:`~tzconv.domain.types.ErrorCode`. Renderers and UI ports read only
this type, and ``--json`` prints it as-is.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable code plus a message for the user."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation (``convert``, ``zones`` or ``now``).

    ``error`` is set exactly when ``ok`` is False. ``warnings`` are
    non-fatal notes printed to stderr in human output.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
