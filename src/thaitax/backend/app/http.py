"""HTTP helper utilities shared across Flask blueprints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from flask import jsonify


@dataclass(frozen=True)
class ProblemResponse:
    """Error payload rendered as ``{"error": message}``."""

    error: str
    status: int

    def as_dict(self) -> dict[str, Any]:
        """Return the serialisable payload for this problem response."""

        return {"error": self.error}

    def to_response(self) -> tuple[Any, int]:
        """Convert the problem payload into a Flask response tuple."""

        return jsonify(self.as_dict()), self.status


def problem_response(error: str, *, status: int) -> ProblemResponse:
    """Build the error payload returned for rejected requests."""

    return ProblemResponse(error=error, status=status)


__all__ = ["ProblemResponse", "problem_response"]
