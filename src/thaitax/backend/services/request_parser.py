"""Helpers for extracting incoming calculation requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Request
from werkzeug.exceptions import BadRequest

from thaitax.backend.models import INVALID_BODY_ERROR


def parse_calculation_payload(req: Request) -> dict[str, Any]:
    """Extract a JSON object from ``req`` regardless of its declared mimetype."""

    data = req.get_json(force=True, silent=True)
    if data is None:
        raise BadRequest(INVALID_BODY_ERROR)
    if not isinstance(data, Mapping):
        raise BadRequest(INVALID_BODY_ERROR)

    return dict(data)
