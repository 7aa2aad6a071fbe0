"""Render tax computations in the public response format."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from flask import Response, jsonify

from thaitax.backend.models import CalculationResponse, TaxComputation


def build_response_body(computation: TaxComputation) -> dict[str, Any]:
    """Return the JSON-ready ``{"tax", "taxLevel"}`` body for ``computation``."""

    response_model = CalculationResponse.model_validate(
        {
            "tax": computation.final_tax,
            "taxLevel": [level.as_level() for level in computation.levels],
        }
    )
    return response_model.model_dump(mode="json", by_alias=True)


def build_calculation_response(computation: TaxComputation) -> tuple[Response, int]:
    """Return a Flask JSON response tuple for ``computation``."""

    return jsonify(build_response_body(computation)), HTTPStatus.OK


__all__ = ["build_calculation_response", "build_response_body"]
