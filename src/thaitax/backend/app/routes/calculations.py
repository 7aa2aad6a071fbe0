"""REST endpoint for tax calculations."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, request

from thaitax.backend.services import (
    build_calculation_response,
    parse_calculation_payload,
    run_calculation,
)

blueprint = Blueprint("calculations", __name__, url_prefix="/tax")


@blueprint.route("/calculations", methods=["POST"], provide_automatic_options=False)
def create_calculation() -> tuple[Any, int]:
    """Create a tax calculation using the submitted JSON payload."""

    payload = parse_calculation_payload(request)
    computation = run_calculation(payload)

    return build_calculation_response(computation)
