"""Unit tests for the shared HTTP error helper."""

from __future__ import annotations

from flask import Flask

from thaitax.backend.app.http import problem_response


def test_problem_response_renders_error_only(app: Flask) -> None:
    problem = problem_response("wht must be a positive number", status=400)

    with app.app_context():
        response, status = problem.to_response()

    assert status == 400
    assert response.get_json() == {"error": "wht must be a positive number"}
