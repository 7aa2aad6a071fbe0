"""Service-layer helpers for the ThaiTax backend."""

from .calculation_service import TaxValidationError, calculate_tax, run_calculation
from .request_parser import parse_calculation_payload
from .response_builder import build_calculation_response, build_response_body

__all__ = [
    "TaxValidationError",
    "calculate_tax",
    "run_calculation",
    "parse_calculation_payload",
    "build_calculation_response",
    "build_response_body",
]
