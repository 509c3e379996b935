"""Infrastructure layer - output formatting."""

from .formatters import JsonExporter, PlacementReportFormatter, ValidationReportFormatter

__all__ = [
    "JsonExporter",
    "PlacementReportFormatter",
    "ValidationReportFormatter",
]
