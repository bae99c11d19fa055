"""Application ports package."""

from .dashboard_sink import DashboardSinkPort
from .document_source import (
    MonthlyDocumentSinkPort,
    MonthlyDocumentSourcePort,
)

__all__ = [
    "DashboardSinkPort",
    "MonthlyDocumentSinkPort",
    "MonthlyDocumentSourcePort",
]
