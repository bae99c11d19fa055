"""Port for publishing a computed dashboard."""

from typing import Protocol

from src.domain.models.snapshot import Dashboard


class DashboardSinkPort(Protocol):
    """Port exposing write access for computed dashboards."""

    def write(self, dashboard: Dashboard) -> str:
        """Persist the dashboard and return where it was written."""


__all__ = ["DashboardSinkPort"]
